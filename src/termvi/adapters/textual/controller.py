"""Bridges Textual key events to the ModeManager and frames back to the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from termvi.modes import KeyInput, ModeManager, ModeResult
from termvi.modes import base_mode as keys
from termvi.render import Frame, build_frame


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter drives to update the Textual surface."""

    update_frame: Callable[[Frame], None]
    exit: Callable[[], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Realtime debug lines a host may surface or forward to a log.
    log: Callable[[str], None] = _noop


TEXTUAL_KEYS: Dict[str, KeyInput] = {
    "left": KeyInput.directional(keys.LEFT),
    "right": KeyInput.directional(keys.RIGHT),
    "up": KeyInput.directional(keys.UP),
    "down": KeyInput.directional(keys.DOWN),
    "enter": KeyInput.control(keys.ENTER),
    "escape": KeyInput.control(keys.ESC),
    "backspace": KeyInput.control(keys.BACKSPACE),
    "ctrl+h": KeyInput.control(keys.BACKSPACE),
    "ctrl+q": KeyInput.control(keys.QUIT),
    "ctrl+c": KeyInput.control(keys.CANCEL),
}


def translate_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Map a Textual key name (plus decoded character) onto a ``KeyInput``.

    Returns ``None`` for anything that is neither a known named key nor a
    single code point; such input is dropped.
    """

    named = TEXTUAL_KEYS.get(key)
    if named is not None:
        return named
    if character is not None and len(character) == 1:
        return KeyInput.literal(character)
    return None


class TextualEditorAdapter:
    """Feeds events into the ModeManager and pushes a fresh Frame after each."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    @property
    def frame(self) -> Frame:
        return build_frame(self.manager.context)

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ModeResult]:
        event = translate_key(key, character)
        if event is None:
            self._log_state("drop ->", key=key, character=character)
            return None
        return self.dispatch(event)

    def handle_resize(self, width: int, height: int) -> ModeResult:
        return self.dispatch(KeyInput.resize(width, height))

    def dispatch(self, event: KeyInput) -> ModeResult:
        self._log_state("key ->", key=event.key, kind=event.kind.value)
        result = self.manager.handle_key(event)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to.value if result.switch_to else None,
        )
        self.refresh()
        return result

    def refresh(self) -> None:
        self.hooks.update_frame(self.frame)

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "command.submit",
            "command.write",
            "command.write_failed",
            "command.error",
            "command.quit",
            "status",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        bus.subscribe("session.quit", lambda _payload: self.hooks.exit())

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        context = self.manager.context
        return {
            "mode": context.mode.value,
            "cursor": context.cursor.cursor.as_tuple(),
            "pending": context.pending.key,
            "command": context.command_line.text,
            "lines": context.document.line_count,
            "version": context.document.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "translate_key"]
