"""Mode manager coordinating the Normal/Insert/Command state machine."""

from __future__ import annotations

from typing import Dict, Optional, Type

from termvi.buffer import NO_CHORD, EditorMode
from termvi.runtime import telemetry

from .base_mode import (
    DOWN,
    LEFT,
    QUIT,
    RESIZE,
    RIGHT,
    UP,
    KeyInput,
    KeyKind,
    Mode,
    ModeContext,
    ModeResult,
)


class ModeManager:
    """Owns the active mode, applies global keys and dispatches the rest.

    Global keys (immediate quit, arrows, resize) behave the same in every
    mode; everything else goes to the active mode's handler table. After
    each event the cursor is clamped for whatever mode is active.
    """

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[EditorMode, Mode] = {}
        self._active: Optional[EditorMode] = None
        self.logger = telemetry.get_logger("termvi.modes")

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(self, mode_cls: Type[Mode], /, **mode_kwargs: object) -> Mode:
        mode = mode_cls(self.context, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            self.context.mode = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: EditorMode) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self.context.mode = name
        self._modes[name].on_enter(previous.name if previous else None)
        self.context.clamp_cursor()
        telemetry.record_event(
            "mode.switch", data={"mode": name.value}, logger_name="termvi.modes"
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name.value}",
            component=True,
            metadata={"key": key.key, "mode": mode.name.value},
        ):
            result = self._handle_global(key)
            if result is None:
                result = mode.handle_key(key)
        return self._after_mode_result(result)

    def _handle_global(self, key: KeyInput) -> Optional[ModeResult]:
        ctx = self.context
        if key.kind is KeyKind.DIRECTIONAL:
            ctx.pending = NO_CHORD
            moved = {
                LEFT: lambda: ctx.cursor.left(),
                RIGHT: lambda: ctx.cursor.right(ctx.document, ctx.mode),
                UP: lambda: ctx.cursor.up(ctx.document, ctx.mode),
                DOWN: lambda: ctx.cursor.down(ctx.document, ctx.mode),
            }[key.key]()
            return ModeResult(consumed=True, status="motion" if moved else "noop")

        if key.kind is KeyKind.CONTROL and key.key == QUIT:
            return ModeResult(consumed=True, status="quit", message="quit", quit=True)

        if key.kind is KeyKind.CONTROL and key.key == RESIZE:
            if key.size is not None:
                width, height = key.size
                ctx.cursor.resize(width, height, ctx.document, ctx.mode)
            return ModeResult(consumed=True, status="resize")

        return None

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        if result.switch_to:
            self.switch_mode(result.switch_to)
        self.context.clamp_cursor()
        if result.quit:
            self.logger.info("quit requested")
            self.context.bus.emit("session.quit", {"dirty": self.context.document.dirty})
        return result


ModeController = ModeManager
