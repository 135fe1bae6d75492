"""Normal mode: navigation, single-key commands and two-key chords."""

from __future__ import annotations

from typing import Dict

from termvi.actions import core as core_actions
from termvi.actions import editing as editing_actions
from termvi.buffer import NO_CHORD, EditorMode, PendingChord
from termvi.runtime import telemetry

from .base_mode import (
    BACKSPACE,
    CANCEL,
    ENTER,
    ESC,
    Handler,
    KeyInput,
    KeyKind,
    Mode,
    ModeContext,
    ModeResult,
    unhandled,
)


class NormalMode(Mode):
    name = EditorMode.NORMAL

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("termvi.modes.normal")
        self._handlers: Dict[str, Handler] = {
            "h": self._left,
            "l": self._right,
            "j": self._down,
            "k": self._up,
            "e": self._word_right,
            "b": self._word_left,
            "$": self._line_end,
            "0": self._line_start,
            "G": self._last_line,
            "i": lambda: core_actions.enter_insert_mode(self.context),
            "o": lambda: editing_actions.open_line_below(self.context),
            "O": lambda: editing_actions.open_line_above(self.context),
            "x": lambda: editing_actions.delete_char_under_cursor(self.context),
            ":": lambda: core_actions.enter_command_mode(self.context),
            ENTER: self._down,
            BACKSPACE: self._left,
            ESC: lambda: core_actions.noop_action(self.context),
            CANCEL: lambda: core_actions.noop_action(self.context),
        }
        self._chords: Dict[str, Handler] = {
            "d": lambda: editing_actions.delete_current_line(self.context),
            "g": self._first_line,
        }

    def on_enter(self, previous: EditorMode | None) -> None:
        del previous
        self.context.pending = NO_CHORD

    def on_exit(self, next_mode: EditorMode | None) -> None:
        del next_mode
        self.context.pending = NO_CHORD

    def handle_key(self, key: KeyInput) -> ModeResult:
        # Any key invalidates a half-typed chord unless it completes or re-arms it.
        pending = self.context.pending
        self.context.pending = NO_CHORD

        if key.kind is KeyKind.LITERAL and key.is_control:
            return unhandled()

        chord = self._chords.get(key.key) if key.kind is KeyKind.LITERAL else None
        if chord is not None:
            return self._chord(key.key, pending, chord)

        handler = self._handlers.get(key.key)
        if handler is None:
            return unhandled()
        return handler()

    def _chord(self, key: str, pending: PendingChord, action: Handler) -> ModeResult:
        if pending.completes(key):
            self.logger.debug(f"chord {key}{key}")
            return action()
        self.context.pending = PendingChord.awaiting(key)
        return ModeResult(consumed=True, status="pending", message=f"awaiting_{key}")

    def _motion(self, moved: bool) -> ModeResult:
        return ModeResult(consumed=True, status="motion" if moved else "noop")

    def _left(self) -> ModeResult:
        return self._motion(self.cursor.left())

    def _right(self) -> ModeResult:
        return self._motion(self.cursor.right(self.document, self.name))

    def _up(self) -> ModeResult:
        return self._motion(self.cursor.up(self.document, self.name))

    def _down(self) -> ModeResult:
        return self._motion(self.cursor.down(self.document, self.name))

    def _word_left(self) -> ModeResult:
        self.cursor.word_left(self.document, self.name)
        return self._motion(True)

    def _word_right(self) -> ModeResult:
        self.cursor.word_right(self.document, self.name)
        return self._motion(True)

    def _line_start(self) -> ModeResult:
        self.cursor.line_start()
        return self._motion(True)

    def _line_end(self) -> ModeResult:
        self.cursor.line_end(self.document, self.name)
        return self._motion(True)

    def _first_line(self) -> ModeResult:
        self.cursor.line_start()
        self.cursor.jump_to_row(self.document, self.name, 0)
        return self._motion(True)

    def _last_line(self) -> ModeResult:
        self.cursor.line_start()
        self.cursor.jump_to_row(self.document, self.name, self.document.line_count - 1)
        return self._motion(True)
