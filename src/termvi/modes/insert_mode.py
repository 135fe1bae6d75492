"""Insert mode: literal text goes straight into the buffer."""

from __future__ import annotations

from typing import Dict

from termvi.actions import core as core_actions
from termvi.actions import editing as editing_actions
from termvi.buffer import EditorMode
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


class InsertMode(Mode):
    name = EditorMode.INSERT

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("termvi.modes.insert")
        self._handlers: Dict[str, Handler] = {
            ENTER: lambda: editing_actions.break_line(self.context),
            BACKSPACE: lambda: editing_actions.backspace(self.context),
            ESC: lambda: core_actions.leave_insert_mode(self.context),
            CANCEL: lambda: core_actions.interrupt_insert_mode(self.context),
        }

    def handle_key(self, key: KeyInput) -> ModeResult:
        if key.kind is KeyKind.LITERAL:
            if key.is_control:
                self.logger.debug(f"dropped control character {ord(key.key):#04x}")
                return ModeResult(consumed=True, status="discarded")
            return editing_actions.insert_literal(self.context, key.key)

        handler = self._handlers.get(key.key)
        if handler is None:
            return unhandled()
        return handler()
