"""Command-line mode: accumulate a colon command, then run or drop it."""

from __future__ import annotations

from typing import Dict

from termvi.actions import command as command_actions
from termvi.actions import core as core_actions
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


class CommandMode(Mode):
    name = EditorMode.COMMAND

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("termvi.modes.command")
        self._handlers: Dict[str, Handler] = {
            ENTER: self._submit,
            BACKSPACE: self._backspace,
            ESC: lambda: core_actions.cancel_command_mode(self.context),
            CANCEL: lambda: core_actions.cancel_command_mode(self.context),
        }

    @property
    def current_command(self) -> str:
        return self.context.command_line.command

    def on_enter(self, previous: EditorMode | None) -> None:
        del previous
        self.context.bus.emit("command.start", None)

    def on_exit(self, next_mode: EditorMode | None) -> None:
        del next_mode
        self.context.command_line.reset()
        self.context.bus.emit("command.end", None)

    def handle_key(self, key: KeyInput) -> ModeResult:
        if key.kind is KeyKind.LITERAL:
            if key.is_control:
                return ModeResult(consumed=True, status="discarded")
            self.context.command_line.put(key.key)
            return ModeResult(consumed=True, status="editing")

        handler = self._handlers.get(key.key)
        if handler is None:
            return unhandled()
        return handler()

    def _backspace(self) -> ModeResult:
        self.context.command_line.backspace()
        return ModeResult(consumed=True, status="editing")

    def _submit(self) -> ModeResult:
        command = self.current_command
        try:
            result = command_actions.submit_command_line(self.context)
        finally:
            # Enter always leaves Command mode with an empty line, whatever ran.
            self.context.command_line.reset()
        self.logger.debug(f"submitted '{command}' -> {result.status}")
        result.switch_to = EditorMode.NORMAL
        return result
