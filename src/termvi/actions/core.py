"""Mode-switching verbs shared across modes."""

from __future__ import annotations

from termvi.buffer import EditorMode
from termvi.modes.base_mode import ModeContext, ModeResult


def enter_insert_mode(context: ModeContext) -> ModeResult:
    del context
    return ModeResult(
        consumed=True, switch_to=EditorMode.INSERT, message="enter_insert"
    )


def leave_insert_mode(context: ModeContext) -> ModeResult:
    # Step back so the cursor rests on the last inserted character.
    context.cursor.left()
    return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, message="exit_insert")


def interrupt_insert_mode(context: ModeContext) -> ModeResult:
    del context
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, message="interrupt_insert"
    )


def enter_command_mode(context: ModeContext) -> ModeResult:
    context.command_line.seed()
    context.status = ""
    return ModeResult(
        consumed=True, switch_to=EditorMode.COMMAND, message="enter_command"
    )


def cancel_command_mode(context: ModeContext) -> ModeResult:
    context.command_line.reset()
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, message="command_cancel"
    )


def noop_action(context: ModeContext) -> ModeResult:
    del context
    return ModeResult(consumed=True, status="noop")


__all__ = [
    "enter_insert_mode",
    "leave_insert_mode",
    "interrupt_insert_mode",
    "enter_command_mode",
    "cancel_command_mode",
    "noop_action",
]
