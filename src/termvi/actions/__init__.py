"""High-level editing verbs reused across modes."""

from .core import (
    cancel_command_mode,
    enter_command_mode,
    enter_insert_mode,
    leave_insert_mode,
    noop_action,
)
from .editing import (
    backspace,
    break_line,
    delete_char_under_cursor,
    delete_current_line,
    insert_literal,
    open_line_above,
    open_line_below,
)
from .command import submit_command_line, write_document

__all__ = [
    "enter_insert_mode",
    "leave_insert_mode",
    "enter_command_mode",
    "cancel_command_mode",
    "noop_action",
    "delete_char_under_cursor",
    "open_line_below",
    "open_line_above",
    "delete_current_line",
    "insert_literal",
    "break_line",
    "backspace",
    "submit_command_line",
    "write_document",
]
