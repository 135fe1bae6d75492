"""Buffer edits triggered from Normal and Insert mode.

Each verb applies one TextBuffer mutation and then moves the cursor so the
row, column and scroll invariants hold again before returning.
"""

from __future__ import annotations

from termvi.buffer import EditorMode
from termvi.modes.base_mode import ModeContext, ModeResult


def delete_char_under_cursor(context: ModeContext) -> ModeResult:
    row, col = context.cursor.position
    column = context.document.delete_char_at(row, col)
    context.cursor.set_column(context.document, context.mode, column)
    return ModeResult(consumed=True, status="delete_char")


def open_line_below(context: ModeContext) -> ModeResult:
    context.document.insert_line(context.cursor.row)
    context.cursor.down(context.document, context.mode)
    context.cursor.line_start()
    return ModeResult(
        consumed=True, switch_to=EditorMode.INSERT, message="open_line_below"
    )


def open_line_above(context: ModeContext) -> ModeResult:
    context.document.insert_line_above(context.cursor.row)
    context.cursor.line_start()
    return ModeResult(
        consumed=True, switch_to=EditorMode.INSERT, message="open_line_above"
    )


def delete_current_line(context: ModeContext) -> ModeResult:
    context.document.delete_line(context.cursor.row)
    context.cursor.line_start()
    context.cursor.reconcile(context.document, context.mode)
    return ModeResult(consumed=True, status="delete_line")


def insert_literal(context: ModeContext, ch: str) -> ModeResult:
    row, col = context.cursor.position
    context.document.insert_char(row, col, ch)
    context.cursor.cursor.column = col + 1
    return ModeResult(consumed=True, status="insert_char")


def break_line(context: ModeContext) -> ModeResult:
    row, col = context.cursor.position
    context.document.split_line(row, col)
    context.cursor.line_start()
    context.cursor.down(context.document, context.mode)
    return ModeResult(consumed=True, status="split_line")


def backspace(context: ModeContext) -> ModeResult:
    row, col = context.cursor.position
    join_at = context.document.delete_char_before(row, col)
    if join_at is None:
        context.cursor.left()
        return ModeResult(consumed=True, status="delete_char_before")
    context.cursor.up(context.document, context.mode)
    context.cursor.set_column(context.document, context.mode, join_at)
    return ModeResult(consumed=True, status="join_line")


__all__ = [
    "delete_char_under_cursor",
    "open_line_below",
    "open_line_above",
    "delete_current_line",
    "insert_literal",
    "break_line",
    "backspace",
]
