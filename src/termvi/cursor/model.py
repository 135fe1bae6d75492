"""Cursor motions and mode-dependent column clamping."""

from __future__ import annotations

from typing import Optional

from termvi.buffer.document import TextBuffer
from termvi.buffer.state import Cursor, EditorMode, rightmost_column

from .viewport import Viewport, ViewportPolicy


class CursorModel:
    """Owns the buffer cursor and keeps it inside the document and viewport.

    Every motion takes the document and the active mode explicitly; the
    column limit always comes from ``rightmost_column``.
    """

    def __init__(
        self,
        viewport: Viewport,
        *,
        cursor: Optional[Cursor] = None,
        policy: Optional[ViewportPolicy] = None,
    ) -> None:
        self.viewport = viewport
        self.cursor = cursor or Cursor()
        self.policy = policy or ViewportPolicy()

    @property
    def row(self) -> int:
        return self.cursor.row

    @property
    def column(self) -> int:
        return self.cursor.column

    @property
    def position(self) -> tuple[int, int]:
        return (self.cursor.row, self.cursor.column)

    def limit(self, document: TextBuffer, mode: EditorMode) -> int:
        return rightmost_column(mode, document.line_length(self.cursor.row))

    def clamp(self, document: TextBuffer, mode: EditorMode) -> None:
        self.cursor.column = max(0, min(self.cursor.column, self.limit(document, mode)))

    def set_column(self, document: TextBuffer, mode: EditorMode, column: int) -> None:
        self.cursor.column = column
        self.clamp(document, mode)

    # horizontal

    def left(self) -> bool:
        if self.cursor.column == 0:
            return False
        self.cursor.column -= 1
        return True

    def right(self, document: TextBuffer, mode: EditorMode) -> bool:
        if self.cursor.column >= self.limit(document, mode):
            return False
        self.cursor.column += 1
        return True

    def line_start(self) -> None:
        self.cursor.column = 0

    def line_end(self, document: TextBuffer, mode: EditorMode) -> None:
        self.cursor.column = self.limit(document, mode)

    def word_left(self, document: TextBuffer, mode: EditorMode) -> None:
        line = document.get_line(self.cursor.row)
        self.left()
        if not line:
            return
        while self.cursor.column > 0 and line[self.cursor.column].isspace():
            self.left()
        while self.cursor.column > 0 and not line[self.cursor.column - 1].isspace():
            self.left()

    def word_right(self, document: TextBuffer, mode: EditorMode) -> None:
        line = document.get_line(self.cursor.row)
        self.right(document, mode)
        while (
            self.cursor.column < len(line)
            and line[self.cursor.column].isspace()
            and self.right(document, mode)
        ):
            pass
        while (
            self.cursor.column + 1 < len(line)
            and not line[self.cursor.column + 1].isspace()
        ):
            self.right(document, mode)

    # vertical

    def up(self, document: TextBuffer, mode: EditorMode) -> bool:
        moved = self.policy.step_up(self.cursor)
        if moved:
            self.clamp(document, mode)
        return moved

    def down(self, document: TextBuffer, mode: EditorMode) -> bool:
        moved = self.policy.step_down(self.cursor, self.viewport, document.line_count)
        if moved:
            self.clamp(document, mode)
        return moved

    def jump_to_row(self, document: TextBuffer, mode: EditorMode, row: int) -> None:
        row = max(0, min(row, document.line_count - 1))
        self.policy.reveal(self.cursor, self.viewport, row)
        self.clamp(document, mode)

    # housekeeping

    def reconcile(self, document: TextBuffer, mode: EditorMode) -> None:
        self.policy.reconcile(self.cursor, self.viewport, document.line_count)
        self.clamp(document, mode)

    def resize(
        self, width: int, height: int, document: TextBuffer, mode: EditorMode
    ) -> None:
        self.viewport.resize(width, height)
        self.reconcile(document, mode)


__all__ = ["CursorModel"]
