"""Viewport geometry and the cursor-then-pan scrolling policy."""

from __future__ import annotations

from dataclasses import dataclass

from termvi.buffer.state import Cursor


@dataclass(slots=True)
class Viewport:
    """Terminal size in cells. The last row is reserved for status text."""

    width: int = 80
    height: int = 24

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("viewport dimensions must be positive")

    @property
    def content_rows(self) -> int:
        return max(self.height - 1, 1)

    @property
    def last_visible_row(self) -> int:
        return self.content_rows - 1

    @property
    def status_row(self) -> int:
        return self.height - 1

    def resize(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("viewport dimensions must be positive")
        self.width = width
        self.height = height


class ViewportPolicy:
    """Decides whether vertical motion moves the cursor or pans the window.

    The cursor moves first; the window only pans once the cursor sits on the
    first or last visible row.
    """

    def step_down(self, cursor: Cursor, viewport: Viewport, line_count: int) -> bool:
        if cursor.row >= line_count - 1:
            return False
        if cursor.visible_row < viewport.last_visible_row:
            cursor.visible_row += 1
        else:
            cursor.scroll_offset += 1
        return True

    def step_up(self, cursor: Cursor) -> bool:
        if cursor.row == 0:
            return False
        if cursor.visible_row > 0:
            cursor.visible_row -= 1
        else:
            cursor.scroll_offset -= 1
        return True

    def reveal(self, cursor: Cursor, viewport: Viewport, row: int) -> None:
        """Put the cursor on document line ``row``, panning as little as possible."""

        last = viewport.last_visible_row
        offset = cursor.scroll_offset
        if row < offset:
            offset = row
        elif row > offset + last:
            offset = row - last
        cursor.scroll_offset = offset
        cursor.visible_row = row - offset

    def reconcile(self, cursor: Cursor, viewport: Viewport, line_count: int) -> None:
        """Restore the row invariants after a resize or a removed line."""

        row = min(cursor.row, line_count - 1)
        self.reveal(cursor, viewport, max(row, 0))


__all__ = ["Viewport", "ViewportPolicy"]
