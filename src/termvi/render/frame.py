"""Read-only snapshot of what the terminal should show for one frame."""

from __future__ import annotations

from dataclasses import dataclass

from termvi.buffer import EditorMode
from termvi.modes.base_mode import ModeContext

INSERT_BANNER = "-- INSERT --"


@dataclass(frozen=True, slots=True)
class Frame:
    lines: tuple[str, ...]
    status: str
    cursor: tuple[int, int]  # (x, y) in screen cells
    mode: EditorMode
    width: int
    height: int


def status_text(context: ModeContext) -> str:
    if context.mode is EditorMode.COMMAND:
        return context.command_line.text
    if context.status:
        return context.status
    if context.mode is EditorMode.INSERT:
        return INSERT_BANNER
    return ""


def build_frame(context: ModeContext) -> Frame:
    """Slice the visible lines and place the blinking cursor.

    Never mutates ``context``; lines wider than the viewport are clipped.
    """

    viewport = context.cursor.viewport
    cursor = context.cursor.cursor
    start = cursor.scroll_offset
    visible = context.document.snapshot()[start : start + viewport.content_rows]
    lines = tuple(line[: viewport.width] for line in visible)

    if context.mode is EditorMode.COMMAND:
        position = (context.command_line.cursor_column, viewport.status_row)
    else:
        position = (cursor.column, cursor.visible_row)

    return Frame(
        lines=lines,
        status=status_text(context)[: viewport.width],
        cursor=position,
        mode=context.mode,
        width=viewport.width,
        height=viewport.height,
    )


__all__ = ["Frame", "build_frame", "status_text", "INSERT_BANNER"]
