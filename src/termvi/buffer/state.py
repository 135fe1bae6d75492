"""Cursor, mode and chord state shared between the buffer and the modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"


def rightmost_column(mode: EditorMode, length: int) -> int:
    """Largest column the cursor may occupy on a line of ``length`` code points.

    Insert mode may sit one past the last character so text can be appended;
    every other mode rests on a character.
    """

    if mode is EditorMode.INSERT:
        return length
    return max(length - 1, 0)


@dataclass(slots=True)
class Cursor:
    """Buffer cursor expressed relative to the viewport.

    ``row`` (the document line) is ``visible_row + scroll_offset``.
    """

    column: int = 0
    visible_row: int = 0
    scroll_offset: int = 0

    @property
    def row(self) -> int:
        return self.visible_row + self.scroll_offset

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.column, self.visible_row, self.scroll_offset)


@dataclass(frozen=True, slots=True)
class PendingChord:
    """First half of a two-key Normal-mode command, or nothing."""

    key: Optional[str] = None

    @classmethod
    def awaiting(cls, key: str) -> "PendingChord":
        if not key:
            raise ValueError("chord key cannot be empty")
        return cls(key)

    @property
    def is_pending(self) -> bool:
        return self.key is not None

    def completes(self, key: str) -> bool:
        return self.key is not None and self.key == key


NO_CHORD = PendingChord()

__all__ = [
    "EditorMode",
    "Cursor",
    "PendingChord",
    "NO_CHORD",
    "rightmost_column",
]
