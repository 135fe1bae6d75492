"""Line storage for the editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .validation import BufferValidationError, ensure_position, ensure_row


@dataclass(slots=True)
class TextBuffer:
    """Ordered, mutable list of lines; never holds fewer than one line.

    Operations work on code points and do no character filtering. Control
    characters are rejected by the modes before they get here.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TextBuffer":
        return cls(_lines=list(lines))

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls.from_lines(text.splitlines())

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def line_length(self, index: int) -> int:
        return len(self._lines[index])

    def mark_clean(self) -> None:
        self.dirty = False

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True

    def insert_char(self, row: int, col: int, ch: str) -> None:
        ensure_position(self._lines, row, col)
        if len(ch) != 1:
            raise BufferValidationError(
                "insert_char expects a single code point", position=(row, col)
            )
        line = self._lines[row]
        self._lines[row] = line[:col] + ch + line[col:]
        self._touch()

    def delete_char_before(self, row: int, col: int) -> Optional[int]:
        """Backspace at ``(row, col)``.

        Returns the previous line's original length when the line was joined
        onto it, ``None`` otherwise (including the no-op at the very start).
        """

        ensure_position(self._lines, row, col)
        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[: col - 1] + line[col:]
            self._touch()
            return None
        if row == 0:
            return None
        return self.join_lines(row - 1)

    def delete_char_at(self, row: int, col: int) -> int:
        """Delete the code point under ``col`` and return the column to use next."""

        ensure_row(self._lines, row)
        line = self._lines[row]
        if not line or col < 0 or col >= len(line):
            return max(0, min(col, len(line) - 1))
        updated = line[:col] + line[col + 1 :]
        self._lines[row] = updated
        self._touch()
        if not updated:
            return 0
        if col >= len(updated):
            return len(updated) - 1
        return col

    def split_line(self, row: int, col: int) -> None:
        ensure_position(self._lines, row, col)
        line = self._lines[row]
        self._lines[row : row + 1] = [line[:col], line[col:]]
        self._touch()

    def join_lines(self, row: int) -> int:
        """Append line ``row + 1`` onto ``row``; return the join column."""

        ensure_row(self._lines, row + 1)
        join_at = len(self._lines[row])
        self._lines[row] += self._lines.pop(row + 1)
        self._touch()
        return join_at

    def insert_line(self, row: int) -> None:
        ensure_row(self._lines, row)
        self._lines.insert(row + 1, "")
        self._touch()

    def insert_line_above(self, row: int) -> None:
        ensure_row(self._lines, row)
        self._lines.insert(row, "")
        self._touch()

    def delete_line(self, row: int) -> None:
        ensure_row(self._lines, row)
        if len(self._lines) > 1:
            del self._lines[row]
        else:
            self._lines[0] = ""
        self._touch()


__all__ = ["TextBuffer"]
