"""Precondition checks shared by the buffer operations."""

from __future__ import annotations

from typing import Optional, Sequence

from termvi.runtime.errors import TermviError


class BufferValidationError(TermviError):
    """Raised when a caller hands the buffer an out-of-range position."""

    def __init__(
        self, message: str, *, position: Optional[tuple[int, int]] = None
    ) -> None:
        super().__init__(message)
        self.position = position


def ensure_row(lines: Sequence[str], row: int) -> int:
    if row < 0 or row >= len(lines):
        raise BufferValidationError("Row out of range", position=(row, 0))
    return row


def ensure_position(lines: Sequence[str], row: int, col: int) -> tuple[int, int]:
    """Check that ``col`` is a valid insertion point on line ``row``."""

    ensure_row(lines, row)
    if col < 0 or col > len(lines[row]):
        raise BufferValidationError("Column out of range", position=(row, col))
    return (row, col)
