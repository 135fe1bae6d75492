"""Line storage, command-line text and the small state types around them."""

from .command_line import PROMPT, CommandLineBuffer
from .document import TextBuffer
from .state import NO_CHORD, Cursor, EditorMode, PendingChord, rightmost_column
from .validation import BufferValidationError, ensure_position, ensure_row

__all__ = [
    "TextBuffer",
    "CommandLineBuffer",
    "PROMPT",
    "Cursor",
    "EditorMode",
    "PendingChord",
    "NO_CHORD",
    "rightmost_column",
    "BufferValidationError",
    "ensure_position",
    "ensure_row",
]
