"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

from termvi.buffer import (
    NO_CHORD,
    CommandLineBuffer,
    EditorMode,
    PendingChord,
    TextBuffer,
)
from termvi.cursor import CursorModel

if TYPE_CHECKING:
    from termvi.storage import LineStore

# Named keys understood by every mode.
LEFT = "LEFT"
RIGHT = "RIGHT"
UP = "UP"
DOWN = "DOWN"
ENTER = "ENTER"
ESC = "ESC"
BACKSPACE = "BACKSPACE"
QUIT = "QUIT"
CANCEL = "CANCEL"
RESIZE = "RESIZE"

DIRECTIONS = frozenset({LEFT, RIGHT, UP, DOWN})
CONTROL_KEYS = frozenset({ENTER, ESC, BACKSPACE, QUIT, CANCEL, RESIZE})


class KeyKind(str, Enum):
    DIRECTIONAL = "directional"
    CONTROL = "control"
    LITERAL = "literal"


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized input event passed to modes.

    ``key`` is a named key for directional and control events and the
    decoded code point for literals.
    """

    kind: KeyKind
    key: str
    is_control: bool = False
    size: Optional[Tuple[int, int]] = None

    @classmethod
    def directional(cls, name: str) -> "KeyInput":
        if name not in DIRECTIONS:
            raise ValueError(f"'{name}' is not a direction")
        return cls(KeyKind.DIRECTIONAL, name)

    @classmethod
    def control(cls, name: str) -> "KeyInput":
        if name not in CONTROL_KEYS:
            raise ValueError(f"'{name}' is not a control key")
        return cls(KeyKind.CONTROL, name)

    @classmethod
    def resize(cls, width: int, height: int) -> "KeyInput":
        return cls(KeyKind.CONTROL, RESIZE, size=(width, height))

    @classmethod
    def literal(cls, text: str) -> "KeyInput":
        if len(text) != 1:
            raise ValueError("literal input must be exactly one code point")
        return cls(KeyKind.LITERAL, text, is_control=is_control_char(text))

    @property
    def is_printable(self) -> bool:
        return self.kind is KeyKind.LITERAL and not self.is_control


def is_control_char(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """The single editing session every mode reads and mutates.

    Built once at startup and owned by the control loop; the save and render
    collaborators only ever receive it by reference.
    """

    document: TextBuffer
    cursor: CursorModel
    command_line: CommandLineBuffer
    bus: ModeBus
    store: Optional["LineStore"] = None
    mode: EditorMode = EditorMode.NORMAL
    pending: PendingChord = NO_CHORD
    status: str = ""

    def set_status(self, message: str) -> None:
        self.status = message
        self.bus.emit("status", message)

    def clamp_cursor(self) -> None:
        self.cursor.clamp(self.document, self.mode)


Handler = Callable[[], ModeResult]


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: EditorMode = EditorMode.NORMAL

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def document(self) -> TextBuffer:
        return self.context.document

    @property
    def cursor(self) -> CursorModel:
        return self.context.cursor

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[EditorMode]) -> None:
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


def unhandled() -> ModeResult:
    return ModeResult(consumed=False, status="miss", message="unhandled")
