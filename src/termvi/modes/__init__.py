"""Mode manager and the three editor modes."""

from .base_mode import KeyInput, KeyKind, Mode, ModeBus, ModeContext, ModeResult
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .command_mode import CommandMode
from .mode_manager import ModeController, ModeManager

__all__ = [
    "KeyInput",
    "KeyKind",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "CommandMode",
    "ModeManager",
    "ModeController",
]
