"""Telemetry, configuration and error types shared by the whole editor."""

from . import telemetry
from .config import EditorConfig
from .errors import PersistenceError, StartupError, TermviError

__all__ = [
    "telemetry",
    "EditorConfig",
    "TermviError",
    "StartupError",
    "PersistenceError",
]
