"""Error taxonomy for the editor."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class TermviError(RuntimeError):
    """Base class for every error the editor raises on purpose."""


class StartupError(TermviError):
    """Fatal: the session cannot start (no path given, path unusable)."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class PersistenceError(TermviError):
    """Writing the document failed; the session keeps running."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["TermviError", "StartupError", "PersistenceError"]
