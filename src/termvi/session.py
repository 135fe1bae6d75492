"""Wiring for one editing session."""

from __future__ import annotations

from typing import Iterable, Optional

from termvi.buffer import CommandLineBuffer, TextBuffer
from termvi.cursor import CursorModel, Viewport
from termvi.modes import (
    CommandMode,
    InsertMode,
    ModeBus,
    ModeContext,
    ModeManager,
    NormalMode,
)
from termvi.storage import LineStore


def create_session(
    lines: Iterable[str],
    *,
    viewport: Optional[Viewport] = None,
    store: Optional[LineStore] = None,
    bus: Optional[ModeBus] = None,
) -> ModeManager:
    """Build the session aggregate and a ModeManager with all three modes.

    An empty line source becomes a single empty line. Normal mode is
    registered first so it is the initial mode.
    """

    context = ModeContext(
        document=TextBuffer.from_lines(lines),
        cursor=CursorModel(viewport or Viewport()),
        command_line=CommandLineBuffer(),
        bus=bus or ModeBus(),
        store=store,
    )
    manager = ModeManager(context)
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    manager.register_mode(CommandMode)
    return manager


__all__ = ["create_session"]
