"""Cursor motions and viewport scrolling."""

from .model import CursorModel
from .viewport import Viewport, ViewportPolicy

__all__ = ["CursorModel", "Viewport", "ViewportPolicy"]
