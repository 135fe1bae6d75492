"""Frame snapshots handed to the rendering surface."""

from .frame import INSERT_BANNER, Frame, build_frame, status_text

__all__ = ["Frame", "build_frame", "status_text", "INSERT_BANNER"]
