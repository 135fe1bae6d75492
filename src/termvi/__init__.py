"""Modal terminal text editor: line buffer, cursor/viewport and mode dispatch."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "cursor",
    "modes",
    "render",
    "runtime",
    "session",
    "storage",
]

__version__ = "0.1.0"
