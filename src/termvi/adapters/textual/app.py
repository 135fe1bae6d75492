"""Executable Textual app hosting the editor on one file."""

from __future__ import annotations

import argparse
import shutil
from typing import Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widget import Widget

from termvi.cursor import Viewport
from termvi.modes import ModeManager
from termvi.render import Frame
from termvi.runtime import EditorConfig, StartupError, telemetry
from termvi.session import create_session
from termvi.storage import FileStore

from .controller import TextualEditorAdapter, TextualUIHooks


def render_frame(frame: Frame) -> Text:
    """Paint a frame as one Text block with the cursor cell reversed."""

    content_rows = max(frame.height - 1, 0)
    rows = list(frame.lines[:content_rows])
    rows += [""] * (content_rows - len(rows))
    rows.append(frame.status)

    x, y = frame.cursor
    if 0 <= y < len(rows) and 0 <= x < frame.width:
        rows[y] = rows[y].ljust(x + 1)
    text = Text("\n".join(rows), no_wrap=True, overflow="crop")
    if 0 <= y < len(rows) and 0 <= x < frame.width:
        offset = sum(len(row) + 1 for row in rows[:y]) + x
        text.stylize("reverse", offset, offset + 1)
    return text


class EditorView(Widget):
    """Full-screen surface; repaints whatever frame it was last given."""

    can_focus = True

    def __init__(self, *, id: Optional[str] = None) -> None:
        super().__init__(id=id)
        self._frame: Optional[Frame] = None

    def show(self, frame: Frame) -> None:
        self._frame = frame
        self.refresh()

    def render(self) -> Text:
        if self._frame is None:
            return Text("")
        return render_frame(self._frame)


class TermviApp(App[None], inherit_bindings=False):
    """Textual host: every key goes to the engine, including Ctrl+Q/Ctrl+C."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
		width: 1fr;
	}
	"""

    BINDINGS = []

    def __init__(self, manager: ModeManager) -> None:
        super().__init__()
        self.manager = manager
        self.adapter: TextualEditorAdapter | None = None
        self._view: EditorView | None = None
        self._log = telemetry.get_logger("termvi.adapters.textual")

    def compose(self) -> ComposeResult:
        self._view = EditorView(id="editor")
        yield self._view

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            exit=self.exit,
            log=self._log.debug,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)
        if self._view is not None:
            self._view.focus()
        self.adapter.handle_resize(self.size.width, self.size.height)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.handle_resize(event.size.width, event.size.height)

    async def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        if self.adapter:
            self.adapter.handle_textual_key(event.key, character=event.character)

    def _update_frame(self, frame: Frame) -> None:
        if self._view is not None:
            self._view.show(frame)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termvi", description="Modal terminal text editor."
    )
    parser.add_argument("path", nargs="?", help="File to edit (created if missing)")
    parser.add_argument("--encoding", default=None, help="File encoding (utf-8)")
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Logging preset (default: production, logs to termvi.log)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        config = EditorConfig.from_args(args)
        telemetry.configure(preset=config.log_preset)
        store = FileStore(config.path, encoding=config.encoding)
        lines = store.open()
    except StartupError as exc:
        telemetry.record_event(
            "session.startup_failed", level="error", data={"error": str(exc)}
        )
        parser.exit(1, f"termvi: {exc}\n")

    size = shutil.get_terminal_size((80, 24))
    manager = create_session(
        lines,
        viewport=Viewport(max(size.columns, 1), max(size.lines, 1)),
        store=store,
    )
    telemetry.record_event(
        "session.start",
        data={"path": str(config.path), "lines": len(lines)},
    )
    TermviApp(manager).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
