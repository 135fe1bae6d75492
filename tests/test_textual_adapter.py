from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from termvi.adapters.textual import TextualEditorAdapter, TextualUIHooks, translate_key
from termvi.adapters.textual.app import render_frame
from termvi.buffer import EditorMode
from termvi.cursor import Viewport
from termvi.modes import KeyKind, ModeManager
from termvi.modes import base_mode as keys
from termvi.render import Frame
from termvi.session import create_session
from termvi.storage import FileStore


def make_manager(lines: List[str] | None = None, **kwargs: Any) -> ModeManager:
    return create_session(
        lines if lines is not None else ["hello"],
        viewport=Viewport(width=40, height=6),
        **kwargs,
    )


def test_translate_key_maps_named_keys_and_characters() -> None:
    assert translate_key("left").key == keys.LEFT
    assert translate_key("left").kind is KeyKind.DIRECTIONAL
    assert translate_key("ctrl+q").key == keys.QUIT
    assert translate_key("ctrl+c").key == keys.CANCEL
    assert translate_key("ctrl+h").key == keys.BACKSPACE

    literal = translate_key("a", "a")
    assert literal is not None and literal.is_printable

    tab = translate_key("tab", "\t")
    assert tab is not None and tab.is_control

    assert translate_key("f1") is None


def test_adapter_pushes_frame_after_each_key() -> None:
    manager = make_manager()
    frames: List[Frame] = []
    adapter = TextualEditorAdapter(manager, TextualUIHooks(update_frame=frames.append))

    adapter.handle_textual_key("i", character="i")
    adapter.handle_textual_key("x", character="x")
    adapter.handle_textual_key("escape")

    assert len(frames) == 4  # initial frame plus one per key
    assert frames[1].mode is EditorMode.INSERT
    assert frames[2].lines[0] == "xhello"
    assert frames[-1].mode is EditorMode.NORMAL
    assert frames[-1].cursor == (0, 0)


def test_adapter_drops_untranslatable_keys() -> None:
    manager = make_manager()
    frames: List[Frame] = []
    logs: List[str] = []
    adapter = TextualEditorAdapter(
        manager, TextualUIHooks(update_frame=frames.append, log=logs.append)
    )

    assert adapter.handle_textual_key("f5") is None

    assert len(frames) == 1
    assert any(line.startswith("drop ->") for line in logs)


def test_adapter_relays_command_events(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    manager = make_manager(["abc"], store=FileStore(target))
    events: List[tuple[str, object | None]] = []
    exits: List[bool] = []
    hooks = TextualUIHooks(
        update_frame=lambda _frame: None,
        exit=lambda: exits.append(True),
        handle_event=lambda name, payload: events.append((name, payload)),
    )
    adapter = TextualEditorAdapter(manager, hooks)

    for ch in ":wq":
        adapter.handle_textual_key(ch, character=ch)
    adapter.handle_textual_key("enter")

    assert ("command.submit", "wq") in events
    written = next(payload for name, payload in events if name == "command.write")
    assert isinstance(written, dict)
    assert written["path"] == target
    assert exits == [True]
    assert target.read_text(encoding="utf-8") == "abc\n"


def test_ctrl_q_exits_without_writing(tmp_path: Path) -> None:
    target = tmp_path / "untouched.txt"
    manager = make_manager(["abc"], store=FileStore(target))
    exits: List[bool] = []
    adapter = TextualEditorAdapter(
        manager,
        TextualUIHooks(update_frame=lambda _frame: None, exit=lambda: exits.append(True)),
    )

    adapter.handle_textual_key("i", character="i")
    adapter.handle_textual_key("ctrl+q")

    assert exits == [True]
    assert not target.exists()


def test_adapter_resize_updates_frame_geometry() -> None:
    manager = make_manager()
    frames: List[Frame] = []
    adapter = TextualEditorAdapter(manager, TextualUIHooks(update_frame=frames.append))

    adapter.handle_resize(100, 30)

    assert (frames[-1].width, frames[-1].height) == (100, 30)
    assert manager.context.document.snapshot() == ("hello",)


def test_adapter_emits_log_lines() -> None:
    manager = make_manager()
    logs: List[str] = []
    hooks = TextualUIHooks(update_frame=lambda _frame: None, log=logs.append)
    adapter = TextualEditorAdapter(manager, hooks)

    adapter.handle_textual_key("i", character="i")

    assert any(line.startswith("key ->") for line in logs)
    assert any("mode='insert'" in line for line in logs)


def test_status_event_reaches_host() -> None:
    manager = make_manager()
    events: List[Dict[str, Any]] = []
    hooks = TextualUIHooks(
        update_frame=lambda _frame: None,
        handle_event=lambda name, payload: events.append(
            {"name": name, "payload": payload}
        ),
    )
    adapter = TextualEditorAdapter(manager, hooks)

    for ch in ":nope":
        adapter.handle_textual_key(ch, character=ch)
    adapter.handle_textual_key("enter")

    statuses = [event["payload"] for event in events if event["name"] == "status"]
    assert statuses == ["Unknown command: nope"]


def test_render_frame_reverses_cursor_cell() -> None:
    frame = Frame(
        lines=("ab", "cd"),
        status="-- INSERT --",
        cursor=(2, 1),
        mode=EditorMode.INSERT,
        width=10,
        height=4,
    )

    text = render_frame(frame)

    assert text.plain == "ab\ncd \n\n-- INSERT --"
    assert any(str(span.style) == "reverse" for span in text.spans)
