from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

from termvi.buffer import EditorMode
from termvi.cursor import Viewport
from termvi.modes import KeyInput, ModeManager, ModeResult
from termvi.modes import base_mode as keys
from termvi.runtime.errors import PersistenceError
from termvi.session import create_session
from termvi.storage import FileStore, LineStore

ENTER = KeyInput.control(keys.ENTER)


class RecordingStore:
    def __init__(self, path: Path, *, fail_with: str | None = None) -> None:
        self.path = path
        self.fail_with = fail_with
        self.saved: List[Tuple[str, ...]] = []

    def save(self, lines: Sequence[str]) -> int:
        if self.fail_with:
            raise PersistenceError(self.fail_with, path=self.path)
        self.saved.append(tuple(lines))
        return sum(len(line) + 1 for line in lines)


def make_manager(
    lines: List[str], *, store: LineStore | None = None
) -> Tuple[ModeManager, List[Tuple[str, object | None]]]:
    manager = create_session(lines, viewport=Viewport(80, 10), store=store)
    events: List[Tuple[str, object | None]] = []
    for name in (
        "command.submit",
        "command.write",
        "command.write_failed",
        "command.error",
        "command.quit",
        "session.quit",
    ):
        manager.context.bus.subscribe(
            name, lambda payload, name=name: events.append((name, payload))
        )
    return manager, events


def run_command(manager: ModeManager, command: str) -> ModeResult:
    manager.handle_key(KeyInput.literal(":"))
    for ch in command:
        manager.handle_key(KeyInput.literal(ch))
    return manager.handle_key(ENTER)


def event_names(events: List[Tuple[str, object | None]]) -> List[str]:
    return [name for name, _payload in events]


def test_write_and_quit_on_empty_document(tmp_path: Path) -> None:
    target = tmp_path / "new.txt"
    manager, events = make_manager([""], store=FileStore(target))

    result = run_command(manager, "wq")

    assert target.read_text(encoding="utf-8") == "\n"
    assert result.quit is True
    assert ("command.submit", "wq") in events
    assert event_names(events)[-1] == "session.quit"
    assert manager.context.mode is EditorMode.NORMAL


def test_write_keeps_session_running(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    manager, events = make_manager(["one", "two"], store=FileStore(target))
    manager.handle_key(KeyInput.literal("x"))

    result = run_command(manager, "w")

    assert target.read_text(encoding="utf-8") == "ne\ntwo\n"
    assert result.quit is False
    assert result.status == "command_write"
    assert manager.context.document.dirty is False
    assert manager.context.status == f'"{target}" 2L, 7B written'
    assert "session.quit" not in event_names(events)
    written = next(payload for name, payload in events if name == "command.write")
    assert isinstance(written, dict)
    assert written["lines"] == 2


def test_quit_does_not_write(tmp_path: Path) -> None:
    store = RecordingStore(tmp_path / "doc.txt")
    manager, events = make_manager(["a"], store=store)

    result = run_command(manager, "q")

    assert result.quit is True
    assert store.saved == []
    assert "command.quit" in event_names(events)
    assert "session.quit" in event_names(events)


def test_unknown_command_reports_and_returns_to_normal() -> None:
    manager, events = make_manager(["a"])

    result = run_command(manager, "foo")

    assert result.quit is False
    assert result.status == "command_error"
    assert manager.context.status == "Unknown command: foo"
    assert manager.context.mode is EditorMode.NORMAL
    assert manager.context.command_line.text == ""
    assert ("command.error", "foo") in events


def test_empty_command_is_ignored() -> None:
    manager, events = make_manager(["a"])

    result = run_command(manager, "")

    assert result.status == "command_empty"
    assert manager.context.mode is EditorMode.NORMAL
    assert manager.context.status == ""
    assert ("command.submit", "") in events


def test_commands_are_exact_matches() -> None:
    store = RecordingStore(Path("doc.txt"))
    manager, _events = make_manager(["a"], store=store)

    result = run_command(manager, "w ")

    assert store.saved == []
    assert result.quit is False
    assert manager.context.status == "Unknown command: w "


def test_write_failure_is_reported_and_document_kept(tmp_path: Path) -> None:
    store = RecordingStore(tmp_path / "doc.txt", fail_with="disk full")
    manager, events = make_manager(["keep me"], store=store)
    manager.handle_key(KeyInput.literal("x"))

    result = run_command(manager, "w")

    assert result.status == "command_error"
    assert manager.context.status == "Error writing: disk full"
    assert manager.context.document.snapshot() == ("eep me",)
    assert manager.context.document.dirty is True
    assert "command.write_failed" in event_names(events)


def test_wq_stays_open_when_write_fails(tmp_path: Path) -> None:
    # Writing to a directory path fails with an OSError.
    manager, events = make_manager(["a"], store=FileStore(tmp_path))

    result = run_command(manager, "wq")

    assert result.quit is False
    assert manager.context.status.startswith("Error writing:")
    assert "session.quit" not in event_names(events)
    assert manager.context.mode is EditorMode.NORMAL


def test_unencodable_write_keeps_file_on_disk(tmp_path: Path) -> None:
    target = tmp_path / "precious.txt"
    target.write_text("precious\n", encoding="ascii")
    store = FileStore(target, encoding="ascii")
    manager, _events = make_manager(["precious"], store=store)
    for key in ("i", "é"):
        manager.handle_key(KeyInput.literal(key))
    manager.handle_key(KeyInput.control(keys.ESC))

    result = run_command(manager, "wq")

    assert result.quit is False
    assert manager.context.status.startswith("Error writing:")
    assert target.read_text(encoding="ascii") == "precious\n"
    assert manager.context.document.snapshot() == ("éprecious",)


def test_write_without_store_reports_missing_file_name() -> None:
    manager, _events = make_manager(["a"])

    result = run_command(manager, "w")

    assert result.status == "command_error"
    assert manager.context.status == "No file name"


def test_status_cleared_when_next_command_starts(tmp_path: Path) -> None:
    manager, _events = make_manager(["a"], store=RecordingStore(tmp_path / "a"))
    run_command(manager, "w")
    assert manager.context.status

    manager.handle_key(KeyInput.literal(":"))

    assert manager.context.status == ""
