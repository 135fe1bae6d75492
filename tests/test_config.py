from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from textual.logging import TextualHandler

from termvi.adapters.textual.app import main
from termvi.runtime import EditorConfig, StartupError, telemetry


def make_args(**overrides: object) -> argparse.Namespace:
    values = {"path": "notes.txt", "encoding": None, "log_preset": None}
    values.update(overrides)
    return argparse.Namespace(**values)


def test_defaults_when_only_path_given() -> None:
    config = EditorConfig.from_args(make_args(), environ={})

    assert config.path == Path("notes.txt")
    assert config.encoding == "utf-8"
    assert config.log_preset == "production"


def test_environment_fills_unset_options() -> None:
    config = EditorConfig.from_args(
        make_args(),
        environ={"TERMVI_ENCODING": "latin-1", "TERMVI_LOG_PRESET": "Development"},
    )

    assert config.encoding == "latin-1"
    assert config.log_preset == "development"


def test_arguments_win_over_environment() -> None:
    config = EditorConfig.from_args(
        make_args(encoding="utf-16", log_preset="production"),
        environ={"TERMVI_ENCODING": "latin-1", "TERMVI_LOG_PRESET": "development"},
    )

    assert config.encoding == "utf-16"
    assert config.log_preset == "production"


def test_missing_path_is_a_startup_error() -> None:
    with pytest.raises(StartupError, match="missing required file path"):
        EditorConfig.from_args(make_args(path=None), environ={})


def test_unknown_preset_is_a_startup_error() -> None:
    with pytest.raises(StartupError):
        EditorConfig.from_args(make_args(), environ={"TERMVI_LOG_PRESET": "loud"})


def test_main_exits_with_status_one_without_path(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 1
    assert "missing required file path" in capsys.readouterr().err


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="loud")


def _reset_handlers() -> None:
    root = logging.getLogger("termvi")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.addHandler(logging.NullHandler())
    root.setLevel(logging.NOTSET)
    root.propagate = True


def test_production_preset_logs_to_file_only(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    log_file = tmp_path / "editor.log"
    monkeypatch.setenv("TERMVI_LOG_FILE", str(log_file))
    monkeypatch.delenv("TERMVI_LOG_LEVEL", raising=False)
    try:
        telemetry.configure(preset="production")
        telemetry.record_event("unit.check", data={"lines": 3}, logger_name="termvi.x")

        root = logging.getLogger("termvi")
        assert [type(h) for h in root.handlers] == [RotatingFileHandler]
        assert root.level == logging.INFO
        for handler in root.handlers:
            handler.flush()
        assert "event::unit.check lines=3" in log_file.read_text(encoding="utf-8")
    finally:
        _reset_handlers()


def test_development_preset_adds_textual_handler(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TERMVI_LOG_FILE", str(tmp_path / "dev.log"))
    monkeypatch.delenv("TERMVI_LOG_LEVEL", raising=False)
    try:
        telemetry.configure(preset="development")

        root = logging.getLogger("termvi")
        assert any(isinstance(h, TextualHandler) for h in root.handlers)
        assert root.level == logging.DEBUG
    finally:
        _reset_handlers()


def test_span_logs_failure_and_reraises(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="termvi")

    with pytest.raises(KeyError):
        with telemetry.span("unit::boom", logger_name="termvi.x", component="unit"):
            raise KeyError("gone")

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("span::fail unit::boom") for m in messages)
    assert any("component=unit" in m for m in messages)


def test_unknown_encoding_is_a_startup_error() -> None:
    with pytest.raises(StartupError, match="unknown encoding"):
        EditorConfig.from_args(make_args(encoding="no-such-codec"), environ={})


def test_main_exits_cleanly_on_unknown_encoding(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    target = tmp_path / "doc.txt"

    with pytest.raises(SystemExit) as excinfo:
        main([str(target), "--encoding", "no-such-codec"])

    assert excinfo.value.code == 1
    assert "unknown encoding" in capsys.readouterr().err
    assert not target.exists()
