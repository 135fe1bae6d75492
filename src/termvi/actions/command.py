"""Actions that evaluate colon command lines."""

from __future__ import annotations

from typing import Callable, Dict

from termvi.buffer import PROMPT, EditorMode
from termvi.modes.base_mode import ModeContext, ModeResult
from termvi.runtime import telemetry
from termvi.runtime.errors import PersistenceError

CommandHandler = Callable[[ModeContext], ModeResult]


def submit_command_line(context: ModeContext) -> ModeResult:
    """Run the buffered command. Clearing the line is the caller's job.

    The whole line, prompt included, must match; a line whose prompt was
    erased never runs a command.
    """

    line = context.command_line.text
    command = context.command_line.command
    context.bus.emit("command.submit", command)
    if line in ("", PROMPT):
        return ModeResult(
            consumed=True, switch_to=EditorMode.NORMAL, status="command_empty"
        )
    handler = _COMMAND_HANDLERS.get(line)
    if handler is None:
        return _unknown_command(context, command)
    with telemetry.span(
        "command::execute", component="commands", metadata={"command": command}
    ):
        return handler(context)


def _unknown_command(context: ModeContext, command: str) -> ModeResult:
    context.bus.emit("command.error", command)
    context.set_status(f"Unknown command: {command}")
    telemetry.record_event(
        "command.unknown",
        level="warning",
        data={"command": command},
        logger_name="termvi.actions.command",
    )
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="command_error",
        message=command,
    )


def write_document(context: ModeContext) -> bool:
    """Save through the session's store; report the outcome in the status line."""

    store = context.store
    if store is None:
        context.set_status("No file name")
        return False
    lines = context.document.snapshot()
    try:
        written = store.save(lines)
    except PersistenceError as exc:
        context.set_status(f"Error writing: {exc}")
        context.bus.emit("command.write_failed", {"path": exc.path, "error": str(exc)})
        return False
    context.document.mark_clean()
    context.set_status(f'"{store.path}" {len(lines)}L, {written}B written')
    context.bus.emit("command.write", {"path": store.path, "lines": len(lines)})
    return True


def _handle_write(context: ModeContext) -> ModeResult:
    ok = write_document(context)
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="command_write" if ok else "command_error",
        message=context.status,
    )


def _handle_quit(context: ModeContext) -> ModeResult:
    context.bus.emit("command.quit", {"dirty": context.document.dirty})
    return ModeResult(
        consumed=True,
        switch_to=EditorMode.NORMAL,
        status="command_quit",
        message="quit",
        quit=True,
    )


def _handle_wq(context: ModeContext) -> ModeResult:
    if not write_document(context):
        telemetry.get_logger("termvi.actions.command").warning(
            "write failed, staying open"
        )
        return ModeResult(
            consumed=True,
            switch_to=EditorMode.NORMAL,
            status="command_error",
            message=context.status,
        )
    return _handle_quit(context)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    ":w": _handle_write,
    ":q": _handle_quit,
    ":wq": _handle_wq,
}


__all__ = ["submit_command_line", "write_document"]
