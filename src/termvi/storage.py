"""File-system collaborator: loads the line source and persists saves."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Protocol, Sequence

from termvi.runtime import telemetry
from termvi.runtime.errors import PersistenceError, StartupError


class LineStore(Protocol):
    """What the command layer needs in order to save the document."""

    path: Path

    def save(self, lines: Sequence[str]) -> int:
        """Persist ``lines`` and return the number of bytes written."""
        ...


def split_lines(text: str) -> List[str]:
    """Split file contents on ``\\n``; a final terminator does not add a line."""

    if not text:
        return [""]
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def join_lines(lines: Sequence[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


class FileStore:
    """Reads and writes the single file an editing session works on."""

    def __init__(self, path: Path | str, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def open(self) -> List[str]:
        """Return the file's lines, creating the file when it does not exist."""

        with telemetry.span(
            "storage::open", component="storage", metadata={"path": self.path}
        ):
            try:
                if not self.path.exists():
                    self.path.touch()
                    telemetry.get_logger("termvi.storage").info(f"created {self.path}")
                with open(self.path, "r", encoding=self.encoding, newline="") as fh:
                    text = fh.read()
            except (OSError, UnicodeDecodeError, LookupError) as exc:
                raise StartupError(
                    f"cannot open {self.path}: {exc}", path=self.path
                ) from exc
        lines = split_lines(text)
        telemetry.record_event(
            "storage.open",
            data={"path": str(self.path), "lines": len(lines)},
            logger_name="termvi.storage",
        )
        return lines

    def save(self, lines: Sequence[str]) -> int:
        """Replace the file with ``lines``; on failure the old file is intact."""

        with telemetry.span(
            "storage::save", component="storage", metadata={"path": self.path}
        ) as handle:
            try:
                payload = join_lines(lines).encode(self.encoding)
                self._replace(payload)
            except (OSError, UnicodeEncodeError) as exc:
                handle.warn(str(exc))
                raise PersistenceError(str(exc), path=self.path) from exc
        written = len(payload)
        telemetry.record_event(
            "storage.save",
            data={"path": str(self.path), "lines": len(lines), "bytes": written},
            logger_name="termvi.storage",
        )
        return written

    def _replace(self, payload: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def load_lines(path: Path | str, *, encoding: str = "utf-8") -> List[str]:
    return FileStore(path, encoding=encoding).open()


__all__ = ["LineStore", "FileStore", "load_lines", "split_lines", "join_lines"]
