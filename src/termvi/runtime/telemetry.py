"""Logging for the editor, on top of the standard ``logging`` hierarchy.

Every component logs below the ``termvi`` logger. Nothing is emitted until
``configure`` attaches handlers for a preset:

``development``
    Textual's log handler (devtools console while the app runs, stderr
    otherwise) plus the log file, at DEBUG.
``production``
    The log file only, so nothing paints over the editor surface.

``TERMVI_LOG_FILE`` and ``TERMVI_LOG_LEVEL`` override the file name and level.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

from textual.logging import TextualHandler

ENV_PREFIX = "TERMVI_"
ROOT_LOGGER = "termvi"
PRESETS = ("development", "production")

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unsupported log level '{name}'.")
    return level


def _file_handler() -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        _env("LOG_FILE") or "termvi.log",
        maxBytes=2 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
        delay=True,
    )
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def configure(*, preset: str) -> None:
    """Swap the handlers on the ``termvi`` logger for those of ``preset``."""

    key = preset.lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'.")

    handlers = [_file_handler()]
    if key == "development":
        handlers.append(TextualHandler())
        default_level = "DEBUG"
    else:
        default_level = "INFO"

    root = logging.getLogger(ROOT_LOGGER)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(_level(_env("LOG_LEVEL") or default_level))
    root.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or ROOT_LOGGER)


def _pairs(data: Dict[str, Any]) -> str:
    return "".join(f" {key}={value}" for key, value in data.items())


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` rendered as ``key=value`` pairs."""

    log = get_logger(logger_name)
    levelno = _level(level)
    if log.isEnabledFor(levelno):
        log.log(levelno, "event::%s%s", name, _pairs(data or {}))


@dataclass
class SpanHandle:
    logger: logging.Logger
    name: str
    fields: Dict[str, str] = field(default_factory=dict)

    def warn(self, reason: str) -> None:
        self.logger.warning(
            "span::warn %s reason=%s%s", self.name, reason, _pairs(self.fields)
        )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a block and log its duration at DEBUG.

    ``component=True`` tags the block with its own name. An exception leaving
    the block is logged at ERROR and re-raised.
    """

    fields = {key: str(value) for key, value in (metadata or {}).items()}
    if component:
        fields["component"] = name if component is True else str(component)
    handle = SpanHandle(logger=get_logger(logger_name), name=name, fields=fields)
    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        handle.logger.error("span::fail %s reason=%s%s", name, exc, _pairs(fields))
        raise
    finally:
        elapsed = (time.perf_counter() - started) * 1000
        handle.logger.debug("span::end %s %.3fms%s", name, elapsed, _pairs(fields))


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
