"""Runtime settings resolved from the command line and ``TERMVI_*`` variables."""

from __future__ import annotations

import argparse
import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .errors import StartupError
from .telemetry import ENV_PREFIX, PRESETS

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_PRESET = "production"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    path: Path
    encoding: str = DEFAULT_ENCODING
    log_preset: str = DEFAULT_LOG_PRESET

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "EditorConfig":
        env = os.environ if environ is None else environ
        raw_path = getattr(args, "path", None)
        if not raw_path:
            raise StartupError("missing required file path argument")

        encoding = (
            getattr(args, "encoding", None)
            or env.get(f"{ENV_PREFIX}ENCODING")
            or DEFAULT_ENCODING
        )
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise StartupError(f"unknown encoding '{encoding}'") from exc
        preset = (
            getattr(args, "log_preset", None)
            or env.get(f"{ENV_PREFIX}LOG_PRESET")
            or DEFAULT_LOG_PRESET
        ).lower()
        if preset not in PRESETS:
            raise StartupError(f"unknown log preset '{preset}'")
        return cls(path=Path(raw_path), encoding=encoding, log_preset=preset)


__all__ = ["EditorConfig", "DEFAULT_ENCODING", "DEFAULT_LOG_PRESET"]
