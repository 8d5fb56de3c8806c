# CLASSIFICATION: COMMUNITY
# Filename: log.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Append-only tool logs shared by every jbuild operation."""

from __future__ import annotations

import logging
import os
import shlex
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)

TOOL_LOG = "cli_tool.log"
EXEC_LOG = "cli_exec.log"
ERROR_LOG = "cli_error.log"


def log_dir() -> Path:
    """Return the log directory, honouring ``$JBUILD_LOG``."""
    path = Path(os.getenv("JBUILD_LOG", Path.home() / ".jbuild" / "log"))
    path.mkdir(parents=True, exist_ok=True)
    return path


def _append(name: str, text: str) -> None:
    try:
        with (log_dir() / name).open("a", encoding="utf-8") as f:
            f.write(f"{datetime.now(timezone.utc).isoformat()} {text}\n")
    except OSError as exc:
        logger.warning("failed to write %s: %s", name, exc)


def buildlog(msg: str) -> None:
    _append(TOOL_LOG, msg)
    print(msg)


def log_exec(argv: Sequence[str]) -> None:
    _append(EXEC_LOG, " ".join(shlex.quote(str(a)) for a in argv))


def log_error(text: str) -> None:
    _append(ERROR_LOG, text)
