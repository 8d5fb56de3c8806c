# CLASSIFICATION: COMMUNITY
# Filename: process.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Child process execution with merged stdout/stderr line capture."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, List, Sequence

from .log import buildlog, log_exec

logger = logging.getLogger(__name__)

LineSink = Callable[[str], None]


@dataclass
class ExecutionResult:
    success: bool
    output: str = ""


def run_command(cwd: str, argv: Sequence[str], on_line: LineSink) -> bool:
    """Run *argv* in *cwd*, feeding every output line to *on_line*.

    stderr is merged into stdout so a single reader drains the child and
    lines arrive in the order they were produced. Each line handed to
    *on_line* ends with a newline. Returns True only for exit status 0.
    Launch failures are reported and return False; they never raise.
    """
    cmd = [str(a) for a in argv]
    if not cmd:
        buildlog("failed to launch: empty command line")
        return False
    log_exec(cmd)
    try:
        proc = subprocess.Popen(
            cmd,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except (OSError, ValueError) as exc:
        buildlog(f"failed to launch {cmd[0]}: {exc}")
        return False

    with proc:
        try:
            for line in proc.stdout:
                if not line.endswith("\n"):
                    line += "\n"
                on_line(line)
        except BaseException:
            proc.kill()
            raise
        rc = proc.wait()
    logger.debug("%s exited with %d", cmd[0], rc)
    return rc == 0


def run_captured(cwd: str, argv: Sequence[str]) -> ExecutionResult:
    """Run *argv* and buffer its merged output instead of streaming it."""
    lines: List[str] = []
    ok = run_command(cwd, argv, lines.append)
    return ExecutionResult(success=ok, output="".join(lines))
