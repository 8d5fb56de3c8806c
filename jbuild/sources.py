# CLASSIFICATION: COMMUNITY
# Filename: sources.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Source discovery and compiler response files."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .errors import DiscoveryError, WriteError

logger = logging.getLogger(__name__)


def _raise(exc: OSError) -> None:
    raise exc


def collect_sources(root: str | Path, suffix: Optional[str] = None) -> List[str]:
    """Return every regular file below *root*, sorted by path string.

    With *suffix*, only files whose name ends with it are kept. Any I/O
    error during the walk, a missing *root* included, raises DiscoveryError.
    """
    found: List[str] = []
    try:
        for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
            for name in filenames:
                if suffix is not None and not name.endswith(suffix):
                    continue
                path = os.path.join(dirpath, name)
                if os.path.isfile(path):
                    found.append(path)
    except OSError as exc:
        raise DiscoveryError(f"Failed to collect source files from {root}: {exc}") from exc
    found.sort()
    logger.debug("collected %d source files under %s", len(found), root)
    return found


def entry_point_source(root: str | Path, entry_point: str, suffix: str) -> List[str]:
    """Return the single entry point source file as an absolute path."""
    path = Path(root, f"{entry_point}{suffix}")
    if not path.is_file():
        raise DiscoveryError(f"Entry point source not found: {path}")
    return [os.path.abspath(path)]


_NEEDS_QUOTES = re.compile(r"[\s\"']")


def quote_argument(arg: str) -> str:
    """Quote *arg* for a javac @argfile if it holds whitespace or quotes.

    Inside double quotes javac treats backslash as an escape character, so
    backslashes and double quotes are escaped. Other arguments pass through
    unchanged.
    """
    if not arg or not _NEEDS_QUOTES.search(arg):
        return arg
    escaped = arg.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def write_response_file(path: str | Path, lines: Iterable[str]) -> None:
    """Write *lines* to *path*, one argument per line, replacing it atomically."""
    target = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=target.parent,
            prefix=f".{target.name}.",
            delete=False,
        ) as f:
            tmp_name = f.name
            for line in lines:
                f.write(f"{quote_argument(line)}\n")
        os.replace(tmp_name, target)
        tmp_name = None
    except (OSError, ValueError) as exc:
        raise WriteError(f"Failed to write sources file {target}: {exc}") from exc
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)


@contextmanager
def response_file(path: str | Path, lines: Iterable[str]) -> Iterator[Path]:
    """Write a response file that is removed when the block exits."""
    target = Path(path)
    try:
        write_response_file(target, lines)
        yield target
    finally:
        try:
            target.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.warning("failed to remove response file %s: %s", target, exc)
