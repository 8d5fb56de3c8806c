# CLASSIFICATION: COMMUNITY
# Filename: outdir.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Bottom-up removal of the build output directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Tuple

from .errors import CleanError

logger = logging.getLogger(__name__)


def deletion_order(path: str | Path) -> List[str]:
    """Return *path* and everything below it, children before parents.

    This is the reverse of the lexicographically sorted walk. A parent is a
    strict prefix of each of its descendants, so it always sorts after them.
    A symlinked *path* is returned alone; its target is never walked.
    """
    root = os.fspath(path)
    entries = [root]
    if os.path.islink(root):
        return entries
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            entries.append(os.path.join(dirpath, name))
    return sorted(entries, reverse=True)


def _remove(entry: str) -> None:
    if os.path.isdir(entry) and not os.path.islink(entry):
        os.rmdir(entry)
    else:
        os.unlink(entry)


def clean_output(path: str | Path) -> None:
    """Delete *path* recursively. A missing *path* is a no-op.

    Deletion keeps going after a failure; CleanError is raised at the end
    if any entry survived.
    """
    if not os.path.lexists(path):
        logger.debug("output directory %s absent, nothing to clean", path)
        return

    failures: List[Tuple[str, str]] = []
    for entry in deletion_order(path):
        try:
            _remove(entry)
        except OSError as exc:
            failures.append((entry, str(exc)))

    if failures:
        detail = "; ".join(f"{entry}: {err}" for entry, err in failures)
        raise CleanError(f"Failed to cleanup previous output files! {detail}", failures)
    logger.debug("removed output directory %s", path)
