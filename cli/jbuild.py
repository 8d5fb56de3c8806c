#!/usr/bin/env python3
# CLASSIFICATION: COMMUNITY
# Filename: jbuild.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""jbuild launcher for source checkouts."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from jbuild.cli import entry  # noqa: E402

if __name__ == "__main__":
    entry()
