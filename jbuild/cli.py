# CLASSIFICATION: COMMUNITY
# Filename: cli.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""jbuild – build, clean and run a single-module Java source tree."""

from __future__ import annotations

import logging
import os
import sys
import traceback
from typing import List, Optional

from . import pipeline
from .config import BuildConfiguration, load_config
from .errors import ConfigError
from .log import buildlog, log_error
from .registry import CommandRegistry


def create_registry(config: BuildConfiguration, prog: str = "jbuild") -> CommandRegistry:
    registry = CommandRegistry(prog)

    @registry.command()
    def build() -> bool:
        """Compile every source file into the output directory."""
        return pipeline.build(config)

    @registry.command("buildRelease")
    def build_release() -> bool:
        """Compile without debug info and stop at the first error."""
        return pipeline.build_release(config)

    @registry.command()
    def clean() -> None:
        """Delete the output directory."""
        pipeline.clean(config)

    @registry.command()
    def run() -> bool:
        """Launch the compiled entry point."""
        return pipeline.run(config)

    @registry.command("help")
    def show_help() -> None:
        """List the available operations."""
        print(f"usage: {prog} --<operation>")
        for desc in registry.descriptors():
            print(f"  --{desc.name:<14} {desc.summary}")

    return registry


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    level = os.environ.get("JBUILD_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format="[jbuild] %(message)s")
    try:
        config = load_config()
    except ConfigError as exc:
        buildlog(str(exc))
        return 1
    return create_registry(config).dispatch(args)


def entry() -> None:
    try:
        sys.exit(main())
    except Exception:
        log_error(traceback.format_exc())
        buildlog("Unhandled error, see cli_error.log")
        sys.exit(1)


if __name__ == "__main__":
    entry()
