# CLASSIFICATION: COMMUNITY
# Filename: pipeline.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""clean, build and run operations."""

from __future__ import annotations

import logging
import os
import sys
from typing import List

from .config import BuildConfiguration
from .log import buildlog
from .outdir import clean_output
from .process import run_captured, run_command
from .sources import collect_sources, entry_point_source, response_file

logger = logging.getLogger(__name__)


def discover(config: BuildConfiguration) -> List[str]:
    root = os.path.abspath(config.path("source_dir"))
    if config.discovery == "entry":
        return entry_point_source(root, config.entry_point, config.source_suffix)
    return collect_sources(root, config.source_suffix or None)


def clean(config: BuildConfiguration) -> None:
    clean_output(config.path("output_dir"))


def build(config: BuildConfiguration) -> bool:
    """Full rebuild: collect, write response file, clean, compile, report.

    DiscoveryError, WriteError and CleanError propagate and abort the
    operation; the response file is gone either way. A failing compiler is
    a normal outcome, reported as "Build failed" and returned as False.
    """
    sources = discover(config)
    logger.info("compiling %d source files", len(sources))

    with response_file(config.path("response_file"), sources):
        # javac recreates the directory for -d
        if config.path("output_dir").exists():
            clean(config)
        result = run_captured(config.working_dir, config.compiler_invocation.argv)

    if result.output:
        print(result.output)
    buildlog("Build success" if result.success else "Build failed")
    return result.success


def build_release(config: BuildConfiguration) -> bool:
    return build(config.release_variant())


def run(config: BuildConfiguration) -> bool:
    """Launch the built entry point, streaming its output as it arrives."""

    def echo(line: str) -> None:
        sys.stdout.write(line)
        sys.stdout.flush()

    return run_command(config.working_dir, config.runtime_invocation.argv, echo)
