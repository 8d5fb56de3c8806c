# CLASSIFICATION: COMMUNITY
# Filename: config.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Build configuration: defaults, jbuild.toml overrides and argument vectors."""

from __future__ import annotations

import dataclasses
import logging
import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import ValidationError, validate

try:
    import tomllib as tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "jbuild.toml"

BUILD_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "source_dir": {"type": "string", "minLength": 1},
        "output_dir": {"type": "string", "minLength": 1},
        "response_file": {"type": "string", "minLength": 1},
        "working_dir": {"type": "string", "minLength": 1},
        "compiler": {"type": "string", "minLength": 1},
        "runtime": {"type": "string", "minLength": 1},
        "entry_point": {"type": "string", "minLength": 1},
        "discovery": {"enum": ["scan", "entry"]},
        "source_suffix": {"type": "string"},
        "heap_size": {"type": "string", "pattern": "^[0-9]+[kKmMgG]?$"},
        "garbage_collector": {"type": "string", "minLength": 1},
        "diagnostics": {"type": "string", "minLength": 1},
        "lint": {"type": "string", "minLength": 1},
        "max_errors": {"type": "integer", "minimum": 1},
        "encoding": {"type": "string", "minLength": 1},
        "release": {"type": "integer", "minimum": 1},
        "debug_info": {"type": "boolean"},
        "pretouch": {"type": "boolean"},
        "enable_assertions": {"type": "boolean"},
    },
}


def _java_tool(name: str) -> str:
    """Locate a JDK tool via $JAVA_HOME, then PATH, then the bare name."""
    exe = f"{name}.exe" if sys.platform == "win32" else name
    java_home = os.environ.get("JAVA_HOME")
    if java_home:
        return str(Path(java_home, "bin", exe).absolute())
    return shutil.which(name) or name


@dataclass(frozen=True)
class Invocation:
    command: str
    args: List[str] = field(default_factory=list)

    @property
    def argv(self) -> List[str]:
        return [self.command, *self.args]


@dataclass(frozen=True)
class BuildConfiguration:
    source_dir: str = "src"
    output_dir: str = "bin"
    response_file: str = "sources.txt"
    working_dir: str = "."
    compiler: str = field(default_factory=lambda: _java_tool("javac"))
    runtime: str = field(default_factory=lambda: _java_tool("java"))
    entry_point: str = "Main"
    discovery: str = "scan"
    source_suffix: str = ".java"

    heap_size: str = "2048m"
    garbage_collector: str = "G1GC"
    diagnostics: str = "verbose"
    lint: str = "all"
    max_errors: int = 5
    encoding: str = "UTF8"
    release: int = 17
    debug_info: bool = True
    pretouch: bool = True
    enable_assertions: bool = True

    @property
    def compiler_invocation(self) -> Invocation:
        args = [
            f"-J-Xms{self.heap_size}",
            f"-J-Xmx{self.heap_size}",
            f"-J-XX:+Use{self.garbage_collector}",
            f"-Xdiags:{self.diagnostics}",
            f"-Xlint:{self.lint}",
            "-Xmaxerrs", str(self.max_errors),
            "-encoding", self.encoding,
            "--release", str(self.release),
            "-g" if self.debug_info else "-g:none",
            "-d", self.output_dir,
            "-sourcepath", self.source_dir,
            f"@{self.response_file}",
        ]
        return Invocation(self.compiler, args)

    @property
    def runtime_invocation(self) -> Invocation:
        args = []
        if self.enable_assertions:
            args.append("-ea")
        args += [f"-Xms{self.heap_size}", f"-Xmx{self.heap_size}"]
        if self.pretouch:
            args.append("-XX:+AlwaysPreTouch")
        args += [f"-XX:+Use{self.garbage_collector}", "-cp", self.output_dir, self.entry_point]
        return Invocation(self.runtime, args)

    def release_variant(self) -> "BuildConfiguration":
        """Copy with debug symbols off and a one-error cutoff."""
        return dataclasses.replace(self, debug_info=False, max_errors=1)

    def path(self, name: str) -> Path:
        """Resolve a configured path relative to the working directory."""
        return Path(self.working_dir, getattr(self, name))


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed to read config {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"failed to parse {path}: {exc}") from exc


def check_layout(config: BuildConfiguration) -> None:
    """Refuse output directories whose cleaning would destroy the project.

    The output directory is deleted on every build, so it must not be the
    working directory, the source directory, or an ancestor of either.
    """
    out = config.path("output_dir").resolve()
    protected = {
        "working_dir": Path(config.working_dir).resolve(),
        "source_dir": config.path("source_dir").resolve(),
    }
    for name, guarded in protected.items():
        if out == guarded or out in guarded.parents:
            raise ConfigError(
                f"output_dir {config.output_dir!r} would delete {name} {str(guarded)!r} when cleaned"
            )


def load_config(path: Optional[str | Path] = None) -> BuildConfiguration:
    """Build the configuration for this process.

    *path* defaults to ``$JBUILD_CONFIG`` and then ``jbuild.toml`` in the
    current directory. An explicitly named file must exist; the default one
    is optional. Only the ``[build]`` table is read.
    """
    explicit = path or os.environ.get("JBUILD_CONFIG")
    cfg_path = Path(explicit) if explicit else Path(CONFIG_FILE)
    if not explicit and not cfg_path.is_file():
        logger.debug("no %s found, using defaults", CONFIG_FILE)
        return BuildConfiguration()

    data = _read_toml(cfg_path)
    table = data.get("build", {})
    try:
        validate(table, BUILD_SCHEMA)
    except ValidationError as exc:
        raise ConfigError(f"config schema error in {cfg_path}: {exc.message}") from exc
    config = BuildConfiguration(**table)
    check_layout(config)
    logger.debug("loaded %s: %s", cfg_path, sorted(table))
    return config
