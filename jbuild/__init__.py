# CLASSIFICATION: COMMUNITY
# Filename: __init__.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Minimal build driver for single-module Java source trees."""

from .config import BuildConfiguration, Invocation, load_config
from .errors import (
    CleanError,
    ConfigError,
    DiscoveryError,
    FatalBuildError,
    JBuildError,
    UsageError,
    WriteError,
)
from .registry import CommandDescriptor, CommandRegistry

__all__ = [
    "BuildConfiguration",
    "CleanError",
    "CommandDescriptor",
    "CommandRegistry",
    "ConfigError",
    "DiscoveryError",
    "FatalBuildError",
    "Invocation",
    "JBuildError",
    "UsageError",
    "WriteError",
    "load_config",
]
