# CLASSIFICATION: COMMUNITY
# Filename: errors.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Exception hierarchy for jbuild."""

from __future__ import annotations


class JBuildError(Exception):
    """Base class for every error raised by jbuild."""


class UsageError(JBuildError):
    """Malformed command line."""


class ConfigError(JBuildError):
    """Configuration file could not be read or failed validation."""


class FatalBuildError(JBuildError):
    """A build step failed in a way that aborts the whole operation."""


class DiscoveryError(FatalBuildError):
    """Source enumeration failed."""


class WriteError(FatalBuildError):
    """The compiler response file could not be written."""


class CleanError(FatalBuildError):
    """The output directory could not be cleared."""

    def __init__(self, message: str, failures: list[tuple[str, str]] | None = None):
        super().__init__(message)
        self.failures = failures or []
