# CLASSIFICATION: COMMUNITY
# Filename: registry.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Named zero-argument operations selectable as ``--<name>``."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from .errors import FatalBuildError, UsageError
from .log import buildlog

logger = logging.getLogger(__name__)

PREFIX = "--"

Operation = Callable[[], object]


@dataclass(frozen=True)
class CommandDescriptor:
    name: str
    operation: Operation
    summary: str = ""


def _takes_no_arguments(operation: Operation) -> bool:
    try:
        sig = inspect.signature(operation)
    except (TypeError, ValueError):
        return False
    for param in sig.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.default is param.empty:
            return False
    return True


class CommandRegistry:
    def __init__(self, prog: str = "jbuild"):
        self.prog = prog
        self._commands: Dict[str, CommandDescriptor] = {}

    def register(self, name: str, operation: Operation, summary: str = "") -> CommandDescriptor:
        if not name or name.startswith("_"):
            raise ValueError(f"operation name {name!r} is not public")
        if name in self._commands:
            raise ValueError(f"operation {name!r} already registered")
        if not callable(operation) or not _takes_no_arguments(operation):
            raise ValueError(f"operation {name!r} must be callable without arguments")
        desc = CommandDescriptor(name, operation, summary)
        self._commands[name] = desc
        return desc

    def command(self, name: Optional[str] = None, summary: str = ""):
        """Decorator form of register(); defaults to the function name."""

        def wrap(fn: Operation) -> Operation:
            self.register(name or fn.__name__, fn, summary or (inspect.getdoc(fn) or "").split("\n")[0])
            return fn

        return wrap

    def resolve(self, name: str) -> Optional[Operation]:
        desc = self._commands.get(name)
        return desc.operation if desc else None

    def names(self) -> List[str]:
        return sorted(self._commands)

    def descriptors(self) -> List[CommandDescriptor]:
        return [self._commands[n] for n in self.names()]

    def parse_target(self, args: Sequence[str]) -> str:
        """Return the operation name from the single ``--<name>`` argument."""
        if len(args) == 0:
            raise UsageError(
                f"Please specify the operation you wish to run!\nExample: {self.prog} --build"
            )
        if len(args) > 1:
            raise UsageError(f"Too many arguments!\nExample: {self.prog} --build")
        if not args[0].startswith(PREFIX):
            raise UsageError("The operation name must be prefixed with two dashes!")
        return args[0][len(PREFIX):]

    def dispatch(self, args: Sequence[str]) -> int:
        """Run the operation named by the single ``--<name>`` argument.

        Returns the process exit code: 0 when the operation completed, 1 for
        usage errors, unknown names, fatal build errors and any exception
        raised by the operation.
        """
        try:
            target = self.parse_target(args)
        except UsageError as exc:
            for line in str(exc).splitlines():
                buildlog(line)
            return 1

        operation = self.resolve(target)
        if operation is None:
            buildlog(f"Failed to find the specified operation '{target}'.")
            buildlog("Make sure the operation you wish to execute meets the following requirements:")
            buildlog("\t- The name is public (no leading underscore)")
            buildlog("\t- It is registered as a command")
            buildlog("\t- Does not take any arguments")
            return 1

        logger.debug("dispatching %s", target)
        try:
            operation()
        except FatalBuildError as exc:
            buildlog(str(exc))
            return 1
        except Exception as exc:
            buildlog(f"ERROR while executing the specified operation: {exc}")
            return 1
        return 0
