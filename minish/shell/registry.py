"""Registry for builtin commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Iterable

from .common import ShellCommand


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: ShellCommand
    description: str = ""
    usage: str = ""
    help_text: str = ""


class CommandRegistry:
    """Ordered builtin table, filled once at import time.

    Lookups are exact and case-sensitive; the first registration of a name
    wins.
    """

    def __init__(self) -> None:
        self._commands: list[CommandSpec] = []

    def register(
        self,
        name: str,
        handler: ShellCommand,
        *,
        description: str = "",
        usage: str = "",
        help_text: str = "",
    ) -> ShellCommand:
        self._commands.append(CommandSpec(name, handler, description, usage or name, help_text))
        return handler

    def command(
        self,
        name: str,
        *,
        description: str = "",
        usage: str = "",
        help_text: str = "",
    ) -> Callable[[ShellCommand], ShellCommand]:
        """Decorator variant for registering builtins."""

        def decorator(func: ShellCommand) -> ShellCommand:
            return self.register(
                name, func, description=description, usage=usage, help_text=help_text
            )

        return decorator

    def lookup(self, name: str) -> CommandSpec | None:
        for spec in self._commands:
            if spec.name == name:
                return spec
        return None

    def iter_commands(self) -> Iterable[CommandSpec]:
        return tuple(self._commands)

    def names(self) -> list[str]:
        return [spec.name for spec in self._commands]


COMMAND_REGISTRY = CommandRegistry()


__all__ = ["COMMAND_REGISTRY", "CommandRegistry", "CommandSpec"]
