"""Environment builtins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY
from ...exceptions import EnvironmentUpdateError, UsageError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@COMMAND_REGISTRY.command(
    "env",
    description="Print the environment",
    usage="env",
    help_text="Prints the current environment, one NAME=VALUE pair per line.",
)
def env(shell: "Shell", args: list[str]) -> CommandResult:
    if len(args) > 1:
        raise UsageError("too many arguments")
    lines = shell.env.lines()
    return CommandResult(stdout="".join(f"{line}\n" for line in lines))


@COMMAND_REGISTRY.command(
    "setenv",
    description="Set an environment variable",
    usage="setenv VARIABLE VALUE",
    help_text=(
        "Initializes a new environment variable, or modifies an existing one.\n"
        "Fails if given the wrong number of arguments."
    ),
)
def setenv(shell: "Shell", args: list[str]) -> CommandResult:
    if len(args) != 3:
        raise EnvironmentUpdateError()
    shell.env.set(args[1], args[2])
    return CommandResult()


@COMMAND_REGISTRY.command(
    "unsetenv",
    description="Remove an environment variable",
    usage="unsetenv VARIABLE",
    help_text=(
        "Removes an environment variable. Removing a variable that is not set\n"
        "succeeds silently. Fails if given the wrong number of arguments."
    ),
)
def unsetenv(shell: "Shell", args: list[str]) -> CommandResult:
    if len(args) != 2:
        raise EnvironmentUpdateError()
    shell.env.unset(args[1])
    return CommandResult()
