"""Navigation-oriented builtins."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY
from ...exceptions import ChdirError, ShellError, UsageError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


def _current_directory(shell: "Shell") -> str:
    try:
        return os.getcwd()
    except FileNotFoundError:
        return shell.env.get("PWD") or ""


def _required(shell: "Shell", name: str) -> str:
    value = shell.env.get(name)
    if not value:
        raise ShellError(f"{name} not set", command="cd")
    return value


@COMMAND_REGISTRY.command(
    "cd",
    description="Change the working directory",
    usage="cd [DIRECTORY]",
    help_text=(
        "Changes the current directory of the shell to DIRECTORY.\n"
        "With no argument (or --) the value of HOME is used; '-' changes to\n"
        "the previous directory and prints it. PWD and OLDPWD are updated."
    ),
)
def cd(shell: "Shell", args: list[str]) -> CommandResult:
    announce = False
    if len(args) < 2 or args[1] == "--":
        target = _required(shell, "HOME")
    elif args[1] == "-":
        target = _required(shell, "OLDPWD")
        announce = True
    elif args[1].startswith("-"):
        raise UsageError(f"Illegal option {args[1]}")
    else:
        target = args[1]

    previous = _current_directory(shell)
    try:
        os.chdir(target)
    except (OSError, ValueError):
        raise ChdirError(target) from None
    new = os.path.normpath(os.path.join(previous, target)) if previous else os.getcwd()
    shell.env.set("OLDPWD", previous)
    shell.env.set("PWD", new)
    return CommandResult(stdout=f"{new}\n" if announce else "")
