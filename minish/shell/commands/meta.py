"""Meta builtins for shell introspection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY
from ...exceptions import HelpTopicError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@COMMAND_REGISTRY.command(
    "help",
    description="Show help for builtins",
    usage="help [BUILTIN ...]",
    help_text=(
        "Displays information about builtin commands. With BUILTIN, prints\n"
        "detailed help for each named builtin."
    ),
)
def help(shell: "Shell", args: list[str]) -> CommandResult:  # noqa: A001
    if len(args) < 2:
        lines = ["Builtin commands:"]
        for spec in shell.registry.iter_commands():
            lines.append(f"  {spec.usage:<28} {spec.description}".rstrip())
        lines.append("Use 'help BUILTIN' for more information on a builtin.")
        return CommandResult(stdout="\n".join(lines) + "\n")

    blocks: list[str] = []
    for topic in args[1:]:
        spec = shell.registry.lookup(topic)
        if spec is None:
            raise HelpTopicError(topic)
        blocks.append(f"{spec.name}: {spec.usage}\n{spec.help_text or spec.description}\n")
    return CommandResult(stdout="\n".join(blocks))
