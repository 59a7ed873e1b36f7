"""Shell control builtins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..registry import COMMAND_REGISTRY
from ...exceptions import ExitRequested, IllegalNumber

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell

_MAX_EXIT_ARGUMENT = 2**31 - 1


def parse_exit_status(value: str) -> int:
    """Validate an ``exit`` operand: decimal digits only, at most 2^31-1."""

    if not value.isascii() or not value.isdigit() or int(value) > _MAX_EXIT_ARGUMENT:
        raise IllegalNumber(value)
    return int(value) & 0xFF


@COMMAND_REGISTRY.command(
    "exit",
    description="Exit the shell",
    usage="exit [STATUS]",
    help_text=(
        "Exits the shell with a status of STATUS.\n"
        "If STATUS is omitted, the status of the last command is used."
    ),
)
def exit_(shell: "Shell", args: list[str]) -> None:
    if len(args) > 1:
        status = parse_exit_status(args[1])
    else:
        status = shell.last_status
    raise ExitRequested(status)
