"""Map failures to POSIX-style diagnostic lines and exit statuses."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import ScriptOpenError, ShellError, ShellSyntaxError


@dataclass(frozen=True, slots=True)
class Diagnostic:
    reason: str
    status: int
    command: str | None = None

    def render(self, program_name: str, line_number: int) -> str:
        if self.command is not None:
            return f"{program_name}: {line_number}: {self.command}: {self.reason}"
        return f"{program_name}: {line_number}: {self.reason}"


def classify(error: ShellError, args: Sequence[str] = ()) -> Diagnostic:
    """Build the diagnostic for ``error`` raised while running ``args``.

    The command field falls back to ``args[0]`` when the error does not name
    one itself. Syntax and script errors carry no command.
    """

    command = error.command
    if command is None and args and error.reason and not _is_contextless(error):
        command = args[0]
    return Diagnostic(reason=error.reason, status=error.status, command=command)


def classify_unexpected(exc: Exception, args: Sequence[str]) -> Diagnostic:
    name = args[0] if args else "minish"
    return Diagnostic(reason=f"{name} failed: {exc}", status=1)


def _is_contextless(error: ShellError) -> bool:
    return isinstance(error, (ShellSyntaxError, ScriptOpenError))


__all__ = ["Diagnostic", "classify", "classify_unexpected"]
