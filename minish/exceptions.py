"""Custom exceptions for minish."""

from __future__ import annotations


class ShellError(Exception):
    """Base error type for failures reported by the shell.

    ``status`` is the exit status recorded when the error reaches the
    dispatcher; ``command`` is the name printed in the diagnostic.
    """

    status = 1

    def __init__(self, reason: str, *, command: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.command = command


class UsageError(ShellError):
    """Builtin invoked with the wrong arguments."""

    status = 2


class IllegalNumber(UsageError):
    def __init__(self, value: str, *, command: str | None = "exit") -> None:
        super().__init__(f"Illegal number: {value}", command=command)
        self.value = value


class EnvironmentUpdateError(UsageError):
    def __init__(self, *, command: str | None = None) -> None:
        super().__init__("Unable to add/remove from environment", command=command)


class HelpTopicError(UsageError):
    def __init__(self, topic: str, *, command: str | None = "help") -> None:
        super().__init__(f"no help topics match '{topic}'", command=command)
        self.topic = topic


class ChdirError(ShellError):
    status = 2

    def __init__(self, target: str, *, command: str | None = "cd") -> None:
        super().__init__(f"can't cd to {target}", command=command)
        self.target = target


class ShellSyntaxError(ShellError):
    status = 2

    def __init__(self, token: str, *, quoted: bool = True) -> None:
        shown = f'"{token}"' if quoted else token
        super().__init__(f"Syntax error: {shown} unexpected")
        self.token = token


class CommandNotFound(ShellError):
    status = 127

    def __init__(self, command: str) -> None:
        super().__init__("not found", command=command)


class PermissionDenied(ShellError):
    status = 126

    def __init__(self, command: str, reason: str = "Permission denied") -> None:
        super().__init__(reason, command=command)


class SpawnError(ShellError):
    """The child process could not be created (fork/resource failure)."""

    status = 1


class ScriptOpenError(ShellError):
    status = 127

    def __init__(self, path: str) -> None:
        super().__init__(f"Can't open {path}")
        self.path = path


class ExitRequested(Exception):
    """Raised by the ``exit`` builtin to stop the command loop."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


__all__ = [
    "ShellError",
    "UsageError",
    "IllegalNumber",
    "EnvironmentUpdateError",
    "HelpTopicError",
    "ChdirError",
    "ShellSyntaxError",
    "CommandNotFound",
    "PermissionDenied",
    "SpawnError",
    "ScriptOpenError",
    "ExitRequested",
]
