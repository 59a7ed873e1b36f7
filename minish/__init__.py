"""minish package: a small POSIX-style command interpreter."""

from .aliases import Alias, AliasTable
from .environment import EnvironmentStore
from .exceptions import ExitRequested, ShellError
from .path_resolver import PathResolver
from .shell import CommandResult, Shell, ShellSession

__all__ = [
    "Shell",
    "ShellSession",
    "CommandResult",
    "EnvironmentStore",
    "AliasTable",
    "Alias",
    "PathResolver",
    "ShellError",
    "ExitRequested",
]
