"""Shell package: dispatcher, builtins and child processes."""

from .common import CommandResult
from .core import Shell, ShellSession

__all__ = ["Shell", "ShellSession", "CommandResult"]
