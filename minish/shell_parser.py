"""Minimal shell parser for command lists joined by ``;``, ``&&`` and ``||``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .exceptions import ShellSyntaxError

SEPARATOR = ";"
AND = "&&"
OR = "||"
OPERATORS = (SEPARATOR, AND, OR)

_OPERATOR_RE = re.compile(r"(&&|\|\||;)")


@dataclass
class SimpleCommand:
    args: list[str] = field(default_factory=list)
    connector: str | None = None


@dataclass
class CommandList:
    commands: list[SimpleCommand]


def tokenize(line: str) -> list[str]:
    """Split ``line`` into words and operator tokens.

    Runs of whitespace collapse. Operators are split from adjacent words.
    A word starting with ``#`` begins a comment that runs to end of line.
    """

    tokens: list[str] = []
    for token in _OPERATOR_RE.sub(r" \1 ", line).split():
        if token.startswith("#"):
            break
        tokens.append(token)
    return tokens


def parse_command_list(tokens: list[str]) -> CommandList:
    if not tokens:
        return CommandList(commands=[])

    commands: list[SimpleCommand] = []
    current = SimpleCommand()
    for token in tokens:
        if token in OPERATORS:
            if not current.args:
                raise ShellSyntaxError(_unexpected(token, current))
            commands.append(current)
            current = SimpleCommand(connector=token)
            continue
        current.args.append(token)

    if current.args:
        commands.append(current)
    elif current.connector in (AND, OR):
        raise ShellSyntaxError("end of file", quoted=False)
    return CommandList(commands=commands)


def parse_line(line: str) -> CommandList:
    return parse_command_list(tokenize(line))


def _unexpected(token: str, current: SimpleCommand) -> str:
    if token == SEPARATOR and current.connector == SEPARATOR:
        return ";;"
    return token


__all__ = [
    "AND",
    "OR",
    "SEPARATOR",
    "OPERATORS",
    "SimpleCommand",
    "CommandList",
    "tokenize",
    "parse_command_list",
    "parse_line",
]
