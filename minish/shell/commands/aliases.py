"""Alias builtin."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell

_QUOTES = ("'", '"')


def _is_closed(text: str, quote: str) -> bool:
    return len(text) >= 2 and text.endswith(quote)


def iter_alias_operands(words: list[str]) -> Iterator[tuple[str, str | None]]:
    """Yield ``(name, value)`` pairs; ``value`` is ``None`` for lookups.

    A value opened with a quote keeps consuming words until the matching
    closing quote, so ``ll='ls -l'`` arrives as one definition.
    """

    idx = 0
    while idx < len(words):
        word = words[idx]
        idx += 1
        name, sep, value = word.partition("=")
        if not sep or not name:
            yield word, None
            continue
        if value[:1] in _QUOTES:
            quote = value[0]
            parts = [value]
            while not _is_closed(" ".join(parts), quote) and idx < len(words):
                parts.append(words[idx])
                idx += 1
            value = " ".join(parts)
            value = value[1:-1] if _is_closed(value, quote) else value[1:]
        yield name, value


@COMMAND_REGISTRY.command(
    "alias",
    description="Define or display aliases",
    usage="alias [NAME[='VALUE'] ...]",
    help_text=(
        "Without arguments, prints every alias as NAME='VALUE'.\n"
        "For each NAME, prints that alias; for each NAME='VALUE', defines an\n"
        "alias replacing the command word NAME with VALUE. Fails if a NAME\n"
        "has no alias."
    ),
)
def alias(shell: "Shell", args: list[str]) -> CommandResult:
    if len(args) < 2:
        listing = "".join(f"{entry.format()}\n" for entry in shell.aliases)
        return CommandResult(stdout=listing)

    stdout: list[str] = []
    stderr: list[str] = []
    for name, value in iter_alias_operands(args[1:]):
        if value is not None:
            shell.aliases.add(name, value)
            continue
        entry = shell.aliases.get(name)
        if entry is None:
            stderr.append(shell.diagnostic_line("alias", f"{name} not found") + "\n")
        else:
            stdout.append(f"{entry.format()}\n")
    return CommandResult(
        stdout="".join(stdout),
        stderr="".join(stderr),
        exit_code=1 if stderr else 0,
    )
