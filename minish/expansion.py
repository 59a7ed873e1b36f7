"""Variable substitution applied to each word before dispatch."""

from __future__ import annotations

import re
from collections.abc import Callable

_VARIABLE_RE = re.compile(r"\$(\?|\$|[A-Za-z_][A-Za-z0-9_]*)")

Lookup = Callable[[str], "str | None"]


def expand_token(token: str, *, last_status: int, pid: int, lookup: Lookup) -> str:
    if "$" not in token:
        return token

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name == "?":
            return str(last_status)
        if name == "$":
            return str(pid)
        return lookup(name) or ""

    return _VARIABLE_RE.sub(replacer, token)


def expand_variables(args: list[str], *, last_status: int, pid: int, lookup: Lookup) -> list[str]:
    """Substitute ``$?``, ``$$`` and ``$NAME`` in every word.

    Unset variables become empty strings. Substituted text is never split
    into further words, and a ``$`` not followed by a name stays literal.
    """

    return [expand_token(arg, last_status=last_status, pid=pid, lookup=lookup) for arg in args]


__all__ = ["expand_token", "expand_variables"]
