"""Alias table and first-word alias expansion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class Alias:
    name: str
    value: str

    def format(self) -> str:
        return f"{self.name}='{self.value}'"


class AliasTable:
    """Name-unique aliases kept in definition order.

    Redefining a name replaces its value where it already sits.
    """

    def __init__(self) -> None:
        self._aliases: dict[str, Alias] = {}

    def add(self, name: str, value: str) -> Alias:
        alias = self._aliases.get(name)
        if alias is None:
            alias = Alias(name, value)
            self._aliases[name] = alias
        else:
            alias.value = value
        return alias

    def get(self, name: str) -> Alias | None:
        return self._aliases.get(name)

    def remove(self, name: str) -> bool:
        return self._aliases.pop(name, None) is not None

    def clear(self) -> None:
        self._aliases.clear()

    def expand(self, args: list[str]) -> list[str]:
        """Replace ``args[0]`` with the words of its alias value.

        Expansion is a single pass: the replacement is not looked up again,
        so self-referencing aliases such as ``ls='ls -a'`` terminate.
        """

        if not args:
            return args
        alias = self._aliases.get(args[0])
        if alias is None:
            return list(args)
        return [*alias.value.split(), *args[1:]]

    def __contains__(self, name: object) -> bool:
        return name in self._aliases

    def __iter__(self) -> Iterator[Alias]:
        return iter(tuple(self._aliases.values()))

    def __len__(self) -> int:
        return len(self._aliases)


__all__ = ["Alias", "AliasTable"]
