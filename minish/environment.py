"""Owned copy of the process environment."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .exceptions import EnvironmentUpdateError


def valid_name(name: str) -> bool:
    return bool(name) and "=" not in name and "\0" not in name


class EnvironmentStore:
    """Insertion-ordered ``NAME -> VALUE`` mapping queried by builtins.

    Replacing an existing name keeps its position, so ``env`` output stays
    stable across ``setenv`` calls.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._vars: dict[str, str] = {}
        for name, value in (initial or {}).items():
            if valid_name(name):
                self._vars[name] = value

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._vars.get(name, default)

    def set(self, name: str, value: str) -> None:
        if not valid_name(name) or "\0" in value:
            raise EnvironmentUpdateError()
        self._vars[name] = value

    def unset(self, name: str) -> bool:
        if not valid_name(name):
            raise EnvironmentUpdateError()
        if name not in self._vars:
            return False
        del self._vars[name]
        return True

    def snapshot(self) -> dict[str, str]:
        return dict(self._vars)

    def lines(self) -> list[str]:
        return [f"{name}={value}" for name, value in self._vars.items()]

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._vars))

    def __len__(self) -> int:
        return len(self._vars)


__all__ = ["EnvironmentStore", "valid_name"]
