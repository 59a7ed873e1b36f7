"""Locate executables through the ``PATH`` search list."""

from __future__ import annotations

import logging
import os
import stat

from .environment import EnvironmentStore

logger = logging.getLogger(__name__)

CURRENT_DIRECTORY = "."


def parse_path(value: str | None) -> list[str]:
    """Split a ``PATH`` value into directories.

    Empty components (leading, trailing or doubled colons) stand for the
    current directory. An unset or empty ``PATH`` yields the current
    directory alone.
    """

    if not value:
        return [CURRENT_DIRECTORY]
    return [part or CURRENT_DIRECTORY for part in value.split(":")]


def is_executable_file(path: str) -> bool:
    try:
        info = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(info.st_mode) and os.access(path, os.X_OK)


class PathResolver:
    """Resolves command names against the session environment's ``PATH``.

    The directory list is rebuilt only when the ``PATH`` value changes.
    """

    def __init__(self, env: EnvironmentStore) -> None:
        self.env = env
        self._cached_path: str | None = None
        self._directories: list[str] | None = None

    @property
    def directories(self) -> list[str]:
        current = self.env.get("PATH")
        if self._directories is None or current != self._cached_path:
            self._directories = parse_path(current)
            self._cached_path = current
            logger.debug("rebuilt search path: %s", self._directories)
        return list(self._directories)

    def resolve(self, command: str) -> str | None:
        """Return the location to execute for ``command``, or ``None``.

        Names containing ``/`` are used verbatim and only checked for
        existence; whether they can run is left to the exec step.
        """

        if not command:
            return None
        if "/" in command:
            return command if os.path.lexists(command) else None
        for directory in self.directories:
            candidate = os.path.join(directory, command)
            if is_executable_file(candidate):
                logger.debug("resolved %s -> %s", command, candidate)
                return candidate
        logger.debug("%s not found in %s", command, self._directories)
        return None


__all__ = ["PathResolver", "parse_path", "is_executable_file", "CURRENT_DIRECTORY"]
