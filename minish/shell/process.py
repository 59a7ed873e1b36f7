"""Run external programs and report how they ended."""

from __future__ import annotations

import errno
import logging
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# errno values raised while creating the child rather than while exec'ing it
_SPAWN_ERRNOS = frozenset({errno.EAGAIN, errno.ENOMEM})


@dataclass(frozen=True, slots=True)
class Exited:
    code: int

    @property
    def status(self) -> int:
        return self.code


@dataclass(frozen=True, slots=True)
class Signaled:
    signum: int

    @property
    def status(self) -> int:
        return 128 + self.signum


@dataclass(frozen=True, slots=True)
class ExecFailed:
    """The child was created but could not become the requested program."""

    reason: str
    error_code: int | None = None

    @property
    def status(self) -> int:
        return 127 if self.error_code == errno.ENOENT else 126


@dataclass(frozen=True, slots=True)
class SpawnFailed:
    reason: str
    error_code: int | None = None

    @property
    def status(self) -> int:
        return 1


ChildOutcome = Exited | Signaled | ExecFailed | SpawnFailed


def run_child(
    executable: str,
    args: list[str],
    *,
    env: dict[str, str],
    cwd: str | None = None,
) -> ChildOutcome:
    """Start ``executable`` with ``args`` and block until it terminates.

    The child inherits the shell's standard streams. ``args[0]`` is passed
    through unchanged as the program's name.
    """

    try:
        process = subprocess.Popen(args, executable=executable, env=env, cwd=cwd)
    except MemoryError:
        return SpawnFailed("Cannot allocate memory", errno.ENOMEM)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        if exc.errno in _SPAWN_ERRNOS:
            logger.debug("spawn of %s failed: %s", executable, reason)
            return SpawnFailed(reason, exc.errno)
        logger.debug("exec of %s failed: %s", executable, reason)
        return ExecFailed(reason, exc.errno)
    except ValueError as exc:
        # arguments with embedded NUL bytes cannot be passed to exec
        logger.debug("exec of %s failed: %s", executable, exc)
        return ExecFailed(str(exc))

    logger.debug("started %s as pid %s", executable, process.pid)
    while True:
        try:
            returncode = process.wait()
            break
        except KeyboardInterrupt:
            # the child received the same SIGINT; keep waiting for it
            continue
    if returncode < 0:
        return Signaled(-returncode)
    return Exited(returncode)


__all__ = ["ChildOutcome", "Exited", "Signaled", "ExecFailed", "SpawnFailed", "run_child"]
