"""Core Shell implementation: dispatcher and command loop."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TextIO

from ..aliases import AliasTable
from ..diagnostics import Diagnostic, classify, classify_unexpected
from ..environment import EnvironmentStore
from ..exceptions import (
    CommandNotFound,
    ExitRequested,
    PermissionDenied,
    ScriptOpenError,
    ShellError,
    ShellSyntaxError,
    SpawnError,
)
from ..expansion import expand_variables
from ..path_resolver import PathResolver
from ..shell_parser import AND, OR, parse_line
from .common import CommandResult
from .process import ExecFailed, Signaled, SpawnFailed, run_child
from .registry import COMMAND_REGISTRY, CommandSpec

logger = logging.getLogger(__name__)


@dataclass
class ShellSession:
    """Process-wide state shared by every component of one shell."""

    program_name: str
    env: EnvironmentStore
    aliases: AliasTable = field(default_factory=AliasTable)
    last_status: int = 0
    line_number: int = 0
    pid: int = field(default_factory=os.getpid)
    paths: PathResolver = field(init=False)

    def __post_init__(self) -> None:
        self.paths = PathResolver(self.env)


class Shell:
    """Reads command lines and runs builtins or external programs."""

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        *,
        program_name: str = "minish",
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.session = ShellSession(
            program_name=program_name,
            env=EnvironmentStore(os.environ if env is None else env),
        )
        self._stdout = stdout
        self._stderr = stderr
        self.registry = COMMAND_REGISTRY
        self._register_builtin_commands()

    def _register_builtin_commands(self) -> None:
        # Import command modules for their side effects (registration)
        from . import commands  # noqa: F401

    # ------------------------------------------------------------------
    # Session accessors
    # ------------------------------------------------------------------
    @property
    def env(self) -> EnvironmentStore:
        return self.session.env

    @property
    def aliases(self) -> AliasTable:
        return self.session.aliases

    @property
    def paths(self) -> PathResolver:
        return self.session.paths

    @property
    def last_status(self) -> int:
        return self.session.last_status

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def diagnostic_line(self, command: str | None, reason: str) -> str:
        return Diagnostic(reason, 1, command).render(
            self.session.program_name, self.session.line_number
        )

    def report(self, diagnostic: Diagnostic) -> int:
        line = diagnostic.render(self.session.program_name, self.session.line_number)
        self.stderr.write(line + "\n")
        self.stderr.flush()
        return diagnostic.status

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def prepare(self, args: list[str]) -> list[str]:
        """Apply alias expansion to the first word, then variable expansion."""

        expanded = self.aliases.expand(args)
        return expand_variables(
            expanded,
            last_status=self.session.last_status,
            pid=self.session.pid,
            lookup=self.env.get,
        )

    def run_command(self, args: list[str]) -> int:
        args = self.prepare(args)
        if not args:
            status = 0
        else:
            spec = self.registry.lookup(args[0])
            if spec is not None:
                logger.debug("builtin %s %s", spec.name, args[1:])
                status = self._run_builtin(spec, args)
            else:
                status = self._run_external(args)
        self.session.last_status = status
        return status

    def _run_builtin(self, spec: CommandSpec, args: list[str]) -> int:
        try:
            result = spec.handler(self, args)
        except ShellError as exc:
            return self.report(classify(exc, args))
        except ExitRequested:
            raise
        except Exception as exc:  # unexpected failure path
            logger.debug("builtin %s raised", spec.name, exc_info=True)
            return self.report(classify_unexpected(exc, args))
        if result is None:
            result = CommandResult()
        elif not isinstance(result, CommandResult):
            result = CommandResult(stdout=str(result))
        if result.stdout:
            self.stdout.write(result.stdout)
            self.stdout.flush()
        if result.stderr:
            self.stderr.write(result.stderr)
            self.stderr.flush()
        return result.exit_code

    def _run_external(self, args: list[str]) -> int:
        command = args[0]
        location = self.paths.resolve(command)
        if location is None:
            return self.report(classify(CommandNotFound(command), args))
        self._flush_streams()
        outcome = run_child(location, args, env=self.env.snapshot())
        if isinstance(outcome, ExecFailed):
            if outcome.status == CommandNotFound.status:
                return self.report(classify(CommandNotFound(command), args))
            self.report(classify(PermissionDenied(command, outcome.reason), args))
            return outcome.status
        if isinstance(outcome, SpawnFailed):
            self.report(classify(SpawnError(outcome.reason, command=command), args))
            return outcome.status
        if isinstance(outcome, Signaled):
            logger.debug("%s terminated by signal %s", command, outcome.signum)
        return outcome.status

    def _flush_streams(self) -> None:
        for stream in (self.stdout, self.stderr, sys.stdout, sys.stderr):
            stream.flush()

    # ------------------------------------------------------------------
    # Command loop
    # ------------------------------------------------------------------
    def execute_line(self, line: str) -> int:
        """Run every command on ``line`` and return the last status.

        Raises ``ExitRequested`` when the ``exit`` builtin runs.
        """

        self.session.line_number += 1
        try:
            command_list = parse_line(line)
        except ShellSyntaxError as exc:
            self.session.last_status = self.report(classify(exc))
            return self.session.last_status

        status = self.session.last_status
        for command in command_list.commands:
            if command.connector == AND and status != 0:
                continue
            if command.connector == OR and status == 0:
                continue
            status = self.run_command(command.args)
        return status

    def exec(self, text: str) -> int:
        """Run each line of ``text``; stops early on ``exit``."""

        try:
            for line in text.splitlines():
                self.execute_line(line)
        except ExitRequested as exc:
            return exc.status
        return self.session.last_status

    def run_stream(self, stream: TextIO) -> int:
        while True:
            line = stream.readline()
            if not line:
                return self.session.last_status
            try:
                self.execute_line(line)
            except ExitRequested as exc:
                return exc.status

    def run_script(self, path: str) -> int:
        try:
            handle = open(path, encoding="utf-8", errors="replace")
        except OSError:
            self.session.last_status = self.report(classify(ScriptOpenError(path)))
            return self.session.last_status
        logger.debug("running script %s", path)
        with handle:
            return self.run_stream(handle)


__all__ = ["Shell", "ShellSession"]
