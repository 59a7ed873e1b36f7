"""Command-line interface for minish."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .exceptions import ExitRequested
from .shell import Shell

PROMPT = "$ "
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _run_interactive(shell: Shell) -> int:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return shell.last_status
        except KeyboardInterrupt:
            print()
            continue
        try:
            shell.execute_line(line)
        except ExitRequested as exc:
            return exc.status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minish",
        description="A small POSIX-style command interpreter.",
    )
    parser.add_argument("-c", dest="command", metavar="COMMAND", help="Run COMMAND and exit.")
    parser.add_argument(
        "-i",
        dest="interactive",
        action="store_true",
        help="Prompt for commands even when stdin is not a terminal.",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("MINISH_LOG_LEVEL", "WARNING").upper(),
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (default: $MINISH_LOG_LEVEL or WARNING).",
    )
    parser.add_argument("script", nargs="?", help="Read commands from this file.")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    program_name = sys.argv[0] if argv is None else parser.prog
    shell = Shell(program_name=program_name)
    if args.command is not None:
        exit_code = shell.exec(args.command)
    elif args.script:
        exit_code = shell.run_script(args.script)
    elif args.interactive or sys.stdin.isatty():
        exit_code = _run_interactive(shell)
    else:
        exit_code = shell.run_stream(sys.stdin)
    raise SystemExit(exit_code)


__all__ = ["main", "build_parser"]
