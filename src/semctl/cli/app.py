"""CLI application entry point and command routing for semctl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~semctl.exceptions.SemctlError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here: all work is delegated to the core
  service and the infrastructure backend.
* Results are written to stdout, diagnostics to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from typing import NoReturn

from semctl.cli import exit_codes
from semctl.cli.console import console, err_console
from semctl.cli.logging_setup import LOG_LEVEL_ENV_VAR, configure_logging
from semctl.core.arguments import INT32_MAX, check_arity, parse_flag, parse_initial_value
from semctl.core.models import Command, Invocation, OperationResult, Outcome
from semctl.core.naming import NAME_ENV_VAR, resolve_semaphore_name
from semctl.core.protocols import SemaphoreBackend
from semctl.core.semaphore_service import SemaphoreService
from semctl.exceptions import InvalidArgumentError, SemaphoreOSError, SemctlError
from semctl.infra.posix_semaphore import PosixSemaphoreBackend

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _RaisingArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentError(
            message,
            hint=f"Run '{self.prog}' with no arguments to see the usage.",
        )


def _build_parser(prog: str) -> argparse.ArgumentParser:
    """Construct the argument parser.

    Exactly one flag is accepted per run:
    * ``<prog> -c N``: create the semaphore with initial value N
    * ``<prog> -v``: view its current value
    * ``<prog> -r``: remove it
    """
    parser = _RaisingArgumentParser(
        prog=prog,
        add_help=False,
        description=(
            f'Manage the named semaphore "{prog}".  The semaphore is named '
            "after this program, so copy or link it under another name to "
            "manage another semaphore."
        ),
        epilog=(
            f"environment:\n"
            f"  {NAME_ENV_VAR}       use this semaphore name instead of the program name\n"
            f"  {LOG_LEVEL_ENV_VAR}  DEBUG, INFO, WARNING (default) or ERROR"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    flags = parser.add_argument_group("flags")
    group = flags.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "-c",
        dest="initial_value",
        metavar="N",
        help=(
            "create a semaphore if it doesn't exist with an initial value of N "
            f"(0 <= N <= {INT32_MAX})"
        ),
    )
    group.add_argument(
        "-v",
        dest="view",
        action="store_true",
        help="view the current value of the semaphore",
    )
    group.add_argument(
        "-r",
        dest="remove",
        action="store_true",
        help="remove the semaphore",
    )
    return parser


def _parse_invocation(parser: argparse.ArgumentParser, args: Sequence[str]) -> Invocation:
    """Validate *args* and return the requested :class:`Invocation`.

    The flag shape and operand count are checked first, so the parser
    only ever sees a single well-formed flag.
    """
    try:
        command = parse_flag(args[0])
        check_arity(command, len(args) - 1)
        namespace = parser.parse_args(list(args))
        if command is Command.CREATE:
            return Invocation(command, parse_initial_value(namespace.initial_value))
        return Invocation(command)
    except InvalidArgumentError as exc:
        if exc.hint is None:
            exc.hint = f"Run '{parser.prog}' with no arguments to see the usage."
        raise


def _program_name(invocation_path: str) -> str:
    """Name the user types to run this program, as shown in usage text."""
    return os.path.basename(invocation_path.removeprefix("./")) or invocation_path


# ---------------------------------------------------------------------------
# Result rendering
# ---------------------------------------------------------------------------

_MESSAGES: dict[Outcome, str] = {
    Outcome.CREATED: 'Created the semaphore named "{name}" with initial value {value}.',
    Outcome.ALREADY_EXISTS: 'The semaphore named "{name}" already exists.',
    Outcome.READ: 'The value of the semaphore named "{name}" is {value}.',
    Outcome.NOT_FOUND: (
        'The semaphore named "{name}" doesn\'t exist yet.\n'
        'You must create it first by running "{prog} -c N", '
        "where N = the initial value of the semaphore."
    ),
    Outcome.REMOVED: 'Removed the semaphore named "{name}".',
    Outcome.DID_NOT_EXIST: 'The semaphore named "{name}" did not exist.',
}


def render_result(result: OperationResult, prog: str) -> str:
    """Return the human-readable report for *result*."""
    return _MESSAGES[result.outcome].format(
        name=result.name,
        value=result.value,
        prog=prog,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    prog: str | None = None,
    backend: SemaphoreBackend | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the semctl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    prog:
        Invocation path the semaphore name is derived from.  Defaults to
        ``sys.argv[0]``.
    backend:
        Semaphore backend; defaults to :class:`PosixSemaphoreBackend`.
    environ:
        Environment mapping; defaults to ``os.environ``.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    invocation_path = sys.argv[0] if prog is None else prog
    env = os.environ if environ is None else environ

    configure_logging(env)
    program = _program_name(invocation_path)
    parser = _build_parser(program)

    if not args:
        console.print(parser.format_help().rstrip("\n"))
        return exit_codes.SUCCESS

    invocation = _parse_invocation(parser, args)
    name = resolve_semaphore_name(invocation_path, env)
    logger.debug("%s on semaphore %r", invocation.command.name, name)

    service = SemaphoreService(backend if backend is not None else PosixSemaphoreBackend())
    result = service.execute(invocation, name)
    console.print(render_result(result, program))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report_error(exc: SemctlError) -> int:
    """Render a known error on stderr and return its exit code."""
    if isinstance(exc, InvalidArgumentError):
        err_console.print(f"Invalid Argument: {exc}", style="bold red")
        code = exit_codes.GENERAL_ERROR
    elif isinstance(exc, SemaphoreOSError):
        err_console.print(f"Error: {exc}", style="bold red")
        code = exit_codes.OS_ERROR
    else:
        err_console.print(f"Error: {exc}", style="bold red")
        code = exit_codes.GENERAL_ERROR
    if exc.hint:
        err_console.print(f"Hint: {exc.hint}", style="yellow")
    return code


def cli(argv: Sequence[str] | None = None, *, prog: str | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv, prog=prog)
        sys.exit(code)
    except SemctlError as exc:
        sys.exit(_report_error(exc))
    except KeyboardInterrupt:
        err_console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        err_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
