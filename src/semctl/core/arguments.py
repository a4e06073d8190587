"""Command-line argument validation.

Pure functions that turn raw argument strings into domain values.  Each
one raises :class:`~semctl.exceptions.InvalidArgumentError` with a
specific reason; none of them touches the operating system.

Rules
-----
* The flag is exactly two characters: ``-`` followed by ``c``, ``v``
  or ``r``.
* ``-c`` takes exactly one more argument, ``N``; ``-v`` and ``-r`` take
  none.
* ``N`` is a base-10 integer in ``[0, INT32_MAX]``.
"""

from __future__ import annotations

import re
import struct

from semctl.core.models import Command
from semctl.exceptions import InvalidArgumentError

INT32_MAX: int = 2**31 - 1
"""Largest accepted initial value (the platform's signed 32-bit ``int``)."""

_LONG_BITS: int = 8 * struct.calcsize("l")
LONG_MIN: int = -(2 ** (_LONG_BITS - 1))
LONG_MAX: int = 2 ** (_LONG_BITS - 1) - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_ARITY: dict[Command, int] = {
    Command.CREATE: 1,
    Command.VIEW: 0,
    Command.REMOVE: 0,
}

_ARITY_MESSAGES: dict[Command, str] = {
    Command.CREATE: "-c must be followed only by one other argument, N, the initial value",
    Command.VIEW: "no arguments may follow -v",
    Command.REMOVE: "no arguments may follow -r",
}


def parse_flag(token: str) -> Command:
    """Map a flag token such as ``"-c"`` to its :class:`Command`."""
    if len(token) != 2:
        raise InvalidArgumentError("flag should be 2 chars")
    if token[0] != "-":
        raise InvalidArgumentError("flag should begin with '-'")
    try:
        return Command(token[1])
    except ValueError:
        raise InvalidArgumentError("flag must be either -c, -v, or -r") from None


def check_arity(command: Command, operands: int) -> None:
    """Ensure *command* is followed by the right number of *operands*."""
    if operands != _ARITY[command]:
        raise InvalidArgumentError(_ARITY_MESSAGES[command])


def parse_initial_value(text: str) -> int:
    """Parse ``N`` for ``-c N``.

    Surrounding whitespace and a leading sign are accepted; anything
    else that is not a run of decimal digits is rejected.
    """
    stripped = text.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        raise InvalidArgumentError(f"N must be a base-10 integer, got {text!r}")
    value = int(stripped)
    if not LONG_MIN <= value <= LONG_MAX:
        raise InvalidArgumentError("N is out of range")
    check_initial_value(value)
    return value


def check_initial_value(value: int) -> None:
    """Ensure *value* fits a semaphore count."""
    if value < 0:
        raise InvalidArgumentError("N must not be negative")
    if value > INT32_MAX:
        raise InvalidArgumentError("N must be a positive, signed 32-bit integer")
