"""Domain models for semctl.

All models are **frozen** dataclasses or enums: immutable value objects
with no behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class Command(enum.Enum):
    """The three mutually exclusive operations, keyed by their flag letter."""

    CREATE = "c"
    VIEW = "v"
    REMOVE = "r"

    @property
    def flag(self) -> str:
        return f"-{self.value}"


@dataclass(frozen=True, slots=True)
class Invocation:
    """A fully validated request parsed from the command line."""

    command: Command
    """Which operation to perform."""

    initial_value: int | None = None
    """Initial count for :attr:`Command.CREATE`; ``None`` otherwise."""


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

class Outcome(enum.Enum):
    """How a single operation ended.

    ``ALREADY_EXISTS``, ``NOT_FOUND`` and ``DID_NOT_EXIST`` are
    informational: they are reported to the user but are not failures.
    """

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    READ = "read"
    NOT_FOUND = "not_found"
    REMOVED = "removed"
    DID_NOT_EXIST = "did_not_exist"

    @property
    def informational(self) -> bool:
        return self in _INFORMATIONAL


_INFORMATIONAL: frozenset[Outcome] = frozenset(
    {Outcome.ALREADY_EXISTS, Outcome.NOT_FOUND, Outcome.DID_NOT_EXIST}
)


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Result of one create / read / destroy against a named semaphore."""

    command: Command
    name: str
    """Semaphore identity as shown to the user (no leading ``/``)."""

    outcome: Outcome
    value: int | None = None
    """Current value for reads, initial value for creates."""
