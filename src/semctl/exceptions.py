"""Custom exception hierarchy for semctl.

All exceptions that cross layer boundaries must inherit from
:class:`SemctlError`.  Raw ``posix_ipc`` and ``OSError`` exceptions must
NEVER propagate beyond the infrastructure layer; they must be caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
SemctlError
├── InvalidArgumentError
├── SemaphoreExistsError
├── SemaphoreNotFoundError
├── SemaphoreOSError
└── EnvironmentError
    └── SemaphoreUnsupportedError
"""

from __future__ import annotations

import errno as errno_codes


class SemctlError(Exception):
    """Base exception for all semctl errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument validation ---------------------------------------------------

class InvalidArgumentError(SemctlError):
    """Raised when the command line is malformed.

    Always raised before any semaphore call is attempted.
    """


# --- Expected collisions ---------------------------------------------------

class SemaphoreExistsError(SemctlError):
    """Raised by a backend when an exclusive create finds an existing semaphore."""

    def __init__(self, name: str) -> None:
        super().__init__(f'The semaphore named "{name}" already exists.')
        self.name: str = name


class SemaphoreNotFoundError(SemctlError):
    """Raised by a backend when the named semaphore does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f'The semaphore named "{name}" does not exist.')
        self.name: str = name


# --- Operating system ------------------------------------------------------

class SemaphoreOSError(SemctlError):
    """Raised when an OS semaphore call fails for any unexpected reason.

    Carries the failing *operation* (e.g. ``"sem_open"``) and the
    ``errno`` value, when one is known, so the CLI can log it.
    """

    def __init__(
        self,
        operation: str,
        message: str,
        *,
        errno: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"{operation} failed: {message}", hint=hint)
        self.operation: str = operation
        self.errno: int | None = errno

    @property
    def errno_name(self) -> str:
        """Symbolic errno name (``"EACCES"``), or ``"unknown"``."""
        if self.errno is None:
            return "unknown"
        return errno_codes.errorcode.get(self.errno, str(self.errno))


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SemctlError):
    """Raised when a required runtime dependency is not available."""


class SemaphoreUnsupportedError(EnvironmentError):
    """Raised when the platform lacks a named-semaphore capability."""
