"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol


class SemaphoreBackend(Protocol):
    """Contract for named-semaphore backends.

    *name* is always the OS-level object name (leading ``/``).
    Implementations must map every backend-specific exception to a
    :class:`~semctl.exceptions.SemctlError` subclass.
    """

    def create(self, name: str, initial_value: int) -> None:
        """Exclusively create *name* with *initial_value* and close it.

        Raises
        ------
        SemaphoreExistsError
            When a semaphore named *name* already exists.
        SemaphoreOSError
            For any other OS failure.
        """
        ...  # pragma: no cover

    def read_value(self, name: str) -> int:
        """Open the existing *name*, return its count, close it.

        Raises
        ------
        SemaphoreNotFoundError
            When no semaphore named *name* exists.
        SemaphoreUnsupportedError
            When the platform cannot report semaphore values.
        SemaphoreOSError
            For any other OS failure.
        """
        ...  # pragma: no cover

    def unlink(self, name: str) -> None:
        """Remove *name* from the OS namespace.

        Raises
        ------
        SemaphoreNotFoundError
            When no semaphore named *name* exists.
        SemaphoreOSError
            For any other OS failure.
        """
        ...  # pragma: no cover
