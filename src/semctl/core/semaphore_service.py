"""Core semaphore service — orchestrates create / read / destroy.

This service delegates the actual OS calls to a
:class:`~semctl.core.protocols.SemaphoreBackend` injected at
construction time.  It is responsible for:

* Translating the user-facing identity into the OS object name.
* Turning the two expected collisions (already exists, does not exist)
  into informational :class:`~semctl.core.models.Outcome` values.
* Ensuring only :class:`~semctl.exceptions.SemctlError` subclasses
  escape.

Guarantees
----------
* Pure orchestration: no ``print()``, no ``posix_ipc`` import.
* Exactly one backend call per operation; no retries.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from semctl.core.arguments import check_initial_value
from semctl.core.models import Command, Invocation, OperationResult, Outcome
from semctl.core.naming import to_os_name
from semctl.core.protocols import SemaphoreBackend
from semctl.exceptions import (
    SemaphoreExistsError,
    SemaphoreNotFoundError,
    SemaphoreOSError,
    SemctlError,
)


_T = TypeVar("_T")


class SemaphoreService:
    """Stateless service that drives a single semaphore operation.

    Parameters
    ----------
    backend:
        Any object satisfying the :class:`SemaphoreBackend` protocol.
    """

    def __init__(self, backend: SemaphoreBackend) -> None:
        self._backend: SemaphoreBackend = backend

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, invocation: Invocation, name: str) -> OperationResult:
        """Dispatch *invocation* against the semaphore called *name*."""
        if invocation.command is Command.CREATE:
            assert invocation.initial_value is not None
            return self.create(name, invocation.initial_value)
        if invocation.command is Command.VIEW:
            return self.read(name)
        return self.destroy(name)

    def create(self, name: str, initial_value: int) -> OperationResult:
        """Create *name* with *initial_value* unless it already exists.

        Raises
        ------
        InvalidArgumentError
            If *initial_value* is outside ``[0, INT32_MAX]``.
        SemaphoreOSError
            For any OS failure other than "already exists".
        """
        check_initial_value(initial_value)
        try:
            self._call("sem_open", self._backend.create, to_os_name(name), initial_value)
        except SemaphoreExistsError:
            return OperationResult(Command.CREATE, name, Outcome.ALREADY_EXISTS)
        return OperationResult(Command.CREATE, name, Outcome.CREATED, initial_value)

    def read(self, name: str) -> OperationResult:
        """Return the current value of *name*, or a NOT_FOUND outcome."""
        try:
            value = self._call("sem_getvalue", self._backend.read_value, to_os_name(name))
        except SemaphoreNotFoundError:
            return OperationResult(Command.VIEW, name, Outcome.NOT_FOUND)
        return OperationResult(Command.VIEW, name, Outcome.READ, value)

    def destroy(self, name: str) -> OperationResult:
        """Unlink *name*, or report that it did not exist."""
        try:
            self._call("sem_unlink", self._backend.unlink, to_os_name(name))
        except SemaphoreNotFoundError:
            return OperationResult(Command.REMOVE, name, Outcome.DID_NOT_EXIST)
        return OperationResult(Command.REMOVE, name, Outcome.REMOVED)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _call(operation: str, func: Callable[..., _T], *args: Any) -> _T:
        try:
            return func(*args)
        except SemctlError:
            # Already one of ours.
            raise
        except Exception as exc:
            raise SemaphoreOSError(
                operation,
                f"Unexpected backend error: {exc}",
            ) from exc
