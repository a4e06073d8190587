"""Shared pytest fixtures and configuration for the semctl test suite.

Guidelines
----------
* Tests must not depend on OS state: the semaphore backend is replaced
  by :class:`FakeSemaphoreBackend` at the infra boundary.
* ``posix_ipc`` is faked when testing the infra adapter itself.
* Only ``test_posix_integration.py`` touches real semaphores, and it
  skips itself when they are unavailable.
"""

from __future__ import annotations

import pytest

from semctl.exceptions import SemaphoreExistsError, SemaphoreNotFoundError


class FakeSemaphoreBackend:
    """In-memory :class:`~semctl.core.protocols.SemaphoreBackend`.

    Keyed by OS-level name; records every call in :attr:`calls`.
    """

    def __init__(self) -> None:
        self.semaphores: dict[str, int] = {}
        self.calls: list[tuple[object, ...]] = []

    def create(self, name: str, initial_value: int) -> None:
        self.calls.append(("create", name, initial_value))
        if name in self.semaphores:
            raise SemaphoreExistsError(name.lstrip("/"))
        self.semaphores[name] = initial_value

    def read_value(self, name: str) -> int:
        self.calls.append(("read_value", name))
        if name not in self.semaphores:
            raise SemaphoreNotFoundError(name.lstrip("/"))
        return self.semaphores[name]

    def unlink(self, name: str) -> None:
        self.calls.append(("unlink", name))
        if self.semaphores.pop(name, None) is None:
            raise SemaphoreNotFoundError(name.lstrip("/"))


@pytest.fixture
def fake_backend() -> FakeSemaphoreBackend:
    return FakeSemaphoreBackend()
