"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli`` or ``infra``.
* The only OS access is through an injected
  :class:`~semctl.core.protocols.SemaphoreBackend`.
"""

from semctl.core.models import Command, Invocation, OperationResult, Outcome
from semctl.core.protocols import SemaphoreBackend
from semctl.core.semaphore_service import SemaphoreService

__all__: list[str] = [
    "Command",
    "Invocation",
    "OperationResult",
    "Outcome",
    "SemaphoreBackend",
    "SemaphoreService",
]
