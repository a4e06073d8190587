"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system's named
semaphores.  Every raw third-party exception must be caught here and
re-raised as a :class:`~semctl.exceptions.SemctlError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering); logging only.
* Must expose clean, typed interfaces consumed by the core layer.
"""

from semctl.infra.posix_semaphore import PosixSemaphoreBackend

__all__: list[str] = [
    "PosixSemaphoreBackend",
]
