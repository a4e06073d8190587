"""posix_ipc backed implementation of :class:`~semctl.core.protocols.SemaphoreBackend`.

This module is the **only** place in the codebase that imports
``posix_ipc``.  All ``posix_ipc`` and ``OSError`` exceptions are caught
here and re-raised as typed :class:`~semctl.exceptions.SemctlError`
subclasses, so nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import errno
import logging
from types import ModuleType

from semctl.exceptions import (
    EnvironmentError,
    SemaphoreExistsError,
    SemaphoreNotFoundError,
    SemaphoreOSError,
    SemaphoreUnsupportedError,
)

logger = logging.getLogger(__name__)

CREATE_MODE: int = 0o600
"""Permissions for newly created semaphores: owner read/write only."""


def _load_posix_ipc() -> ModuleType:
    """Return the ``posix_ipc`` module or raise ``EnvironmentError``."""
    try:
        import posix_ipc
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "posix_ipc is not installed. Install with: pip install posix_ipc",
        ) from exc
    return posix_ipc


class PosixSemaphoreBackend:
    """Concrete :class:`SemaphoreBackend` backed by POSIX named semaphores.

    Usage::

        backend = PosixSemaphoreBackend()
        backend.create("/sem_tool", 5)
        backend.read_value("/sem_tool")   # -> 5
        backend.unlink("/sem_tool")

    This class satisfies the :class:`~semctl.core.protocols.SemaphoreBackend`
    protocol structurally; no explicit inheritance required.
    """

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def create(self, name: str, initial_value: int) -> None:
        """Exclusively create *name* (``O_CREAT | O_EXCL``) and close it."""
        posix_ipc = _load_posix_ipc()
        logger.debug("sem_open(%r, O_CREX, %#o, %d)", name, CREATE_MODE, initial_value)
        try:
            semaphore = posix_ipc.Semaphore(
                name,
                flags=posix_ipc.O_CREX,
                mode=CREATE_MODE,
                initial_value=initial_value,
            )
        except posix_ipc.ExistentialError as exc:
            logger.debug("sem_open(%r): already exists", name)
            raise SemaphoreExistsError(name.lstrip("/")) from exc
        except Exception as exc:
            raise self._os_error("sem_open", name, exc) from exc

        self._close(semaphore, name)

    def read_value(self, name: str) -> int:
        """Open the existing *name*, return its count, close it."""
        posix_ipc = _load_posix_ipc()
        if not posix_ipc.SEMAPHORE_VALUE_SUPPORTED:
            raise SemaphoreUnsupportedError(
                "This platform cannot report the value of a named semaphore.",
                hint="sem_getvalue() is unavailable here (e.g. macOS).",
            )

        logger.debug("sem_open(%r, 0)", name)
        try:
            semaphore = posix_ipc.Semaphore(name)
        except posix_ipc.ExistentialError as exc:
            logger.debug("sem_open(%r): does not exist", name)
            raise SemaphoreNotFoundError(name.lstrip("/")) from exc
        except Exception as exc:
            raise self._os_error("sem_open", name, exc) from exc

        try:
            value = semaphore.value
        except Exception as exc:
            raise self._os_error("sem_getvalue", name, exc) from exc
        finally:
            self._close(semaphore, name)

        logger.debug("sem_getvalue(%r) -> %d", name, value)
        return int(value)

    def unlink(self, name: str) -> None:
        """Remove *name* from the OS semaphore namespace."""
        posix_ipc = _load_posix_ipc()
        logger.debug("sem_unlink(%r)", name)
        try:
            posix_ipc.unlink_semaphore(name)
        except posix_ipc.ExistentialError as exc:
            logger.debug("sem_unlink(%r): does not exist", name)
            raise SemaphoreNotFoundError(name.lstrip("/")) from exc
        except Exception as exc:
            raise self._os_error("sem_unlink", name, exc) from exc

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _close(self, semaphore: object, name: str) -> None:
        logger.debug("sem_close(%r)", name)
        try:
            semaphore.close()  # type: ignore[attr-defined]
        except Exception as exc:
            raise self._os_error("sem_close", name, exc) from exc

    @staticmethod
    def _os_error(operation: str, name: str, exc: BaseException) -> SemaphoreOSError:
        """Translate a raw failure into :class:`SemaphoreOSError` and log it."""
        code = _errno_of(exc)
        error = SemaphoreOSError(operation, str(exc) or type(exc).__name__, errno=code)
        logger.error(
            "%s(%r) failed: errno %s (%s)",
            operation,
            name,
            code if code is not None else "?",
            error.errno_name,
        )
        return error


def _errno_of(exc: BaseException) -> int | None:
    """Best-effort errno for a ``posix_ipc`` / ``OSError`` failure.

    ``posix_ipc`` raises its own exception classes, which do not carry
    ``errno``; the class names map onto a fixed errno each.
    """
    code = getattr(exc, "errno", None)
    if isinstance(code, int):
        return code
    kind = type(exc).__name__
    if kind == "PermissionsError":
        return errno.EACCES
    if kind == "BusyError":
        return errno.EAGAIN
    if kind == "SignalError":
        return errno.EINTR
    if isinstance(exc, ValueError):
        return errno.EINVAL
    return None
