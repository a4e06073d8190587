"""Semaphore identity derivation.

The semaphore a run operates on is named after the program itself: the
invocation path with a leading ``./`` removed, reduced to its final path
component.  Copying or symlinking the executable under another name
therefore addresses another semaphore.  ``SEMCTL_NAME`` can pin the
identity explicitly.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from semctl.exceptions import InvalidArgumentError

NAME_ENV_VAR: str = "SEMCTL_NAME"
"""Environment variable that overrides the invocation-derived name."""


def derive_semaphore_name(invocation_path: str) -> str:
    """Return the semaphore identity for *invocation_path*.

    >>> derive_semaphore_name("./sem_tool")
    'sem_tool'
    >>> derive_semaphore_name("/usr/local/bin/sem_tool")
    'sem_tool'
    """
    path = invocation_path.removeprefix("./")
    return validate_semaphore_name(os.path.basename(path))


def validate_semaphore_name(name: str) -> str:
    """Return *name* unchanged, or raise if it cannot name a semaphore.

    Only structural checks happen here; length and character-set limits
    are left to the operating system.
    """
    if not name:
        raise InvalidArgumentError(
            "the semaphore name must not be empty",
            hint=f"Invoke the program by a non-empty file name or set {NAME_ENV_VAR}.",
        )
    if "/" in name or "\0" in name:
        raise InvalidArgumentError(
            f"the semaphore name {name!r} must not contain '/' or NUL characters",
        )
    return name


def resolve_semaphore_name(
    invocation_path: str,
    environ: Mapping[str, str],
) -> str:
    """Pick the explicit ``SEMCTL_NAME`` when set, else derive from the path."""
    explicit = environ.get(NAME_ENV_VAR, "")
    if explicit:
        return validate_semaphore_name(explicit)
    return derive_semaphore_name(invocation_path)


def to_os_name(name: str) -> str:
    """Return the OS-level object name: *name* with a single leading ``/``."""
    return f"/{name}"
