"""semctl — create, inspect, and remove a named POSIX semaphore.

A thin command-line wrapper around the operating system's named
semaphore API, built with a strict layered architecture.
"""

from semctl.version import __version__

__all__: list[str] = ["__version__"]
