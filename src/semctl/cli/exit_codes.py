"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: operation done, informational outcome, or usage shown."""

GENERAL_ERROR: int = 1
"""Invalid arguments or another known SemctlError.  Message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

OS_ERROR: int = 71
"""An OS semaphore call failed unrecoverably.  Matches sysexits ``EX_OSERR``."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
