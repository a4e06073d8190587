"""Allow ``python -m semctl`` invocation.

``sys.argv[0]`` is the path of this file under ``-m``, which is not a
meaningful semaphore identity, so the program name is pinned to
``semctl``, the name the console script is installed under.
"""

from __future__ import annotations

from semctl.cli.app import cli

if __name__ == "__main__":
    cli(prog="semctl")
