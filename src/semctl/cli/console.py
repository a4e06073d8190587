"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so every command remains functional even when Rich is not
installed.

Two proxies are exported: :data:`console` writes results to stdout and
:data:`err_console` writes diagnostics to stderr.  Text is printed
verbatim (no markup, no highlighting, no wrapping) so scripts can parse
the results.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from semctl.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(
		stderr=stderr,
		soft_wrap=True,
		markup=False,
		highlight=False,
		emoji=False,
	)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def _stream(self) -> TextIO:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=self._stream())
			return
		rich_console.print(*objects, style=style)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
