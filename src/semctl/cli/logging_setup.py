"""Logging configuration for the CLI process.

Library modules only create loggers (``logging.getLogger(__name__)``);
this module is the one place that attaches a handler.  Records go to
stderr through Rich when it is installed, else through a plain stream
handler, so stdout stays reserved for results.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping

LOG_LEVEL_ENV_VAR: str = "SEMCTL_LOG_LEVEL"
"""Environment variable holding the logging threshold."""

DEFAULT_LEVEL: int = logging.WARNING

ROOT_LOGGER_NAME: str = "semctl"

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def resolve_level(environ: Mapping[str, str]) -> int:
    """Return the level named by ``SEMCTL_LOG_LEVEL``; unknown names fall back."""
    raw = environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    return _LEVELS.get(raw, DEFAULT_LEVEL)


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(environ: Mapping[str, str]) -> logging.Logger:
    """Attach the stderr handler to the ``semctl`` logger and set its level.

    Safe to call repeatedly: the handler is installed once per process,
    the level is refreshed on every call.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(resolve_level(environ))
    if not any(getattr(h, "_semctl_handler", False) for h in logger.handlers):
        handler = _build_handler()
        handler._semctl_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
