"""Logging configuration.

Modules log through ``logging.getLogger(__name__)``; this module wires
the root handler once at startup.  Records go to stderr so they never
interleave with console output on stdout.  Rich renders them when it is
installed; otherwise a plain stream handler is used.
"""

from __future__ import annotations

import logging
import os

from kubesim.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, PLAIN_LOG_FORMAT
from kubesim.exceptions import ConfigurationError


def resolve_level(level: str | None = None) -> int:
    """Translate *level* (or ``$KUBESIM_LOG_LEVEL``) to a logging level.

    Raises
    ------
    ConfigurationError
        If the name is not a standard logging level.
    """
    name = (level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ConfigurationError(
            f"Invalid log level: {name}",
            hint="Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
        )
    return value


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT))
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False)


def configure_logging(level: str | None = None) -> None:
    """Install the root handler at the resolved level (idempotent)."""
    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s",
        handlers=[_build_handler()],
        force=True,
    )
