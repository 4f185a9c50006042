"""Runtime settings and logging setup.

Settings come from environment variables, optionally loaded from a
``.env`` file by ``python-dotenv``:

``LEGAL_SIMPLIFY_MAX_POINTS``
    Default number of summary points (1-10, default 5).
``LEGAL_SIMPLIFY_LOG_LEVEL``
    Logging level name (default ``WARNING``).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv
from rich.logging import RichHandler

from .summarizer import DEFAULT_POINTS, validate_max_points

ENV_MAX_POINTS = "LEGAL_SIMPLIFY_MAX_POINTS"
ENV_LOG_LEVEL = "LEGAL_SIMPLIFY_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    max_points: int = DEFAULT_POINTS
    log_level: str = "WARNING"


def load_settings(environ: Mapping[str, str] | None = None, use_dotenv: bool = True) -> Settings:
    """Build :class:`Settings` from *environ* (``os.environ`` by default).

    Raises:
        ValueError: If a variable is set to an invalid value.
    """
    if environ is None:
        if use_dotenv:
            load_dotenv()
        environ = os.environ

    max_points = DEFAULT_POINTS
    raw_points = environ.get(ENV_MAX_POINTS, "").strip()
    if raw_points:
        try:
            max_points = validate_max_points(int(raw_points))
        except ValueError as e:
            raise ValueError(f"{ENV_MAX_POINTS}: {e}") from e

    log_level = environ.get(ENV_LOG_LEVEL, "").strip().upper() or "WARNING"
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"{ENV_LOG_LEVEL}: unknown level {log_level!r}")

    return Settings(max_points=max_points, log_level=log_level)


def configure_logging(level: str = "WARNING") -> None:
    """Send ``legal_simplify`` log records to a rich console handler."""
    logger = logging.getLogger("legal_simplify")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
