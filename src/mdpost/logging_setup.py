"""Logging configuration for the mdpost CLI."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "MDPOST_LOG_LEVEL"

err_console = Console(stderr=True)


def _resolve_level(verbose: bool) -> int:
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        return getattr(logging, level_name.upper(), logging.INFO)
    return logging.DEBUG if verbose else logging.INFO


def configure_logging(verbose: bool = False) -> None:
    """Route all log records through a single Rich handler on stderr."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        console=err_console,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(verbose))
