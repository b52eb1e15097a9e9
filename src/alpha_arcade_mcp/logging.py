"""Logging configuration helpers (structlog)."""

from __future__ import annotations

import logging
import os
import sys

import structlog

LOG_LEVEL_ENV_VAR = "ALPHA_LOG_LEVEL"


def configure_structlog() -> None:
    """
    Configure structlog for this repository.

    Default behavior:
    - Logs go to stderr (stdout carries the MCP stdio transport and `--json` output).
    - Default level is WARNING (override with `ALPHA_LOG_LEVEL`).
    """
    level_name = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").strip().upper()
    level = logging.getLevelNamesMapping().get(level_name)
    if level is None:
        print(
            f"Invalid {LOG_LEVEL_ENV_VAR} {level_name!r}; falling back to WARNING",
            file=sys.__stderr__,
        )
        level = logging.WARNING

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.__stderr__),
        cache_logger_on_first_use=True,
    )
