"""Debug logging setup for the arglex command line."""

from __future__ import annotations

import logging
import os
import sys

DEBUG_ENV_VAR = "ARGLEX_DEBUG"

_debug_logging_initialized: bool = False


def debug_enabled_from_env() -> bool:
    """Return True when ``ARGLEX_DEBUG`` is set to ``1`` or ``true``."""
    return os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true")


def setup_debug_logging(level: int = logging.DEBUG) -> None:
    """Send ``arglex`` log records to stderr.

    This is idempotent - calling it multiple times has no effect after the first call.
    """
    global _debug_logging_initialized

    if _debug_logging_initialized:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("arglex")
    logger.addHandler(handler)
    logger.setLevel(level)

    _debug_logging_initialized = True
    logger.debug("Debug logging initialized")
