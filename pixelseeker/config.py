# Role: Central configuration module. Loads .env into environment variables, computes runtime flags (DEBUG),
# and owns the single "pixelseeker" logger every other module logs through.

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

DEBUG: bool = False

_LOGGER_NAME = "pixelseeker"
_logging_initialized = False


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG and the log level.
    This makes DEBUG correct even if load_env() is called after import.
    """
    global DEBUG
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}
    logging.getLogger(_LOGGER_NAME).setLevel(_log_level())


def http_timeout_seconds() -> float:
    try:
        return float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
    except ValueError:
        return 30.0


def _log_level() -> int:
    if DEBUG:
        return logging.DEBUG
    level_str = os.getenv("PIXELSEEKER_LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_str, logging.INFO)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger (or a child of it), attaching the stdout handler once."""
    global _logging_initialized

    root = logging.getLogger(_LOGGER_NAME)
    if not _logging_initialized:
        root.setLevel(_log_level())
        root.propagate = False
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        root.handlers.clear()
        root.addHandler(handler)
        _logging_initialized = True

    if not name or name == _LOGGER_NAME:
        return root
    if name.startswith(_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return root.getChild(name)
