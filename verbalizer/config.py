"""
Runtime configuration from environment variables.

    VERBALIZER_DEFAULT_LANGUAGE   language used when a caller gives none (default "en")
    VERBALIZER_LOG_LEVEL          root log level for the API and CLI (default "INFO")

Entry points load a ``.env`` file first when python-dotenv is installed.
"""

from __future__ import annotations

import logging
import os

DEFAULT_LANGUAGE_ENV = "VERBALIZER_DEFAULT_LANGUAGE"
LOG_LEVEL_ENV = "VERBALIZER_LOG_LEVEL"


def default_language() -> str:
    return os.environ.get(DEFAULT_LANGUAGE_ENV, "en").strip() or "en"


def log_level() -> int:
    """Numeric log level; unknown names fall back to INFO."""
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
