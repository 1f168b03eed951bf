"""Logging setup for the kegctl CLI."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .api.config.KegConfig import KegConfig

LOG_LEVEL_ENV = "KEGCTL_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level_from_env(default: int = logging.WARNING) -> int:
    """Level named by KEGCTL_LOG_LEVEL (e.g. "debug"), or default when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else default


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Send kegctl log records to a file under the kegctl home and to stderr.

    Probe failures (a ``ps`` timeout, unreadable tap metadata, a skipped
    formula file) are logged as warnings, so the default level shows them.

    Args:
        level: Logging level (default from KEGCTL_LOG_LEVEL, else WARNING)
        log_file: Log file path (default $KEGCTL_HOME/logs/kegctl.log)
        format_string: Record format
    """
    if level is None:
        level = log_level_from_env()
    if log_file is None:
        log_file = KegConfig.get_home_dir() / "logs" / "kegctl.log"

    log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=format_string or DEFAULT_FORMAT,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stderr)
        ]
    )
