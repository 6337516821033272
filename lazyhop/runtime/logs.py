"""Debug logging setup.

The viewer owns the terminal, so log records only ever go to a file, and
only when one is requested with ``--log-file`` or ``LAZYHOP_LOG``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_ENV_VAR = "LAZYHOP_LOG"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def resolve_log_file(cli_value: str | None) -> Path | None:
    """Log file from the CLI flag, else from ``LAZYHOP_LOG``."""
    raw = cli_value or os.environ.get(LOG_ENV_VAR, "")
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def setup_logging(log_file: Path | None) -> bool:
    """Send ``lazyhop`` records at DEBUG to ``log_file``; returns whether enabled."""
    package_logger = logging.getLogger("lazyhop")
    if log_file is None:
        return False
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        package_logger.warning("cannot open log file %s: %s", log_file, exc)
        return False
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return True
