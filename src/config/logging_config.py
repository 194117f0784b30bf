# src/config/logging_config.py

"""Run-log setup for catalog_admin.

Every launch writes ``logs/run_<timestamp>.log`` at DEBUG so the TUI,
which owns the terminal, still leaves a full trace of its API calls.
Stderr only shows records at or above ``Settings.CONSOLE_LOG_LEVEL``
(``CATALOG_LOG_LEVEL`` in the environment, WARNING by default).

Both handlers pass records through :class:`SecretMaskFilter`, so a
bearer header or credential field that reaches a message is written
out as ``***``.
"""

import logging
import re
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_RUN_LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)
_STDERR_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_MASK = "***"
_SECRET_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(Bearer\s+)[^\s'\",}]+", re.IGNORECASE),
    re.compile(
        r"""(["']?(?:accessToken|refreshToken|token|password)["']?\s*[:=]\s*["']?)"""
        r"""[^\s'",}&]+""",
        re.IGNORECASE,
    ),
)


class SecretMaskFilter(logging.Filter):
    """Replaces bearer tokens and credential values with ``***``."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = message
        for pattern in _SECRET_PATTERNS:
            masked = pattern.sub(lambda m: m.group(1) + _MASK, masked)
        if masked != message:
            record.msg = masked
            record.args = ()
        return True


def console_level() -> int:
    """Numeric stderr threshold; unknown names fall back to WARNING."""
    level = logging.getLevelName(Settings.CONSOLE_LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging() -> Path:
    """Attach the run-log and stderr handlers to ``catalog_admin``.

    Returns the path of this run's log file.  A second call leaves
    the existing handlers in place.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    app_logger = logging.getLogger("catalog_admin")
    app_logger.setLevel(logging.DEBUG)
    if app_logger.handlers:
        return log_file

    mask = SecretMaskFilter()

    run_log = logging.FileHandler(log_file, encoding="utf-8")
    run_log.setLevel(logging.DEBUG)
    run_log.setFormatter(logging.Formatter(_RUN_LOG_FORMAT, datefmt=_DATE_FORMAT))
    run_log.addFilter(mask)

    stderr = logging.StreamHandler(sys.stderr)
    stderr.setLevel(console_level())
    stderr.setFormatter(logging.Formatter(_STDERR_FORMAT, datefmt=_DATE_FORMAT))
    stderr.addFilter(mask)

    app_logger.addHandler(run_log)
    app_logger.addHandler(stderr)

    if not isinstance(logging.getLevelName(Settings.CONSOLE_LOG_LEVEL), int):
        app_logger.warning(
            "Unknown log level %r; using WARNING", Settings.CONSOLE_LOG_LEVEL
        )
    app_logger.info("Run log: %s", log_file)
    return log_file
