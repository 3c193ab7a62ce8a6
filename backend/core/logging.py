"""core/logging.py — Structured JSON logging with rotating file output.

Call configure_logging() once at application startup (lifespan in api/main.py).
After that, use standard logging.getLogger(__name__) throughout the app.

Output:
  - Console — JSON lines to stdout
  - File    — JSON lines, rotated at 10 MB, 5 backups kept
              Written to <LOG_DIR>/eventmi.log (LOG_DIR defaults to logs/
              in the project root).
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys

from pythonjsonlogger.json import JsonFormatter


_LOG_FILE_NAME = "eventmi.log"
_MAX_BYTES = 10 * 1024 * 1024   # 10 MB per file
_BACKUP_COUNT = 5                # keep 5 rotated files


def configure_logging(log_level: str = "DEBUG", log_dir: str | None = None) -> None:
    """Configure the root logger with JSON console + rotating file handlers.

    Args:
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
                   Passed from settings.log_level at startup.
        log_dir:   Directory for the rotating log file. When None, only the
                   console handler is installed.
    """
    level = getattr(logging, log_level.upper(), logging.DEBUG)
    fmt = "%(asctime)s %(name)s %(levelname)s %(message)s"
    formatter = JsonFormatter(fmt)

    # ── Console handler ────────────────────────────────────────────────────────
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    handlers: list[logging.Handler] = [console_handler]
    log_file = None

    # ── Rotating file handler ──────────────────────────────────────────────────
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, _LOG_FILE_NAME)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        handlers.append(file_handler)

    # ── Root logger ────────────────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)

    # SQL echo is noisy at DEBUG; keep the engine at WARNING unless asked.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={
            "log_level": log_level,
            "log_file": os.path.abspath(log_file) if log_file else None,
        },
    )
