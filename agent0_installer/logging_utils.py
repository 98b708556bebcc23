from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

FALLBACK_LOG_NAME = "agent0-installer.log"


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Configure logging.

    Console output is plain status lines: progress to stdout, warnings and
    errors to stderr. When log_path is given, a timestamped copy of every
    record is written there as well.

    Notes:
    - If log_path cannot be opened we fall back to a file in the current
      working directory.

    Returns the actual file path being used, or None.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_agent0_configured", False):
        return getattr(logger, "_agent0_log_path", log_path)

    chosen_path: Optional[str] = None
    handlers: list[logging.Handler] = []

    if log_path:
        fmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            chosen_path = log_path
        except OSError:
            # Fall back to a writable location.
            fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
            file_handler = logging.FileHandler(fallback)
            chosen_path = fallback
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)

    if also_console:
        out = logging.StreamHandler(sys.stdout)
        out.setFormatter(logging.Formatter("==> %(message)s"))
        out.addFilter(_BelowWarning())
        handlers.append(out)

        err = logging.StreamHandler(sys.stderr)
        err.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        err.setLevel(logging.WARNING)
        handlers.append(err)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_agent0_configured", True)
    setattr(logger, "_agent0_log_path", chosen_path)

    if chosen_path:
        logging.getLogger(__name__).debug(
            "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
        )
    return chosen_path
