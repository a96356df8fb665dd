from __future__ import annotations

import logging
from pathlib import Path

LOG_DIR = Path.home() / ".uilocator"
LOGGER_NAME = "uilocator"


def build_logger(log_dir: Path | None = None, level: int = logging.INFO) -> logging.Logger:
    """Attach a file handler to the ``uilocator`` logger tree once.

    ``uilocator.resolve`` and ``uilocator.picker`` inherit it. When the log
    folder cannot be created the logger falls back to stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    logger.propagate = False
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    try:
        target_dir = log_dir or LOG_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target_dir / "uilocator.log", encoding="utf-8")
    except OSError:
        handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
