"""
Application-wide logger.

Writes to ``logs/videodigest.log`` under the project root (or ``LOG_DIR``)
and to stdout. Modules import the configured logger as ``logging``.
"""

import os
import sys
import logging as _logging
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
LOGGER_NAME = "videodigest"


def _log_dir() -> Path:
    default = Path(__file__).resolve().parents[2] / "logs"
    return Path(os.getenv("LOG_DIR", str(default)))


def setup_logger(name: str = LOGGER_NAME) -> _logging.Logger:
    """Attach file and stdout handlers to the named logger once."""
    logger = _logging.getLogger(name)
    if logger.handlers:
        return logger

    log_dir = _log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = _logging.Formatter(LOG_FORMAT)
    for handler in (
        _logging.FileHandler(log_dir / f"{name}.log"),
        _logging.StreamHandler(sys.stdout),
    ):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(_logging.INFO)
    logger.propagate = False
    return logger


logging = setup_logger()
