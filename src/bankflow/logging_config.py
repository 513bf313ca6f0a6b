"""
Logging for bankflow.

Everything under the "bankflow" logger goes to a size-rotated file
(bankflow.log in BANKFLOW_LOG_DIR, default <repo>/logs) at LOG_LEVEL;
warnings and above are echoed to stderr as well.
"""

import logging
import os
from pathlib import Path
from logging.handlers import RotatingFileHandler

SERVICE_LOGGER = "bankflow"
DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent.parent / "logs"
LOG_FILE_NAME = "bankflow.log"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_AT_BYTES = 10 * 1024 * 1024  # 10 MB
KEEP_ROTATED = 5


def _level_from_env() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


def resolve_log_file() -> Path:
    log_dir = Path(os.getenv("BANKFLOW_LOG_DIR", str(DEFAULT_LOG_DIR)))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILE_NAME


def _build_handlers(log_file: Path, level: int):
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    to_file = RotatingFileHandler(
        log_file, maxBytes=ROTATE_AT_BYTES, backupCount=KEEP_ROTATED, encoding="utf-8"
    )
    to_file.setLevel(level)
    to_file.setFormatter(formatter)

    to_stderr = logging.StreamHandler()
    to_stderr.setLevel(logging.WARNING)
    to_stderr.setFormatter(formatter)
    return to_file, to_stderr


def setup_logging() -> Path:
    """
    Attach the bankflow handlers and return the log file path.

    Safe to call more than once: earlier handlers are closed and replaced.
    """
    level = _level_from_env()
    log_file = resolve_log_file()

    logging.getLogger().setLevel(level)

    service_logger = logging.getLogger(SERVICE_LOGGER)
    service_logger.setLevel(level)
    for handler in list(service_logger.handlers):
        service_logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(log_file, level):
        service_logger.addHandler(handler)

    # request middleware already logs every call
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return log_file


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
