# utils/logger.py
import logging
from pathlib import Path

from squad_capacity.utils.config import config

LOG_DIR = Path("logs")
LOG_LEVEL = config.LOG_LEVEL

# Create formatter
formatter = logging.Formatter(
    fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

# Console handler (for local runs)
console_handler = logging.StreamHandler()
console_handler.setLevel("INFO")  # Always show INFO+ in console
console_handler.setFormatter(formatter)

_file_handler = None


def _get_file_handler() -> logging.FileHandler:
    """File handler is created on first use so importing never touches disk."""
    global _file_handler
    if _file_handler is None:
        if config.LOG_FILE:
            log_file = Path(config.LOG_FILE)
        else:
            LOG_DIR.mkdir(exist_ok=True)
            log_file = LOG_DIR / "squad_capacity.log"
        _file_handler = logging.FileHandler(log_file, encoding="utf-8")
        _file_handler.setLevel(LOG_LEVEL)
        _file_handler.setFormatter(formatter)
    return _file_handler


def get_logger(name: str = "squad_capacity", to_file: bool = True) -> logging.Logger:
    """Return a configured logger instance."""
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)

    # Avoid duplicate handlers if called multiple times
    if not logger.handlers:
        if to_file:
            logger.addHandler(_get_file_handler())
        logger.addHandler(console_handler)

    return logger
