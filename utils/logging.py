import logging
import os
from typing import Optional

LOGGER_NAME = "doc_summarizer"


def _make_formatter() -> logging.Formatter:
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(module)s.%(funcName)s | %(message)s"
    return logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the service logger once; level defaults to LOG_LEVEL or INFO."""
    logger = logging.getLogger(LOGGER_NAME)
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(_make_formatter())
        logger.addHandler(ch)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
