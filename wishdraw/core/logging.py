import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time} | {level} | {module}:{function}:{line} | {extra} | {message}"


def setup_logging(level: str, log_path: Optional[str]) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT,
    )
    if log_path:
        logger.add(
            log_path,
            level="DEBUG",
            format=LOG_FORMAT,
            rotation="100 KB",
            compression="zip",
        )
