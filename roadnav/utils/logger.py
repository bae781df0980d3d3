"""
Logging utilities
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def SetupLogger(level: str = "INFO", log_dir: Optional[str] = None, retention: str = "7 days"):
    """
    Setup logger with console output and an optional daily log file

    Args:
        level: Logging level
        log_dir: Directory to save log files, None to log to the console only
        retention: How long rotated log files are kept

    Returns:
        The configured loguru logger
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_path / "roadnav_{time:YYYY-MM-DD}.log"),
            rotation="00:00",  # Rotate at midnight
            retention=retention,
            level=level,
            encoding="utf-8",
            format=FILE_FORMAT
        )
        logger.info(f"Log initialized, saving to: {log_path}")

    return logger
