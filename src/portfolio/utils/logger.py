"""
Centralised Loguru configuration.

Installs up to two sinks:
  - **stderr**: the requested level (WARNING for normal CLI use so that
    results on stdout stay clean), compact format, coloured.
  - **File** (optional): DEBUG and above with source location, 10 MB
    rotation, zip compression and 30-day retention.

Call ``setup_logger()`` once at start-up, before other ``logger`` usage.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logger(level: str = "INFO", log_dir: Optional[str] = None):
    """Configure and return the global Loguru logger.

    Args:
        level: Minimum level for the stderr sink.
        log_dir: Directory for rotated log files.  ``None`` disables the
                 file sink; otherwise it is created if missing.

    Returns:
        The configured ``logger`` singleton.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # e.g. logs/portfolio_2026-10-19.log
        logger.add(
            log_path / "portfolio_{time:YYYY-MM-DD}.log",
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
                "{name}:{function}:{line} - {message}"
            ),
            encoding="utf-8",
        )

    return logger
