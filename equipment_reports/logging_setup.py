"""
Design (logging_setup.py)
- Purpose: Configure loguru sinks once at startup.
- Inputs: Level name, log folder, whether to write a log file.
- Outputs: None.
- Side effects: Replaces loguru's default handler; may create the log folder.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LOG_LEVEL, LOG_RETENTION


def setup_logging(
    log_level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_file: bool = True,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR (defaults to config.LOG_LEVEL)
        log_dir: Folder for the rotating log file
        enable_file: Also write logs to disk

    A log folder that cannot be created or written only costs the file sink.
    """
    level = (log_level or LOG_LEVEL).upper()

    # Console output is shared with the menu, so keep it short
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        colorize=True,
    )

    if enable_file and log_dir is not None:
        log_path = Path(log_dir)
        try:
            log_path.mkdir(parents=True, exist_ok=True)
            logger.add(
                log_path / "equipment_reports_{time:YYYY-MM-DD}.log",
                level="DEBUG",
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
                rotation="00:00",
                retention=LOG_RETENTION,
                encoding="utf-8",
            )
        except OSError as exc:
            logger.warning("Cannot write log files to {} ({}); logging to the console only", log_path, exc)

    logger.debug("Logging initialized at {} level", level)
