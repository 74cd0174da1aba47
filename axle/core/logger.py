"""Logger configuration for the AXLE workout services."""

import sys
from pathlib import Path

from loguru import logger

from axle.config.settings import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    json_logs: bool = False,
) -> None:
    """Configure loguru with a console sink and an optional file sink.

    Structured context passed as logging kwargs (seed, focus, code, ...)
    ends up in the record's extra dict. The file sink always writes it; the
    console shows it only when json_logs is on.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, only console logging.
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
        json_logs: Emit one JSON object per record on stderr instead of colour text
    """
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            # Records carry seeds and payload fragments; keep variable dumps out of files
            diagnose=False,
        )

    logger.debug("Logger initialized", level=level, log_file=log_file, json_logs=json_logs)


def configure_logging(settings: Settings) -> None:
    """Apply the logging section of the settings."""
    setup_logger(
        level=settings.log_level,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
        json_logs=settings.log_json,
    )
