"""Logging setup, date-stamped log files and log retention."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PREVIEW_LIMIT = 100


def preview(text: str, limit: int = PREVIEW_LIMIT) -> str:
    """Truncate ``text`` for log output."""

    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."


class DateStampedFileHandler(logging.FileHandler):
    """File handler writing to ``<directory>/<YYYY-MM-DD>/<prefix>_<time>.log``."""

    def __init__(
        self,
        directory: str | Path,
        *,
        prefix: str = "relay",
        encoding: str | None = "utf-8",
        delay: bool = False,
        current_time: datetime | None = None,
    ) -> None:
        timestamp = (current_time or datetime.now(timezone.utc)).astimezone(
            timezone.utc
        )
        date_folder = timestamp.strftime("%Y-%m-%d")
        file_name = f"{prefix}_{timestamp.strftime('%Y-%m-%d_%H-%M-%S')}_UTC.log"
        log_path = (Path(directory).resolve() / date_folder / file_name).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(log_path, mode="a", encoding=encoding, delay=delay)


def prune_old_logs(
    directory: str | Path,
    retention_hours: int,
    logger: logging.Logger | None = None,
) -> tuple[int, int]:
    """
    Delete ``.log`` files older than the retention period.

    Args:
        directory: Root log directory holding the date folders
        retention_hours: Age threshold in hours (0 disables pruning)
        logger: Optional logger for reporting cleanup activity

    Returns:
        Tuple of (files_deleted, errors_encountered)
    """
    dir_path = Path(directory).resolve()
    if retention_hours <= 0 or not dir_path.exists():
        return (0, 0)

    cutoff_time = datetime.now(timezone.utc) - timedelta(hours=retention_hours)
    files_deleted = 0
    errors = 0

    for log_file in dir_path.rglob("*.log"):
        try:
            mtime = datetime.fromtimestamp(log_file.stat().st_mtime, tz=timezone.utc)
            if mtime < cutoff_time:
                log_file.unlink()
                files_deleted += 1
        except OSError as e:
            errors += 1
            if logger:
                logger.warning("Failed to delete %s: %s", log_file, e)

    for date_dir in dir_path.iterdir():
        if date_dir.is_dir() and not any(date_dir.iterdir()):
            try:
                date_dir.rmdir()
            except OSError:
                errors += 1

    if logger and files_deleted:
        logger.info(
            "Log cleanup complete: %d file(s) deleted, %d error(s) encountered",
            files_deleted,
            errors,
        )
    return (files_deleted, errors)


def configure_logging(settings: Settings) -> Optional[Path]:
    """Configure the root logger and return the active log file, if any."""

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    log_file: Optional[Path] = None
    if settings.log_dir:
        prune_old_logs(settings.log_dir, settings.log_retention_hours)
        file_handler = DateStampedFileHandler(settings.log_dir)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
        log_file = Path(file_handler.baseFilename)

    # Always add console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    logging.getLogger("medical_translator").setLevel(log_level)
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet noisy transport libraries unless debugging
    noisy_level = log_level if log_level <= logging.DEBUG else logging.WARNING
    for name in ("httpx", "httpcore", "google.auth", "grpc"):
        logging.getLogger(name).setLevel(noisy_level)

    return log_file


__all__ = [
    "DateStampedFileHandler",
    "configure_logging",
    "preview",
    "prune_old_logs",
]
