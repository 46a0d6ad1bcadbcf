from __future__ import annotations

import logging
import os
import time
from datetime import datetime, timezone
from pathlib import Path

from medical_translator.config import Settings
from medical_translator.logging_config import (
    DateStampedFileHandler,
    configure_logging,
    preview,
    prune_old_logs,
)


def test_preview_truncates_long_text() -> None:
    assert preview("short") == "short"
    assert preview("a" * 120) == "a" * 100 + "..."
    assert preview("abcdef", 3) == "abc..."


def test_handler_writes_into_date_folder(tmp_path: Path) -> None:
    stamp = datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc)
    handler = DateStampedFileHandler(tmp_path, current_time=stamp)
    try:
        path = Path(handler.baseFilename)
    finally:
        handler.close()

    assert path.parent == (tmp_path / "2024-03-05").resolve()
    assert path.name == "relay_2024-03-05_14-07-09_UTC.log"


def test_prune_removes_expired_logs_and_empty_folders(tmp_path: Path) -> None:
    old_dir = tmp_path / "2020-01-01"
    old_dir.mkdir()
    old_log = old_dir / "relay_old.log"
    old_log.write_text("old", encoding="utf-8")
    expired = time.time() - 72 * 3600
    os.utime(old_log, (expired, expired))

    fresh_dir = tmp_path / "2099-01-01"
    fresh_dir.mkdir()
    fresh_log = fresh_dir / "relay_new.log"
    fresh_log.write_text("new", encoding="utf-8")

    deleted, errors = prune_old_logs(tmp_path, retention_hours=48)

    assert (deleted, errors) == (1, 0)
    assert not old_dir.exists()
    assert fresh_log.exists()


def test_prune_disabled_with_zero_retention(tmp_path: Path) -> None:
    log = tmp_path / "relay.log"
    log.write_text("x", encoding="utf-8")
    os.utime(log, (0, 0))

    assert prune_old_logs(tmp_path, retention_hours=0) == (0, 0)
    assert log.exists()


def test_configure_logging_with_directory(tmp_path: Path) -> None:
    settings = Settings(log_dir=tmp_path, log_level="DEBUG")
    try:
        log_file = configure_logging(settings)
        assert log_file is not None
        assert log_file.exists()
        assert logging.getLogger("medical_translator").level == logging.DEBUG
    finally:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.basicConfig(level=logging.WARNING, force=True)


def test_configure_logging_console_only(offline_settings: Settings) -> None:
    assert configure_logging(offline_settings) is None
    assert logging.getLogger("httpx").level == logging.WARNING
