from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, log file rotation, and clean shutdown.
"""

import logging
import re
import time
from pathlib import Path

import pytest

from frontbrain.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)
from frontbrain.infra.logging.config import build_file_formatter, parse_level


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Release our handlers and listener before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    """TC-02: Verify force=True re-applies the configuration."""
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG


def test_log_rotation(tmp_path: Path) -> None:
    """TC-03: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "logs" / "frontbrain.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("Scanning a long list of component files to trigger rotation." * 5)

    # Stopping the listener drains the queue
    shutdown_logging()
    time.sleep(0.1)

    assert log_file.exists()
    assert (tmp_path / "logs" / "frontbrain.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-04: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    tagged = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(tagged) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_shutdown_detaches_everything() -> None:
    """TC-05: Verify shutdown removes our handlers and the configured flag."""
    configure_logging(LoggingConfig(level="INFO", console=True))
    shutdown_logging()

    root = logging.getLogger()
    assert not [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)


def test_unknown_level_defaults_to_info() -> None:
    """TC-06: Verify unrecognized level names fall back to INFO."""
    configure_logging(LoggingConfig(level="chatty", console=True))
    assert logging.getLogger().level == logging.INFO


def test_level_names_are_case_insensitive() -> None:
    """TC-07: Verify the accepted severity names."""
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warning ") == logging.WARNING
    assert parse_level("CRITICAL") == logging.CRITICAL
    assert parse_level("") == logging.INFO


def test_console_lines_carry_tool_name(capsys) -> None:
    """TC-08: Verify stderr lines are prefixed with the tool name."""
    configure_logging(LoggingConfig(level="INFO", console=True))
    logging.getLogger("frontbrain.test").warning("tsconfig.json is not an object")
    shutdown_logging()

    err = capsys.readouterr().err
    assert "frontbrain: WARNING: tsconfig.json is not an object" in err


def test_file_timestamps_are_utc_milliseconds() -> None:
    """TC-09: Verify file entries use ISO UTC timestamps with milliseconds."""
    formatter = build_file_formatter(LoggingConfig())
    record = logging.makeLogRecord(
        {"name": "frontbrain.scan", "levelname": "INFO", "msg": "done", "created": 0, "msecs": 0}
    )

    assert formatter.format(record) == "1970-01-01T00:00:00.000Z INFO     frontbrain.scan: done"


def test_file_entries_written_with_default_format(tmp_path: Path) -> None:
    """TC-10: Verify a logged record lands in the file in the default layout."""
    log_file = tmp_path / "frontbrain.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))
    logging.getLogger("frontbrain.walk").debug("skipped node_modules")
    shutdown_logging()

    line = log_file.read_text(encoding="utf-8").splitlines()[-1]
    assert re.fullmatch(
        r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z DEBUG    frontbrain\.walk: skipped node_modules",
        line,
    )
