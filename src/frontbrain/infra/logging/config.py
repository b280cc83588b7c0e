from __future__ import annotations

"""
Logging Configuration Models.

Settings for the frontbrain logging bootstrap. Console lines carry the tool
name so they stay distinguishable from the report printed on stdout; file
entries use the same UTC millisecond timestamps as the scan window.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional

from frontbrain.domain.constants import APP_NAME

# Severities the CLI can request, keyed by their canonical names
_LEVEL_MAP: Dict[str, int] = {
    logging.getLevelName(value): value
    for value in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL)
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging bootstrap.

    Attributes:
        level: Minimum severity name (case-insensitive). Unknown names mean INFO.
        console: Emit to stderr.
        log_file: Optional rotating log file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
        console_fmt: Format for stderr lines.
        file_fmt: Format for file entries.
        datefmt: Timestamp format for file entries, without milliseconds.
        utc: Render file timestamps in UTC.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 256 * 1024
    backup_count: int = 2

    console_fmt: str = f"{APP_NAME}: %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s.%(msecs)03dZ %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%dT%H:%M:%S"
    utc: bool = True


def parse_level(level: str) -> int:
    """Convert a severity name to its numeric constant, INFO when unknown."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def build_file_formatter(cfg: LoggingConfig) -> logging.Formatter:
    """Formatter for the rotating file, honouring the UTC setting."""
    formatter = logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt)
    if cfg.utc:
        formatter.converter = time.gmtime
    return formatter
