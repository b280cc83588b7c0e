from __future__ import annotations

"""
Timestamp Formatting Helpers.

Renders epoch timestamps as ISO-8601 UTC strings with millisecond
precision and a trailing 'Z', the format used throughout the reports.
"""

from datetime import datetime, timezone


def iso_from_timestamp(ts: float) -> str:
    """
    Convert a POSIX timestamp into an ISO-8601 UTC string.

    Args:
        ts: Seconds since the epoch.

    Returns:
        str: Timestamp such as '2024-05-01T10:00:00.000Z'.
    """
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def elapsed_ms(started: float, ended: float) -> int:
    """Milliseconds between two POSIX timestamps, never negative."""
    return max(0, int(round((ended - started) * 1000)))
