from __future__ import annotations

"""
Performance Signal Scanner.

Detects whether five runtime performance APIs are used anywhere in a text
blob. Only presence is recorded, never a count.
"""

import re
from typing import Dict, Pattern

from frontbrain.core.scanners.common import has_match
from frontbrain.domain.scan_models import PerformanceSignals

PERF_PATTERNS: Dict[str, Pattern[str]] = {
    "performance_now": re.compile(r"\bperformance\.now\s*\(", re.ASCII),
    "request_idle_callback": re.compile(r"\brequestIdleCallback\s*\(", re.ASCII),
    "intersection_observer": re.compile(r"\bIntersectionObserver\b", re.ASCII),
    "console_time": re.compile(r"\bconsole\.(?:time|timeEnd)\s*\(", re.ASCII),
    "dynamic_import": re.compile(r"\bimport\s*\(\s*['\"].*?['\"]\s*\)", re.ASCII),
}


def scan_perf_signals(text: str) -> PerformanceSignals:
    """Return the presence flag of every performance signal in the text."""
    return PerformanceSignals(**{
        name: has_match(pattern, text) for name, pattern in PERF_PATTERNS.items()
    })
