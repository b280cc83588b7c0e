from __future__ import annotations

"""
Type-System Signal Scanner.

Counts a fixed vocabulary of static-typing constructs and anti-patterns in
a text blob. Every counter is a plain count of non-overlapping matches of
one pattern; the union and intersection heuristics are token-adjacency
checks and keep their false positives, because the hygiene score is
defined against these exact counts.
"""

import re
from typing import Dict, Pattern

from frontbrain.core.scanners.common import count_matches
from frontbrain.domain.scan_models import TypeSystemSignals

# Word characters and boundaries are ASCII-only
_A = re.ASCII

TS_PATTERNS: Dict[str, Pattern[str]] = {
    "any_count": re.compile(r"\bany\b", _A),
    "ts_ignore_count": re.compile(r"//\s*@ts-ignore\b", _A),
    "ts_expect_error_count": re.compile(r"//\s*@ts-expect-error\b", _A),
    "non_null_assertion_count": re.compile(r"!!"),
    "as_const_count": re.compile(r"\bas\s+const\b", _A),
    "satisfies_count": re.compile(r"\bsatisfies\b", _A),
    "readonly_count": re.compile(r"\breadonly\b", _A),
    "enum_count": re.compile(r"\benum\s+\w+", _A),
    "interface_count": re.compile(r"\binterface\s+\w+", _A),
    "type_alias_count": re.compile(r"\btype\s+\w+\s*=", _A),
    "generic_angles_count": re.compile(
        r"<\s*[A-Z][A-Za-z0-9_]*(?:\s*,\s*[A-Z][A-Za-z0-9_]*)*\s*>"
    ),
    "union_count": re.compile(r"[^|]\s\|\s[^|]"),
    "intersection_count": re.compile(r"\s&\s"),
}


def scan_type_signals(text: str) -> TypeSystemSignals:
    """
    Count every type-system signal in the text.

    Args:
        text: Source text to scan.

    Returns:
        TypeSystemSignals: Fully populated counters.
    """
    return TypeSystemSignals(**{
        name: count_matches(pattern, text) for name, pattern in TS_PATTERNS.items()
    })
