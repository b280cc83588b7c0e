from __future__ import annotations

"""
Shared Lexical Scanning Helpers.

Match counting and import-specifier extraction shared by the component,
code, and self scanners.
"""

import re
from typing import List, Pattern

# Top-of-line `import ... from '<specifier>'`
IMPORT_RX: Pattern[str] = re.compile(r"^\s*import\s+.*?from\s+['\"](.*?)['\"]", re.MULTILINE)


def count_matches(pattern: Pattern[str], text: str) -> int:
    """Number of non-overlapping matches of a compiled pattern."""
    return sum(1 for _ in pattern.finditer(text))


def has_match(pattern: Pattern[str], text: str) -> bool:
    """True if the pattern matches anywhere in the text."""
    return pattern.search(text) is not None


def first_groups(pattern: Pattern[str], text: str) -> List[str]:
    """Group 1 of every match, in appearance order."""
    return [m.group(1) for m in pattern.finditer(text)]


def extract_imports(text: str) -> List[str]:
    """Module specifiers of every top-of-line import statement."""
    return first_groups(IMPORT_RX, text)
