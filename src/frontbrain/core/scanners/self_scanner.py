from __future__ import annotations

"""
Self Scanner.

Treats the engine's own source file as a scan subject: size, line metrics,
a heuristic count of function-like constructs, TODO/FIXME markers, and the
same type-system signals applied to every scanned code file.
"""

import logging
import os
import re
from typing import Optional, Pattern

from frontbrain.core.scanners.common import count_matches
from frontbrain.core.scanners.type_signals import scan_type_signals
from frontbrain.domain.scan_models import SelfStats
from frontbrain.infra.fs import read_text

logger = logging.getLogger(__name__)

LINE_SPLIT_RX: Pattern[str] = re.compile(r"\r?\n")
FUNCTION_LIKE_RX: Pattern[str] = re.compile(
    r"\b(?:function\b|def\s+\w+\s*\(|\(\)\s*=>|=>\s*\{|function\s*\w+\s*\()", re.ASCII
)
TODO_RX: Pattern[str] = re.compile(r"(?://|#)\s*TODO\b", re.IGNORECASE | re.ASCII)
FIXME_RX: Pattern[str] = re.compile(r"(?://|#)\s*FIXME\b", re.IGNORECASE | re.ASCII)


def scan_self(path: str, project_root: str) -> Optional[SelfStats]:
    """
    Scan the engine source file.

    A missing file is not an error: the self scan is simply absent.

    Args:
        path: Path of the engine source file.
        project_root: Root used to express the reported path.

    Returns:
        Optional[SelfStats]: Metrics, or None when the file does not exist.
    """
    if not os.path.isfile(path):
        logger.debug(f"Self-scan target not found: {path}")
        return None

    return scan_self_text(read_text(path), _display_path(path, project_root))


def scan_self_text(text: str, display_path: str) -> SelfStats:
    """Compute self metrics over text already held in memory."""
    lines = LINE_SPLIT_RX.split(text)
    return SelfStats(
        path=display_path,
        bytes=len(text.encode("utf-8")),
        lines=len(lines),
        max_line_len=max(_utf16_len(line) for line in lines),
        function_like_count=count_matches(FUNCTION_LIKE_RX, text),
        todo_count=count_matches(TODO_RX, text),
        fixme_count=count_matches(FIXME_RX, text),
        ts_signals=scan_type_signals(text),
    )


def _utf16_len(line: str) -> int:
    """Line length in UTF-16 code units, so astral characters count twice."""
    return len(line.encode("utf-16-le", "surrogatepass")) // 2


def _display_path(path: str, project_root: str) -> str:
    """Root-relative path when inside the project, absolute otherwise."""
    abs_path = os.path.abspath(path)
    abs_root = os.path.abspath(project_root)
    try:
        if os.path.commonpath([abs_path, abs_root]) == abs_root:
            return os.path.relpath(abs_path, abs_root)
    except ValueError:
        # Different drives on Windows
        pass
    return abs_path
