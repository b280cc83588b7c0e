from __future__ import annotations

"""
Generic Code Scanner.

Extracts imports, the number of top-level export declarations, and the UI
framework initialization flag from a script-like file, and embeds the
type-system and performance signals of the same text.
"""

import re
from typing import Pattern

from frontbrain.core.scanners.common import count_matches, extract_imports, has_match
from frontbrain.core.scanners.perf_signals import scan_perf_signals
from frontbrain.core.scanners.type_signals import scan_type_signals
from frontbrain.domain.scan_models import CodeSummary
from frontbrain.infra.fs import read_text, relative_to_root

EXPORT_RX: Pattern[str] = re.compile(
    r"^\s*export\s+(?:default|const|function|class)\b", re.MULTILINE | re.ASCII
)
FRAMEWORK_INIT_RX: Pattern[str] = re.compile(r"createVuetify\s*\(")


def scan_code(path: str, project_root: str) -> CodeSummary:
    """
    Read and scan one code file.

    Args:
        path: Absolute path of the file.
        project_root: Root used to express the summary path.

    Returns:
        CodeSummary: Extracted signals.
    """
    return scan_code_text(read_text(path), relative_to_root(path, project_root))


def scan_code_text(text: str, rel_path: str) -> CodeSummary:
    """Scan code text already held in memory."""
    return CodeSummary(
        file=rel_path,
        imports=extract_imports(text),
        export_count=count_matches(EXPORT_RX, text),
        vuetify_create=has_match(FRAMEWORK_INIT_RX, text),
        ts_signals=scan_type_signals(text),
        perf_signals=scan_perf_signals(text),
    )
