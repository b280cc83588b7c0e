from __future__ import annotations

"""
Single-File Component Scanner.

Extracts structural signals from a Vue single-file component: template tag
names, imports, emitted-event and prop declarations, and three typing
markers. The markers are detected independently of each other; a file may
show both typed and runtime prop declarations.
"""

import re
from typing import Pattern

from frontbrain.core.scanners.common import extract_imports, first_groups, has_match
from frontbrain.domain.scan_models import ComponentSummary
from frontbrain.infra.fs import read_text, relative_to_root

TAG_RX: Pattern[str] = re.compile(r"<([\w-]+)(\s|>)", re.ASCII)
EMITS_RX: Pattern[str] = re.compile(r"defineEmits\(([^)]*)\)")
PROPS_RX: Pattern[str] = re.compile(r"defineProps\(([^)]*)\)")

# `<script lang="ts" setup>` or `<script setup lang="ts">`
SCRIPT_SETUP_TS_RX: Pattern[str] = re.compile(
    r"<script[^>]*\blang\s*=\s*[\"']ts[\"'][^>]*\bsetup\b"
    r"|<script[^>]*\bsetup\b[^>]*\blang\s*=\s*[\"']ts[\"']",
    re.IGNORECASE | re.ASCII,
)
PROPS_TYPED_RX: Pattern[str] = re.compile(r"defineProps\s*<[^>]+>\s*\(")
PROPS_RUNTIME_RX: Pattern[str] = re.compile(r"defineProps\s*\(\s*\{")


def scan_component(path: str, project_root: str) -> ComponentSummary:
    """
    Read and scan one component file.

    Args:
        path: Absolute path of the component.
        project_root: Root used to express the summary path.

    Returns:
        ComponentSummary: Extracted signals.
    """
    return scan_component_text(read_text(path), relative_to_root(path, project_root))


def scan_component_text(text: str, rel_path: str) -> ComponentSummary:
    """Scan component source text already held in memory."""
    return ComponentSummary(
        file=rel_path,
        template_tags=first_groups(TAG_RX, text),
        imports=extract_imports(text),
        emits=first_groups(EMITS_RX, text),
        props=first_groups(PROPS_RX, text),
        script_setup_ts=has_match(SCRIPT_SETUP_TS_RX, text),
        define_props_typed=has_match(PROPS_TYPED_RX, text),
        define_props_runtime=has_match(PROPS_RUNTIME_RX, text),
    )
