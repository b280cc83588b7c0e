from __future__ import annotations

"""
UI Framework Usage Detector.

Locates the framework plugin-initialization module and cross-references the
template tags of every scanned component against the framework's
component naming convention (a 'V' followed by an uppercase letter).
"""

import logging
import os
import re
from typing import Dict, List, Optional, Pattern, Sequence

from frontbrain.domain.constants import PLUGIN_CANDIDATES, PLUGIN_DIR_NAME
from frontbrain.domain.report_models import FrameworkUsage
from frontbrain.domain.scan_models import ComponentSummary

logger = logging.getLogger(__name__)

FRAMEWORK_TAG_RX: Pattern[str] = re.compile(r"^V[A-Z]")


def detect_plugin(project_root: str, src_dir: str) -> Optional[str]:
    """
    Return the first existing plugin-init file, relative to the root.

    Args:
        project_root: Project root.
        src_dir: Absolute source directory.

    Returns:
        Optional[str]: Root-relative path, or None when no candidate exists.
    """
    for name in PLUGIN_CANDIDATES:
        candidate = os.path.join(src_dir, PLUGIN_DIR_NAME, name)
        if os.path.exists(candidate):
            return os.path.relpath(candidate, project_root)
    return None


def collect_framework_tags(components: Sequence[ComponentSummary]) -> List[str]:
    """Deduplicated framework-style tags, in first-seen order."""
    tags: Dict[str, None] = {}
    for component in components:
        for tag in component.template_tags:
            if FRAMEWORK_TAG_RX.match(tag):
                tags.setdefault(tag, None)
    return list(tags)


def detect_framework_usage(
        project_root: str,
        src_dir: str,
        components: Sequence[ComponentSummary],
) -> FrameworkUsage:
    """
    Combine plugin detection and tag usage into one result.

    Args:
        project_root: Project root.
        src_dir: Absolute source directory.
        components: Every scanned component summary.

    Returns:
        FrameworkUsage: Plugin location and used tags.
    """
    usage = FrameworkUsage(
        plugin_path=detect_plugin(project_root, src_dir),
        used_tags=collect_framework_tags(components),
    )
    if usage.tags_without_plugin:
        logger.warning(
            f"Framework tags used ({', '.join(usage.used_tags)}) but no plugin file found."
        )
    return usage
