from __future__ import annotations

"""
Report Persistence.

Writes the analysis snapshot, the structure snapshot, and the plain-text
tree to the memory directory. Prior contents are replaced, never merged.
"""

import logging
import os
from typing import Dict

from frontbrain.domain.constants import (
    ANALYSIS_REPORT_FILE,
    STRUCTURE_REPORT_FILE,
    STRUCTURE_TEXT_FILE,
)
from frontbrain.domain.report_models import AnalysisReport, StructureReport
from frontbrain.infra.fs import safe_mkdir, write_json_atomic, write_text_atomic

logger = logging.getLogger(__name__)


def get_output_paths(memory_dir: str) -> Dict[str, str]:
    """
    Map each artifact to its destination path.

    Args:
        memory_dir: Absolute destination directory.

    Returns:
        Dict[str, str]: Artifact name to absolute path.
    """
    return {
        "analysis": os.path.join(memory_dir, ANALYSIS_REPORT_FILE),
        "structure": os.path.join(memory_dir, STRUCTURE_REPORT_FILE),
        "tree": os.path.join(memory_dir, STRUCTURE_TEXT_FILE),
    }


def persist_reports(
        analysis: AnalysisReport,
        structure: StructureReport,
        memory_dir: str,
) -> Dict[str, str]:
    """
    Write the three artifacts, creating the destination if needed.

    Args:
        analysis: Analysis snapshot.
        structure: Structure snapshot.
        memory_dir: Absolute destination directory.

    Returns:
        Dict[str, str]: Paths of the written artifacts.

    Raises:
        OSError: If the directory cannot be created or a file cannot be written.
    """
    ok, err = safe_mkdir(memory_dir)
    if not ok:
        raise OSError(f"Cannot create report directory '{memory_dir}': {err}")
    paths = get_output_paths(memory_dir)

    write_json_atomic(paths["analysis"], analysis.to_dict())
    write_json_atomic(paths["structure"], structure.to_dict())
    write_text_atomic(paths["tree"], structure.tree_view + "\n")

    for name, path in paths.items():
        logger.info(f"Saved {name}: {path}")
    return paths
