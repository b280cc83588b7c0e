from __future__ import annotations

"""
Source Tree Walker.

Recursively enumerates a source directory into a hierarchical node tree and
classifies every file it meets into component files and code files. The
walk is a pure function of (directory, project root, skip-set): it returns
an explicit WalkResult instead of filling shared accumulators.
"""

import logging
import os
import stat
from typing import AbstractSet, List, Tuple

from frontbrain.domain.constants import CODE_FILE_RX, COMPONENT_EXTENSION, SKIP_NAMES
from frontbrain.domain.tree_models import FileNode, FolderNode, TreeNode, WalkResult
from frontbrain.utils.timefmt import iso_from_timestamp

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk_source_tree(
        src_dir: str,
        project_root: str,
        skip: AbstractSet[str] = SKIP_NAMES,
) -> WalkResult:
    """
    Walk a directory depth-first in directory-read order.

    Every entry whose name is in the skip-set is ignored, whether it is a
    directory or a file. Stat failures are not caught and abort the walk.

    Args:
        src_dir: Directory to enumerate.
        project_root: Root used to express node paths relatively.
        skip: Entry names to ignore.

    Returns:
        WalkResult: The node forest and the classified file lists.
    """
    component_files: List[str] = []
    code_files: List[str] = []

    tree = _walk(
        os.path.abspath(src_dir),
        os.path.abspath(project_root),
        skip,
        component_files,
        code_files,
    )
    logger.debug(
        f"Walked {src_dir}: {len(component_files)} component files, "
        f"{len(code_files)} code files."
    )
    return WalkResult(tree=tree, component_files=component_files, code_files=code_files)


def is_component_file(name: str) -> bool:
    """Return True for single-file UI component filenames."""
    return name.endswith(COMPONENT_EXTENSION)


def is_code_file(name: str) -> bool:
    """Return True for script-like filenames, components included."""
    return CODE_FILE_RX.search(name) is not None

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk(
        directory: str,
        project_root: str,
        skip: AbstractSet[str],
        component_files: List[str],
        code_files: List[str],
) -> Tuple[TreeNode, ...]:
    """Build the nodes of one directory level, recursing into folders first."""
    nodes: List[TreeNode] = []

    for entry in os.listdir(directory):
        if entry in skip:
            continue

        full = os.path.join(directory, entry)
        st = os.stat(full)
        rel = os.path.relpath(full, project_root)

        if stat.S_ISDIR(st.st_mode):
            children = _walk(full, project_root, skip, component_files, code_files)
            nodes.append(FolderNode(path=rel, children=children))
            continue

        nodes.append(FileNode(path=rel, mtime_iso=iso_from_timestamp(st.st_mtime)))
        if is_component_file(entry):
            component_files.append(full)
        if is_code_file(entry):
            code_files.append(full)

    return tuple(nodes)
