from __future__ import annotations

"""
Tree Renderer.

Converts the walked node forest into an indented box-drawing listing.
Folders are suffixed with '/', files are shown by base name.
"""

import os
from typing import List, Optional, Sequence

from frontbrain.domain.tree_models import TreeNode, is_folder

ELBOW_LAST = "└── "
ELBOW_MID = "├── "
DEPTH_PREFIX = "│   "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_view(tree: Sequence[TreeNode], header: str) -> List[str]:
    """
    Render the full tree listing, header line first.

    Args:
        tree: Top-level nodes of the walked directory.
        header: First line of the listing (e.g. the source folder label).

    Returns:
        List[str]: One line per node plus the header.
    """
    lines: List[str] = [header]
    render_tree_structure(tree, lines)
    return lines


def render_tree_structure(
        tree: Sequence[TreeNode],
        lines: Optional[List[str]] = None,
        depth: int = 0,
) -> List[str]:
    """
    Recursively transform the node forest into a list of strings.

    The last child of each sibling group uses the closing elbow; every
    depth level is indented with the continuation glyph.

    Args:
        tree: Nodes of the current level.
        lines: Accumulator list for output strings.
        depth: Nesting level of the current nodes.

    Returns:
        List[str]: The accumulator, for convenience.
    """
    if lines is None:
        lines = []

    prefix = DEPTH_PREFIX * depth
    total = len(tree)

    for i, node in enumerate(tree):
        connector = ELBOW_LAST if i == total - 1 else ELBOW_MID
        name = os.path.basename(node.path) or node.path

        if is_folder(node):
            lines.append(f"{prefix}{connector}{name}/")
            render_tree_structure(node.children, lines, depth + 1)
            continue

        lines.append(f"{prefix}{connector}{name}")

    return lines


def tree_header(source_dir_name: str) -> str:
    """Header line naming the walked source folder."""
    return f"📁 {source_dir_name}/"
