from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node definitions and the explicit walk result used
by the tree walker to hand the hierarchical project map and the classified
file lists to the rest of the pipeline.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        path: Path of the file relative to the project root.
        mtime_iso: Last-modified timestamp in ISO-8601 (UTC).
    """
    path: str
    mtime_iso: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"file": self.path}
        if self.mtime_iso is not None:
            out["mtimeIso"] = self.mtime_iso
        return out


@dataclass(frozen=True)
class FolderNode:
    """
    Represents a directory entry owning its children in read order.

    Attributes:
        path: Path of the folder relative to the project root.
        children: Ordered child nodes.
    """
    path: str
    children: Tuple["TreeNode", ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "folder": self.path,
            "children": [child.to_dict() for child in self.children],
        }


TreeNode = Union[FolderNode, FileNode]


def is_folder(node: TreeNode) -> bool:
    """Return True when the node is a directory."""
    return isinstance(node, FolderNode)


def count_nodes(nodes: Tuple[TreeNode, ...]) -> int:
    """Count every file and folder in the forest."""
    total = 0
    for node in nodes:
        total += 1
        if isinstance(node, FolderNode):
            total += count_nodes(node.children)
    return total

# -----------------------------------------------------------------------------
# WALK RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class WalkResult:
    """
    Output of a complete tree walk.

    Attributes:
        tree: Top-level nodes found under the walked directory.
        component_files: Absolute paths of single-file UI components.
        code_files: Absolute paths of script-like files (components included).
    """
    tree: Tuple[TreeNode, ...] = ()
    component_files: List[str] = field(default_factory=list)
    code_files: List[str] = field(default_factory=list)
