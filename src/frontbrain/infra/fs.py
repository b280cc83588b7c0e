from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, whole-file text and JSON reading, and staged
writes that replace a destination file in one step. Acts as the single
place where the engine touches the filesystem for reading inputs and
persisting reports.
"""

import json
import logging
import os
import tempfile
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_under(root: str, path: str) -> str:
    """Resolve a possibly relative path against the project root."""
    p = os.path.expandvars(os.path.expanduser(path))
    if os.path.isabs(p):
        return os.path.normpath(p)
    return os.path.normpath(os.path.join(root, p))


def relative_to_root(path: str, root: str) -> str:
    """Express a path relative to the project root."""
    return os.path.relpath(path, root)

# -----------------------------------------------------------------------------
# READ API
# -----------------------------------------------------------------------------

def read_text(path: str) -> str:
    """
    Read a whole file as UTF-8 text, replacing undecodable bytes.

    I/O errors are not caught: an unreadable file aborts the caller.

    Args:
        path: Target file path.

    Returns:
        str: File content.
    """
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def read_json_safe(path: str) -> Optional[Any]:
    """
    Parse a JSON file, returning None when it is missing or malformed.

    Args:
        path: Target file path.

    Returns:
        Optional[Any]: Decoded JSON value or None.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.debug(f"Skipping unreadable JSON file '{path}': {e}")
        return None

# -----------------------------------------------------------------------------
# WRITE API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def write_text_atomic(path: str, content: str) -> None:
    """
    Replace a file with new text content in a single rename.

    The content is staged in a temporary sibling file first, so readers
    never observe a half-written artifact.

    Args:
        path: Destination file path.
        content: Full text to write.

    Raises:
        OSError: If the staging file cannot be written or moved.
    """
    directory = os.path.dirname(os.path.abspath(path))
    fd, staging_path = tempfile.mkstemp(prefix=".staging-", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(staging_path, path)
    except OSError:
        if os.path.exists(staging_path):
            os.remove(staging_path)
        raise


def write_json_atomic(path: str, payload: Any) -> None:
    """Pretty-print a JSON payload (indent 2, non-ASCII kept) to a file."""
    write_text_atomic(path, json.dumps(payload, ensure_ascii=False, indent=2))
