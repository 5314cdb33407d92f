from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, human-readable size formatting and the
translation of OS-level failures into the short messages recorded on
tree nodes and classifier results.
"""

import os
from typing import Optional

from tree_indexer.domain.constants import PATH_NOT_FOUND, PERMISSION_DENIED, READ_ERROR

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    The input is taken literally: no home or environment variable
    expansion, and symbolic links are left unresolved. Reverts to fallback
    if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    if not path or not path.strip():
        return os.path.abspath(fallback)
    return os.path.abspath(path)


def to_posix(relative_path: str) -> str:
    """Convert a platform-relative path into its forward-slash form."""
    return relative_path.replace(os.sep, "/")

# -----------------------------------------------------------------------------
# FORMATTING API
# -----------------------------------------------------------------------------

def format_size(num_bytes: Optional[int]) -> str:
    """
    Render a byte count using B / KB / MB units.

    Args:
        num_bytes: Size in bytes. None renders as an empty string.

    Returns:
        str: e.g. '512 B', '1.5 KB', '2.0 MB'.
    """
    if num_bytes is None:
        return ""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"

# -----------------------------------------------------------------------------
# ERROR CLASSIFICATION API
# -----------------------------------------------------------------------------

def describe_os_error(exc: BaseException, *, map_not_found: bool = True) -> str:
    """
    Translate a filesystem exception into a node-level error message.

    Args:
        exc: The captured exception.
        map_not_found: Collapse missing-path failures into 'Path not found'.

    Returns:
        str: 'Permission denied', 'Path not found', or the raw message.
    """
    if isinstance(exc, PermissionError):
        return PERMISSION_DENIED
    if map_not_found and isinstance(exc, FileNotFoundError):
        return PATH_NOT_FOUND
    return str(exc) or READ_ERROR
