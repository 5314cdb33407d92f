from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node type produced by the tree walker and the
result object returned by the content classifier. Nodes carry their own
error annotations so partial results survive any failure below the root.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class TreeNode:
    """
    Represents one filesystem entry in the directory tree.

    The root of a walk is a synthetic directory node with depth -1; its
    direct children start at depth 0.

    Attributes:
        name: Base name of the entry.
        path: Absolute path (parent path joined with name).
        kind: File or directory.
        depth: Nesting level relative to the walk root.
        children: Sub-entries for directories. None for files and for
                  directories whose entries could not be read.
        content: Embedded text (root-level files after classification).
        size: Size in bytes, when known.
        error: Traversal error or content-triage tag.
    """
    name: str
    path: str
    kind: NodeKind
    depth: int
    children: Optional[List["TreeNode"]] = None
    content: Optional[str] = None
    size: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def iter_files(self) -> List["TreeNode"]:
        """Direct file children of this node, in tree order."""
        return [child for child in (self.children or []) if child.is_file]

# -----------------------------------------------------------------------------
# CONTENT CLASSIFICATION
# -----------------------------------------------------------------------------

class ContentStatus(str, Enum):
    OK = "ok"
    TOO_LARGE = "too_large"
    BINARY = "binary"
    READ_ERROR = "read_error"


@dataclass(frozen=True)
class FileReadResult:
    """
    Outcome of classifying a single file.

    Attributes:
        content: File text, or a bracketed placeholder for skipped files.
        size: Size in bytes (0 when the file could not be read).
        error: Triage tag or failure message; None for embedded text.
        status: Tagged outcome mirroring the placeholder in 'content'.
    """
    content: str
    size: int
    error: Optional[str] = None
    status: ContentStatus = ContentStatus.OK

    @property
    def ok(self) -> bool:
        return self.status is ContentStatus.OK
