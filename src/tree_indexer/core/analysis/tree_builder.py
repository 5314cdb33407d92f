from __future__ import annotations

"""
Directory Tree Builder.

Walks a directory recursively and produces a TreeNode hierarchy. Applies
the name/extension skip lists and the root '.gitignore' rules, follows
symbolic links while guarding against cycles, and records every
per-entry failure on the affected node instead of aborting the walk.
File contents are never read here.
"""

import logging
import os
import stat
from typing import Any, List, Optional, Set, Tuple

from tree_indexer.core.pipeline.components.filters import (
    IgnoreRules,
    load_gitignore,
    should_skip,
)
from tree_indexer.domain.config import TreeBuilderOptions, resolve_options
from tree_indexer.domain.constants import CIRCULAR_REFERENCE
from tree_indexer.domain.tree_models import NodeKind, TreeNode
from tree_indexer.infra.fs import describe_os_error, to_posix

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(root_path: str, options: Optional[Any] = None) -> TreeNode:
    """
    Build the full directory tree below a root path.

    The returned root is a synthetic directory node with depth -1. Only an
    invalid root aborts the operation; any other failure is attached to
    the node where it happened.

    Args:
        root_path: Directory to walk.
        options: TreeBuilderOptions, a partial mapping of its fields, or None.

    Returns:
        TreeNode: Root node with the recursive children list.

    Raises:
        NotADirectoryError: If root_path does not resolve to a directory.
    """
    opts = resolve_options(options)
    resolved_root = os.path.abspath(root_path)
    if not os.path.isdir(resolved_root):
        raise NotADirectoryError(f"Path is not a directory: {resolved_root}")

    logger.info(f"Building directory tree for: {resolved_root}")

    walker = _TreeWalker(
        root_path=resolved_root,
        options=opts,
        ignore_rules=load_gitignore(resolved_root, opts.respect_gitignore),
    )

    root = TreeNode(
        name=os.path.basename(resolved_root) or resolved_root,
        path=resolved_root,
        kind=NodeKind.DIRECTORY,
        depth=-1,
    )
    root.children, root.error = walker.walk(resolved_root, "", 0)
    return root

# -----------------------------------------------------------------------------
# INTERNAL WALKER
# -----------------------------------------------------------------------------

class _TreeWalker:
    """
    Sequential depth-first walker for a single build_tree call.

    The visited set holds canonical paths of every directory entered,
    whether reached directly or through a symlink. It is shared by
    reference across the recursion and is only safe because siblings are
    walked one at a time.
    """

    def __init__(
            self,
            root_path: str,
            options: TreeBuilderOptions,
            ignore_rules: Optional[IgnoreRules],
    ) -> None:
        self.options = options
        self.ignore_rules = ignore_rules
        self.visited: Set[str] = {os.path.realpath(root_path)}

    def walk(
            self,
            dir_path: str,
            relative_path: str,
            depth: int,
    ) -> Tuple[Optional[List[TreeNode]], Optional[str]]:
        """
        Enumerate one directory and build its child nodes.

        Returns:
            Tuple of (children, error). Exactly one of them is None.
        """
        self.visited.add(os.path.realpath(dir_path))
        try:
            with os.scandir(dir_path) as it:
                entries = sorted(it, key=lambda e: _name_key(e.name))
        except OSError as e:
            message = describe_os_error(e)
            logger.warning(f"Cannot read directory '{dir_path}': {message}")
            return None, message

        nodes: List[TreeNode] = []
        for entry in entries:
            if should_skip(entry.name, self.options.skip_names, self.options.skip_extensions):
                logger.debug(f"Skipped by name rules: {entry.path}")
                continue

            entry_relative = to_posix(os.path.join(relative_path, entry.name))
            if self.ignore_rules is not None and self.ignore_rules.ignores(
                    entry_relative, is_dir=_is_dir_entry(entry)
            ):
                logger.debug(f"Skipped by ignore rules: {entry_relative}")
                continue

            nodes.append(self._visit(entry, entry_relative, depth))

        nodes.sort(key=lambda n: (0 if n.is_dir else 1, _name_key(n.name)))
        return nodes, None

    def _visit(self, entry: os.DirEntry, entry_relative: str, depth: int) -> TreeNode:
        entry_path = entry.path
        try:
            st = os.lstat(entry_path)
            is_dir = stat.S_ISDIR(st.st_mode)

            if stat.S_ISLNK(st.st_mode):
                resolved = os.path.realpath(entry_path)
                st = os.stat(entry_path)
                is_dir = stat.S_ISDIR(st.st_mode)
                if is_dir:
                    if resolved in self.visited:
                        logger.debug(f"Circular symlink '{entry_path}' -> '{resolved}'")
                        return TreeNode(
                            name=entry.name,
                            path=entry_path,
                            kind=NodeKind.DIRECTORY,
                            depth=depth,
                            error=CIRCULAR_REFERENCE,
                        )
                    self.visited.add(resolved)

            if is_dir:
                children, error = self.walk(entry_path, entry_relative, depth + 1)
                return TreeNode(
                    name=entry.name,
                    path=entry_path,
                    kind=NodeKind.DIRECTORY,
                    depth=depth,
                    children=children,
                    error=error,
                )

            return TreeNode(
                name=entry.name,
                path=entry_path,
                kind=NodeKind.FILE,
                depth=depth,
                size=st.st_size,
            )

        except OSError as e:
            message = describe_os_error(e)
            logger.warning(f"Cannot stat '{entry_path}': {message}")
            return TreeNode(
                name=entry.name,
                path=entry_path,
                kind=NodeKind.DIRECTORY if _is_dir_entry(entry) else NodeKind.FILE,
                depth=depth,
                error=message,
            )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _name_key(name: str) -> Tuple[str, str]:
    """Case-insensitive name order with a codepoint tie-break."""
    return name.casefold(), name


def _is_dir_entry(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
