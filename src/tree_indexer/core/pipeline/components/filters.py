from __future__ import annotations

"""
Entry Filtering Engine.

Implements the cheap name/extension skip rules applied before any stat
call, the binary extension heuristic used by the content classifier, and
the integration with the root '.gitignore' file.
"""

import logging
import os
from typing import Callable, Iterable, Optional

import gitignore_parser

from tree_indexer.domain.constants import BINARY_EXTENSIONS, GITIGNORE_FILENAME

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SKIP RULES
# -----------------------------------------------------------------------------

def should_skip(name: str, skip_names: Iterable[str], skip_extensions: Iterable[str]) -> bool:
    """
    Decide whether an entry is excluded by name or suffix alone.

    Args:
        name: Base name of the directory entry.
        skip_names: Names excluded at any depth.
        skip_extensions: Suffixes excluded at any depth.

    Returns:
        bool: True if the entry must not be visited.
    """
    if name in skip_names:
        return True
    return any(name.endswith(ext) for ext in skip_extensions)


def is_binary_path(file_path: str) -> bool:
    """
    Classify a file as binary from its extension only.

    Args:
        file_path: Path or name of the file.

    Returns:
        bool: True if the extension belongs to a known binary format.
    """
    _, ext = os.path.splitext(file_path)
    return ext.lower() in BINARY_EXTENSIONS

# -----------------------------------------------------------------------------
# GITIGNORE INTEGRATION
# -----------------------------------------------------------------------------

class IgnoreRules:
    """
    Compiled '.gitignore' rules bound to a walk root.

    Paths are queried relative to the root in forward-slash form,
    whatever the platform separator.
    """

    def __init__(self, root_path: str, matcher: Callable[[str], bool]) -> None:
        self.root_path = root_path
        self._matcher = matcher

    def ignores(self, relative_path: str, is_dir: bool = False) -> bool:
        """
        Check a root-relative path against the loaded rules.

        Args:
            relative_path: Path relative to the root, using '/' separators.
            is_dir: Whether the entry is a directory (enables 'dir/' rules
                    and directory-only negations).

        Returns:
            bool: True if the path is ignored.
        """
        candidate = self.root_path.rstrip("/") + "/" + relative_path.strip("/")
        if is_dir:
            candidate += "/"
        try:
            return bool(self._matcher(candidate))
        except ValueError:
            # matcher could not relate the path to the root
            logger.debug(f"Ignore rules not applicable to: {relative_path}")
            return False


def load_gitignore(root_path: str, enabled: bool = True) -> Optional[IgnoreRules]:
    """
    Parse the '.gitignore' file located at the walk root.

    A missing or unreadable file yields no rules; it is never an error.

    Args:
        root_path: Absolute path of the walk root.
        enabled: When False, skip loading entirely.

    Returns:
        Optional[IgnoreRules]: Bound rules, or None if nothing applies.
    """
    if not enabled:
        return None

    gitignore_path = os.path.join(root_path, GITIGNORE_FILENAME)
    if not os.path.isfile(gitignore_path):
        logger.debug(f"No {GITIGNORE_FILENAME} found at {root_path}")
        return None

    try:
        matcher = gitignore_parser.parse_gitignore(gitignore_path, base_dir=root_path)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not parse {gitignore_path}: {e}. Continuing without ignore rules.")
        return None

    logger.debug(f"Loaded ignore rules from {gitignore_path}")
    return IgnoreRules(root_path, matcher)
