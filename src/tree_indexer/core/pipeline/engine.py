from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a single indexing run:
1. Normalizes and validates the root path.
2. Builds the directory tree.
3. Classifies every root-level file in a worker pool.
4. Renders the final report.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional

from tree_indexer.core.analysis.tree_builder import build_tree
from tree_indexer.core.analysis.tree_renderer import format_output
from tree_indexer.core.pipeline.components.reader import read_file_content
from tree_indexer.domain.constants import DEFAULT_MAX_FILE_SIZE
from tree_indexer.domain.tree_models import FileReadResult, TreeNode
from tree_indexer.infra.fs import normalize_path

logger = logging.getLogger(__name__)

MAX_READ_WORKERS = 8


def index_directory(
        path: Optional[str] = None,
        max_file_size: Optional[int] = None,
        options: Optional[Any] = None,
) -> str:
    """
    Produce the directory index report for a root path.

    Args:
        path: Directory to index. Defaults to the current working directory.
        max_file_size: Largest root file (bytes) embedded verbatim.
        options: Walker options (TreeBuilderOptions or partial mapping).

    Returns:
        str: Rendered markdown report.

    Raises:
        NotADirectoryError: If the path is not a directory.
    """
    target_path = normalize_path(path, os.getcwd())
    if not os.path.isdir(target_path):
        msg = f"Path is not a directory: {target_path}"
        logger.error(msg)
        raise NotADirectoryError(msg)

    logger.info(f"Indexing directory: {target_path}")

    tree = build_tree(target_path, options)
    classified = classify_root_files(tree, max_file_size)
    logger.info(f"Indexed {target_path}: {classified} root file(s) classified.")

    return format_output(tree, target_path)


def classify_root_files(tree: TreeNode, max_file_size: Optional[int] = None) -> int:
    """
    Read every root-level file and annotate its node in place.

    Reads run concurrently; each task touches only its own file and the
    results are written back in tree order.

    Args:
        tree: Root node returned by build_tree.
        max_file_size: Largest size in bytes embedded verbatim.

    Returns:
        int: Number of files classified.
    """
    limit = DEFAULT_MAX_FILE_SIZE if max_file_size is None else max_file_size
    root_files = [node for node in tree.iter_files() if node.error is None]
    if not root_files:
        return 0

    workers = min(MAX_READ_WORKERS, len(root_files))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="RootFileReader") as executor:
        futures = [executor.submit(read_file_content, node.path, limit) for node in root_files]
        results: List[FileReadResult] = [f.result() for f in futures]

    for node, result in zip(root_files, results):
        _apply_result(node, result)

    return len(root_files)


def _apply_result(node: TreeNode, result: FileReadResult) -> None:
    node.content = result.content
    node.size = result.size
    if result.error:
        node.error = result.error
