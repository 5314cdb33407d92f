from __future__ import annotations

"""
Unit tests for the domain models and walker options.
"""

import pytest

from tree_indexer.domain.config import TreeBuilderOptions, get_default_config, resolve_options
from tree_indexer.domain.constants import DEFAULT_SKIP_EXTENSIONS, DEFAULT_SKIP_NAMES
from tree_indexer.domain.tree_models import ContentStatus, FileReadResult, NodeKind, TreeNode


def test_tree_node_helpers():
    root = TreeNode(name="r", path="/r", kind=NodeKind.DIRECTORY, depth=-1, children=[
        TreeNode(name="d", path="/r/d", kind=NodeKind.DIRECTORY, depth=0, children=[]),
        TreeNode(name="f", path="/r/f", kind=NodeKind.FILE, depth=0, size=1),
    ])

    assert root.is_dir and not root.is_file
    assert [n.name for n in root.iter_files()] == ["f"]


def test_iter_files_on_failed_directory():
    node = TreeNode(name="x", path="/x", kind=NodeKind.DIRECTORY, depth=0, error="Permission denied")

    assert node.iter_files() == []


def test_file_read_result_defaults_to_ok():
    result = FileReadResult(content="text", size=4)

    assert result.ok
    assert result.error is None
    assert FileReadResult(content="[Binary file]", size=1, error="Binary file",
                          status=ContentStatus.BINARY).ok is False


def test_default_options():
    opts = TreeBuilderOptions()

    assert opts.skip_names == DEFAULT_SKIP_NAMES
    assert opts.skip_extensions == DEFAULT_SKIP_EXTENSIONS
    assert opts.respect_gitignore is True


def test_from_mapping_merges_partial_overrides():
    opts = TreeBuilderOptions.from_mapping({"skip_extensions": [".tmp"], "respect_gitignore": None})

    assert opts.skip_names == DEFAULT_SKIP_NAMES
    assert opts.skip_extensions == frozenset({".tmp"})
    assert opts.respect_gitignore is True


def test_from_mapping_accepts_validated_config():
    opts = TreeBuilderOptions.from_mapping(get_default_config())

    assert opts == TreeBuilderOptions()


def test_resolve_options_shapes():
    explicit = TreeBuilderOptions(respect_gitignore=False)

    assert resolve_options(None) == TreeBuilderOptions()
    assert resolve_options(explicit) is explicit
    assert resolve_options({"respect_gitignore": False}).respect_gitignore is False
    with pytest.raises(TypeError):
        resolve_options(42)
