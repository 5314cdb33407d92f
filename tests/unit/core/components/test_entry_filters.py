from __future__ import annotations

"""
Unit tests for the Entry Filtering Engine.

Verifies:
1. Name and suffix skip rules.
2. The binary extension heuristic.
3. Loading and querying of .gitignore rules.
"""

from pathlib import Path

import pytest

from tree_indexer.core.pipeline.components.filters import (
    is_binary_path,
    load_gitignore,
    should_skip,
)
from tree_indexer.domain.constants import DEFAULT_SKIP_EXTENSIONS, DEFAULT_SKIP_NAMES


@pytest.mark.parametrize("name,expected", [
    (".git", True),
    ("node_modules", True),
    ("dist", True),
    ("build", True),
    (".opencode", True),
    ("server.log", True),
    ("src", False),
    ("builder.py", False),
    ("catalog.json", False),
])
def test_should_skip_defaults(name: str, expected: bool):
    assert should_skip(name, DEFAULT_SKIP_NAMES, DEFAULT_SKIP_EXTENSIONS) is expected


def test_should_skip_with_empty_rules():
    assert should_skip(".git", set(), set()) is False


@pytest.mark.parametrize("path,expected", [
    ("image.png", True),
    ("ARCHIVE.ZIP", True),
    ("lib/native.so", True),
    ("notes.md", False),
    ("Makefile", False),
    ("script.py", False),
])
def test_is_binary_path(path: str, expected: bool):
    assert is_binary_path(path) is expected


def test_load_gitignore_absent_returns_none(tmp_path: Path):
    assert load_gitignore(str(tmp_path)) is None


def test_load_gitignore_disabled_returns_none(tmp_path: Path):
    (tmp_path / ".gitignore").write_text("*.txt\n", encoding="utf-8")

    assert load_gitignore(str(tmp_path), enabled=False) is None


def test_ignore_rules_match_relative_posix_paths(tmp_path: Path):
    (tmp_path / ".gitignore").write_text(
        "# comment\n*.tmp\n/anchored.txt\ncache/\n!cache/keep/\n",
        encoding="utf-8",
    )

    rules = load_gitignore(str(tmp_path))

    assert rules is not None
    assert rules.ignores("scratch.tmp")
    assert rules.ignores("deep/nested/scratch.tmp")
    assert rules.ignores("anchored.txt")
    assert not rules.ignores("sub/anchored.txt")
    assert rules.ignores("cache", is_dir=True)
    assert not rules.ignores("readme.md")
