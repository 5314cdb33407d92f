from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures building small directory trees on disk.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small project tree.

    Structure:
    /project
      /.git
        HEAD
      /node_modules
        /pkg
          index.js
      /src
        /app
          main.py
        util.py
      README.md
      debug.log
      package.json
    """
    root = tmp_path / "project"
    root.mkdir()

    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")

    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = 1;\n", encoding="utf-8")

    (root / "src" / "app").mkdir(parents=True)
    (root / "src" / "app" / "main.py").write_text("print('main')\n", encoding="utf-8")
    (root / "src" / "util.py").write_text("VALUE = 1\n", encoding="utf-8")

    (root / "README.md").write_text("# Sample\n", encoding="utf-8")
    (root / "debug.log").write_text("noise\n", encoding="utf-8")
    (root / "package.json").write_text('{"name": "sample"}\n', encoding="utf-8")

    return root


@pytest.fixture
def make_symlink():
    """Return a helper creating symlinks, skipping where that is not allowed."""
    def _make(link: Path, target: Path) -> None:
        try:
            os.symlink(str(target), str(link), target_is_directory=target.is_dir())
        except (OSError, NotImplementedError) as e:
            pytest.skip(f"Symlinks not supported here: {e}")
    return _make
