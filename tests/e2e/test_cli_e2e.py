from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and checks exit codes,
stream output and the written report.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "tree_indexer" / "main.py"


def run_cli(args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding interpreter and script).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: Exit code and captured streams.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_help():
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "--max-file-size" in result.stdout


def test_cli_indexes_current_directory_by_default(sample_project: Path):
    result = run_cli([], cwd=sample_project)

    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("# Directory Index: ")
    assert "## File Structure" in result.stdout
    assert "### package.json" in result.stdout
    assert "```json" in result.stdout


def test_cli_rejects_file_path(sample_project: Path):
    result = run_cli([str(sample_project / "README.md")])

    assert result.returncode == 2
    assert "Path is not a directory" in result.stderr
    assert result.stdout == ""


def test_cli_writes_report_file(sample_project: Path, tmp_path: Path):
    report = tmp_path / "index.md"

    result = run_cli([str(sample_project), "-o", str(report), "--max-file-size", "5"])

    assert result.returncode == 0, result.stderr
    text = report.read_text(encoding="utf-8")
    assert "[File too large:" in text
