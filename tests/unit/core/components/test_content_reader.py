from __future__ import annotations

"""
Unit tests for the Content Classifier.

Verifies:
1. Verbatim reading of small text files.
2. Size limit enforcement without touching the file body.
3. Binary detection by extension and by NUL byte probing.
4. Conversion of I/O failures into result values.
"""

import os
from pathlib import Path

import pytest

from tree_indexer.core.pipeline.components import reader
from tree_indexer.core.pipeline.components.reader import is_binary_probe, read_file_content
from tree_indexer.domain.constants import DEFAULT_MAX_FILE_SIZE, PROBE_LENGTH
from tree_indexer.domain.tree_models import ContentStatus


def test_reads_text_file_verbatim(tmp_path: Path):
    f = tmp_path / "note.txt"
    f.write_bytes(b"hello\r\nworld\n")

    result = read_file_content(str(f), 100_000)

    assert result.content == "hello\r\nworld\n"
    assert result.size == 13
    assert result.error is None
    assert result.status is ContentStatus.OK
    assert result.ok


def test_default_limit_is_100_kib(tmp_path: Path):
    f = tmp_path / "exact.txt"
    f.write_bytes(b"a" * DEFAULT_MAX_FILE_SIZE)

    result = read_file_content(str(f))

    assert DEFAULT_MAX_FILE_SIZE == 102400
    assert result.error is None
    assert len(result.content) == DEFAULT_MAX_FILE_SIZE


def test_oversized_file_is_not_read(tmp_path: Path, monkeypatch):
    f = tmp_path / "big.txt"
    f.write_text("a" * 1024, encoding="utf-8")

    def forbidden_open(*args, **kwargs):
        raise AssertionError("oversized files must not be opened")

    monkeypatch.setattr(reader, "open", forbidden_open, raising=False)

    result = read_file_content(str(f), 10)

    assert result.content == "[File too large: 1.0 KB]"
    assert result.error == "File too large"
    assert result.size == 1024
    assert result.status is ContentStatus.TOO_LARGE


def test_oversized_placeholder_uses_megabytes(tmp_path: Path):
    f = tmp_path / "huge.txt"
    f.write_bytes(b"a" * (3 * 1024 * 1024 // 2))

    result = read_file_content(str(f))

    assert result.content.startswith("[File too large:")
    assert result.content == "[File too large: 1.5 MB]"


def test_nul_byte_marks_binary(tmp_path: Path):
    f = tmp_path / "payload.txt"
    f.write_bytes(b"abc\x00def")

    result = read_file_content(str(f), 100_000)

    assert result.content == "[Binary file]"
    assert result.error == "Binary file"
    assert result.size == 7
    assert result.status is ContentStatus.BINARY


def test_binary_extension_marks_binary(tmp_path: Path):
    f = tmp_path / "logo.PNG"
    f.write_text("not really an image", encoding="utf-8")

    result = read_file_content(str(f))

    assert result.error == "Binary file"


def test_nul_byte_beyond_probe_is_not_detected(tmp_path: Path):
    f = tmp_path / "late.txt"
    f.write_bytes(b"a" * PROBE_LENGTH + b"\x00")

    result = read_file_content(str(f))

    assert result.error is None
    assert result.content.endswith("\x00")


def test_invalid_utf8_is_replaced(tmp_path: Path):
    f = tmp_path / "latin.txt"
    f.write_bytes(b"caf\xe9\n")

    result = read_file_content(str(f))

    assert result.error is None
    assert result.content == "caf\ufffd\n"


def test_missing_file_returns_error_result(tmp_path: Path):
    missing = tmp_path / "gone.txt"

    result = read_file_content(str(missing))

    assert result.size == 0
    assert result.status is ContentStatus.READ_ERROR
    assert result.error
    assert result.content == f"[{result.error}]"


def test_permission_failure_during_probe(tmp_path: Path, monkeypatch):
    f = tmp_path / "secret.txt"
    f.write_text("secret", encoding="utf-8")

    def deny(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(reader, "_read_probe", deny)

    result = read_file_content(str(f))

    assert result.error == "Permission denied"
    assert result.content == "[Permission denied]"
    assert result.size == 0


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
def test_fifo_is_not_opened(tmp_path: Path, monkeypatch):
    fifo = tmp_path / "pipe"
    os.mkfifo(str(fifo))

    def forbidden_open(*args, **kwargs):
        raise AssertionError("non-regular files must not be opened")

    monkeypatch.setattr(reader, "open", forbidden_open, raising=False)

    result = read_file_content(str(fifo))

    assert result.content == "[Not a regular file]"
    assert result.error == "Not a regular file"
    assert result.status is ContentStatus.READ_ERROR


@pytest.mark.parametrize("probe,expected", [
    (b"", False),
    (b"plain text", False),
    (b"\x00", True),
    (b"head\x00tail", True),
])
def test_is_binary_probe(probe: bytes, expected: bool):
    assert is_binary_probe(probe) is expected
