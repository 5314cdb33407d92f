from __future__ import annotations

"""
Content Classifier.

Decides whether a single file is small enough and textual enough to be
embedded verbatim. Oversized and binary files are replaced by bracketed
placeholders; every failure resolves to a result value instead of an
exception.
"""

import logging
import os
import stat
from typing import Optional

from tree_indexer.core.pipeline.components.filters import is_binary_path
from tree_indexer.domain.constants import (
    BINARY_FILE,
    DEFAULT_MAX_FILE_SIZE,
    FILE_TOO_LARGE,
    NOT_REGULAR_FILE,
    PROBE_LENGTH,
)
from tree_indexer.domain.tree_models import ContentStatus, FileReadResult
from tree_indexer.infra.fs import describe_os_error, format_size

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_file_content(file_path: str, max_file_size: Optional[int] = DEFAULT_MAX_FILE_SIZE) -> FileReadResult:
    """
    Classify a file and return its text when it is safe to embed.

    Steps:
    1. Non-regular files (FIFOs, sockets, devices) and oversized files are
       rejected from their stat result, unread.
    2. A bounded probe is read; known binary extensions or a NUL byte in
       the probe mark the file as binary.
    3. Remaining files are decoded as UTF-8, replacing invalid sequences.

    Args:
        file_path: Path of the file to classify.
        max_file_size: Largest size in bytes that will be embedded.

    Returns:
        FileReadResult: Content or placeholder, size and triage tag.
    """
    if max_file_size is None:
        max_file_size = DEFAULT_MAX_FILE_SIZE

    try:
        st = os.stat(file_path)
        size = st.st_size

        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping non-regular file: {file_path}")
            return FileReadResult(
                content=f"[{NOT_REGULAR_FILE}]",
                size=size,
                error=NOT_REGULAR_FILE,
                status=ContentStatus.READ_ERROR,
            )

        if size > max_file_size:
            logger.debug(f"Skipping oversized file ({size} > {max_file_size}): {file_path}")
            return FileReadResult(
                content=f"[{FILE_TOO_LARGE}: {format_size(size)}]",
                size=size,
                error=FILE_TOO_LARGE,
                status=ContentStatus.TOO_LARGE,
            )

        probe = _read_probe(file_path)
        if is_binary_path(file_path) or is_binary_probe(probe):
            logger.debug(f"Skipping binary file: {file_path}")
            return FileReadResult(
                content=f"[{BINARY_FILE}]",
                size=size,
                error=BINARY_FILE,
                status=ContentStatus.BINARY,
            )

        with open(file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
            content = f.read()
        return FileReadResult(content=content, size=size)

    except OSError as e:
        message = describe_os_error(e, map_not_found=False)
        logger.warning(f"Failed to read '{file_path}': {message}")
        return FileReadResult(
            content=f"[{message}]",
            size=0,
            error=message,
            status=ContentStatus.READ_ERROR,
        )


def is_binary_probe(probe: bytes) -> bool:
    """Return True if the sampled bytes contain a NUL byte."""
    return b"\x00" in probe

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _read_probe(file_path: str) -> bytes:
    with open(file_path, "rb") as f:
        return f.read(PROBE_LENGTH)
