from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to versioning, default exclusion lists,
content-triage limits, the binary extension heuristic and the syntax
labels used when embedding root-level files.
"""

from typing import Dict, FrozenSet

VERSION = "0.1.0"

TOOL_NAME = "tree_indexer"
TOOL_DESCRIPTION = "Generate a directory tree with root file contents"

# -----------------------------------------------------------------------------
# WALKER DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_SKIP_NAMES: FrozenSet[str] = frozenset({
    ".git", "node_modules", ".opencode", "dist", "build",
})

DEFAULT_SKIP_EXTENSIONS: FrozenSet[str] = frozenset({".log"})

GITIGNORE_FILENAME = ".gitignore"

CIRCULAR_REFERENCE = "Circular reference"

# -----------------------------------------------------------------------------
# CLASSIFIER DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_MAX_FILE_SIZE = 100 * 1024
PROBE_LENGTH = 8000

FILE_TOO_LARGE = "File too large"
BINARY_FILE = "Binary file"
PERMISSION_DENIED = "Permission denied"
PATH_NOT_FOUND = "Path not found"
READ_ERROR = "Read error"
NOT_REGULAR_FILE = "Not a regular file"

# Extensions treated as binary without looking at the bytes
BINARY_EXTENSIONS: FrozenSet[str] = frozenset({
    # Images
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".icns", ".tif", ".tiff",
    ".webp", ".psd", ".heic", ".avif", ".cur",
    # Audio / Video
    ".mp3", ".wav", ".ogg", ".flac", ".aac", ".m4a", ".wma",
    ".mp4", ".m4v", ".avi", ".mov", ".mkv", ".webm", ".wmv", ".flv", ".mpg", ".mpeg",
    # Archives
    ".zip", ".tar", ".gz", ".tgz", ".bz2", ".xz", ".7z", ".rar", ".zst", ".lz", ".lzma",
    ".jar", ".war", ".ear", ".whl", ".egg", ".deb", ".rpm", ".dmg", ".iso", ".apk",
    # Compiled objects and executables
    ".exe", ".dll", ".so", ".dylib", ".o", ".obj", ".a", ".lib", ".bin",
    ".class", ".pyc", ".pyo", ".pyd", ".wasm", ".node",
    # Documents
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
    ".odt", ".ods", ".odp", ".epub",
    # Fonts
    ".ttf", ".otf", ".woff", ".woff2", ".eot",
    # Databases and data blobs
    ".db", ".sqlite", ".sqlite3", ".pickle", ".pkl", ".npy", ".npz",
    ".parquet", ".h5", ".hdf5", ".dat",
})

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

LANGUAGE_LABELS: Dict[str, str] = {
    ".md": "markdown",
    ".json": "json",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".yml": "yaml",
    ".yaml": "yaml",
    ".py": "python",
    ".toml": "toml",
    ".sh": "bash",
}

DEFAULT_LANGUAGE = "text"
