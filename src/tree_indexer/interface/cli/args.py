from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from tree_indexer.domain.constants import TOOL_DESCRIPTION, VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tree-indexer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tree-indexer",
        description=TOOL_DESCRIPTION,
    )

    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Root directory to index (defaults to the current directory).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Write the report to this file instead of stdout.",
    )

    # --- Content Triage ---
    p.add_argument(
        "--max-file-size",
        dest="max_file_size",
        type=int,
        default=None,
        help="Largest root-level file, in bytes, embedded verbatim (default: 102400).",
    )

    # --- Exclusion Rules ---
    p.add_argument(
        "--skip-name",
        dest="skip_names",
        action="append",
        default=None,
        help="Entry name to exclude at any depth. Repeatable; replaces the defaults.",
    )
    p.add_argument(
        "--skip-ext",
        dest="skip_extensions",
        action="append",
        default=None,
        help="Name suffix to exclude at any depth. Repeatable; replaces the defaults.",
    )
    p.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Ignore the root .gitignore rules.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.max_file_size is not None:
        overrides["max_file_size"] = args.max_file_size
    if args.skip_names is not None:
        overrides["skip_names"] = _flatten_csv(args.skip_names)
    if args.skip_extensions is not None:
        overrides["skip_extensions"] = _flatten_csv(args.skip_extensions)
    if args.no_gitignore:
        overrides["respect_gitignore"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _flatten_csv(values: Optional[List[str]]) -> List[str]:
    """Expand repeated and comma-separated values into one clean list."""
    out: List[str] = []
    for value in values or []:
        out.extend(x.strip() for x in value.split(",") if x.strip())
    return out
