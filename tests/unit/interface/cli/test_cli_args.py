from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV and repeated value flattening.
3. Absent flags stay out of the overrides.
"""

import pytest

from tree_indexer.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    return build_parser().parse_args(arg_list)


def test_positional_path_and_output():
    args = parse_args(["some/dir", "-o", "report.md"])

    assert args.path == "some/dir"
    assert args.output_file == "report.md"


def test_defaults_produce_empty_overrides():
    args = parse_args([])

    assert args.path is None
    assert args_to_overrides(args) == {}


def test_max_file_size_and_gitignore_flag():
    overrides = args_to_overrides(parse_args(["--max-file-size", "2048", "--no-gitignore"]))

    assert overrides == {"max_file_size": 2048, "respect_gitignore": False}


def test_repeated_and_csv_skip_values():
    args = parse_args([
        "--skip-name", "vendor,.venv",
        "--skip-name", "target",
        "--skip-ext", ".tmp",
    ])

    overrides = args_to_overrides(args)

    assert overrides["skip_names"] == ["vendor", ".venv", "target"]
    assert overrides["skip_extensions"] == [".tmp"]


def test_empty_skip_value_clears_list():
    overrides = args_to_overrides(parse_args(["--skip-name", ""]))

    assert overrides["skip_names"] == []


def test_non_integer_size_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--max-file-size", "big"])
