from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
validation, the indexing run itself and delivery of the report.
"""

import os
import sys
from typing import List, Optional

from tree_indexer.core.pipeline.engine import index_directory
from tree_indexer.core.pipeline.stages.validator import validate_config
from tree_indexer.domain.config import TreeBuilderOptions
from tree_indexer.infra.logging import LoggingConfig, configure_logging, get_logger
from tree_indexer.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_PATH = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=args.log_file,
    ))

    clean_conf, warnings = validate_config(cli_args.args_to_overrides(args), strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    options = TreeBuilderOptions.from_mapping(clean_conf)

    try:
        report = index_directory(
            path=args.path,
            max_file_size=clean_conf["max_file_size"],
            options=options,
        )
    except NotADirectoryError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_PATH
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Indexing failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.output_file:
        return _write_report(args.output_file, report)

    print(report)
    return EXIT_OK

# -----------------------------------------------------------------------------
# OUTPUT
# -----------------------------------------------------------------------------

def _write_report(output_file: str, report: str) -> int:
    try:
        parent = os.path.dirname(os.path.abspath(output_file))
        os.makedirs(parent, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(report + "\n")
    except OSError as e:
        logger.error(f"Failed to write report to '{output_file}': {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info(f"Report saved to: {output_file}")
    return EXIT_OK
