"""
Command-line interface: print a shape report to standard output.
"""

from __future__ import annotations

import argparse
import logging
import sys

from shapekit.api.generate import generate_report
from shapekit.config.loader import list_shape_sets

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level. Logs go to stderr."""
    log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapekit",
        description="Compute area and perimeter for a set of shapes and print a report.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--shape-set",
        default="demo",
        help=f"Bundled shape set to report on (available: {', '.join(list_shape_sets())})",
    )
    source.add_argument("--file", help="Path to a YAML shape-set file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        report = generate_report(shape_set=args.shape_set, path=args.file)
    except (KeyError, FileNotFoundError, ValueError) as e:
        message = e.args[0] if isinstance(e, KeyError) and e.args else e
        logger.error(f"Failed to generate report: {message}")
        return 1

    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
