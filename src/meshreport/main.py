"""
Application Entry Point
=======================
Reads one mesh file and prints its report to the console.

Why is this file needed?
------------------------
It is the composition root. It:
1. Sets up logging (console + optional file).
2. Resolves which mesh file to read (argument, environment, default).
3. Runs the parser and hands the finished document to the report view.
4. Turns a parse failure into a non-zero exit code.
"""
import argparse
import logging
import sys
from typing import List, Optional

from meshreport.config import DEFAULT_INPUT_FILENAME, INPUT_ENV, get_input_path
from meshreport.logging_config import setup_logging
from meshreport.model.parser import try_parse_file
from meshreport.view.report import print_report

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meshreport",
        description="Print a report of a quadrilateral mesh input file.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help=f"mesh file to read (default: ${INPUT_ENV} or ./{DEFAULT_INPUT_FILENAME})",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--log-file", default=None, help="also write log records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # 1. Setup Logging
    setup_logging(level=args.log_level, log_file=args.log_file)

    # 2. Parse
    path = get_input_path(args.input)
    result = try_parse_file(path)
    if not result.ok:
        logger.error(f"Aborting, no report produced for '{path}'.")
        print(f"error: {result.error}", file=sys.stderr)
        return 1

    # 3. Report
    print_report(result.unwrap())
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
