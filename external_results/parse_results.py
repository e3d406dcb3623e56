"""Parse an external results XML file and summarize what was found.

Prints a one-line summary of the findings and of the problems recorded while
parsing, and optionally writes a JSON report with all of them.
"""

from __future__ import annotations

import argparse
import functools
import logging
from pathlib import Path

from external_results.configure_logging import configure_logging
from external_results.external_results_xml_parser import ExternalResultsXMLParser
from external_results.load_config import load_config
from external_results.load_results_document import load_results_document
from external_results.parse_settings_hash import parse_settings_hash
from external_results.results_report import ResultsReport

logger = logging.getLogger(__name__)


def run_parse(args: argparse.Namespace) -> int:
    """Parse the results file named in args and report the outcome."""
    if not args.results_file.is_file():
        msg = f"Results file not found: {args.results_file}"
        raise SystemExit(msg)

    config = load_config(args.config)
    configure_logging(config)
    report = ResultsReport(parse_settings_hash(config), str(args.results_file))

    loader = functools.partial(
        load_results_document,
        validate=config["schema"]["validate"],
        recover=config["parser"]["recover"],
    )
    parser = ExternalResultsXMLParser(
        args.data_source or args.results_file.stem,
        args.results_file,
        schema_name=config["schema"]["name"],
        loader=loader,
    )
    logger.info("Parsing %s", args.results_file)
    results = parser.parse()
    errors = parser.get_error_info()

    print(
        f"Found {len(results.derived_files)} derived files, "
        f"{len(results.artifacts)} artifacts and {len(results.reports)} reports "
        f"in {args.results_file} ({len(errors)} problems)"
    )
    for error in errors:
        print(f"  {error.module_name}: {error.message}")

    if args.report:
        report.generate_report(
            results, errors, str(args.report), indent=config["report"]["indent"]
        )
        print(f"Report written to {args.report}")

    if args.strict and errors:
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the results parser from the command line."""
    ap = argparse.ArgumentParser(
        description="Parse results produced by an external process.",
    )
    ap.add_argument(
        "results_file",
        type=Path,
        help="XML results file to parse",
    )
    ap.add_argument(
        "--data-source",
        help="Name of the data source the results belong to "
        "(default: the results file name)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON report of findings and problems to this path",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any problem was recorded",
    )
    args = ap.parse_args(argv)
    return run_parse(args)


if __name__ == "__main__":
    raise SystemExit(main())
