#!/usr/bin/env python3
"""
Command line entry point.

Usage: gradebook-summary <gradebook.xlsx> [--class ClassNo.] [--export]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .data_models import ReportOptions
from .data_processor import GradebookDataProcessor
from .report_generator import export_report, print_report
from .summary_calculator import generate_summary_report

logger = logging.getLogger("gradebook_summary")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gradebook-summary",
        description="Summarize a gradebook: averages, branch averages, top 3 rankings and total checks.",
    )
    p.add_argument("file", help="Gradebook file (.xlsx or .csv)")
    p.add_argument("--class", dest="class_filter", default=None, help="Filter by ClassNo.")
    p.add_argument("--export", action="store_true", help="Export summary report to JSON")
    p.add_argument("--output", default="report.json", help="JSON file for --export (default: report.json)")
    p.add_argument(
        "--recompute-total",
        action="store_true",
        help="Aggregate with Total = PreCompre + Compre instead of the declared Total",
    )
    p.add_argument("--progress", action="store_true", help="Show a progress bar while reading rows")
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = ReportOptions(
        class_filter=args.class_filter,
        recompute_total=args.recompute_total,
        export=args.export,
        export_path=args.output,
        progress=args.progress,
    )

    processor = GradebookDataProcessor(args.file, progress=options.progress)
    if not processor.load_gradebook():
        logger.error(processor.generate_validation_report())
        return 1

    for warning in processor.validation_warnings:
        logger.warning(f"⚠️ {warning}")

    report = generate_summary_report(processor.records, options)

    if report.errors:
        logger.warning("Errors found during processing:")
        for message in report.errors:
            logger.warning(f"  {message}")

    if report.is_empty:
        logger.info("No student records found.")
        return 0

    print_report(report)

    if options.export:
        path = export_report(report, options.export_path)
        print(f"\nExported report to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
