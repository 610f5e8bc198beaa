"""
Console and JSON rendering of a SummaryReport.

All sections iterate components in the fixed COMPONENTS order so output is
stable between runs.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .data_models import COMPONENTS, SummaryReport

logger = logging.getLogger(__name__)


def _ordered_components(mapping: Dict[str, Any]) -> List[str]:
    ordered = [component for component in COMPONENTS if component in mapping]
    extra = [component for component in mapping if component not in COMPONENTS]
    return ordered + extra


def format_report(report: SummaryReport) -> str:
    """Render the report as console text"""
    lines = ["Summary Report:", "Overall Averages:"]
    for component in _ordered_components(report.averages):
        lines.append(f" {component}: {report.averages[component]:.2f}")

    lines.append("")
    lines.append("Branch-wise Averages (Total Scores):")
    for branch, average in report.branch_averages.items():
        lines.append(f" Branch {branch or '(none)'}: {average:.2f}")

    lines.append("")
    lines.append("Top 3 Rankings per Component:")
    for component in _ordered_components(report.rankings):
        lines.append(f" {component}:")
        for entry in report.rankings[component]:
            lines.append(f"  {entry.campus_id} - {entry.score} ({entry.rank})")

    if report.errors:
        lines.append("")
        lines.append("Data Validation Errors:")
        for message in report.errors:
            lines.append(f"  {message}")

    return "\n".join(lines)


def print_report(report: SummaryReport):
    print(format_report(report))


def report_to_dict(report: SummaryReport) -> Dict[str, Any]:
    """JSON-ready dict with Averages / BranchAverages / Rankings / Errors keys"""
    data = report.model_dump(by_alias=True)
    data["Averages"] = {c: data["Averages"][c] for c in _ordered_components(data["Averages"])}
    data["Rankings"] = {c: data["Rankings"][c] for c in _ordered_components(data["Rankings"])}
    return data


def export_report(report: SummaryReport, output_path: Optional[Path] = None) -> Path:
    """
    Write the report as JSON

    Args:
        report: Report to export
        output_path: Destination, report.json in the working directory by default

    Returns:
        Path of the written file
    """
    output_path = Path(output_path) if output_path is not None else Path("report.json")

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report_to_dict(report), f, indent=2)

    logger.info(f"💾 Exported report to {output_path}")
    return output_path
