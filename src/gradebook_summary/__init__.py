"""Gradebook summary: averages, branch averages and top-3 rankings for a gradebook."""

from .data_models import (
    COMPONENTS,
    RankingEntry,
    ReportOptions,
    StudentRecord,
    SummaryReport,
    derive_branch,
)
from .data_processor import GradebookDataProcessor, GradebookLoadError
from .summary_calculator import SummaryCalculator, filter_by_class, generate_summary_report
from .total_validator import TotalValidator, expected_total, validate_record

__version__ = "1.0.0"

__all__ = [
    "COMPONENTS",
    "RankingEntry",
    "ReportOptions",
    "StudentRecord",
    "SummaryReport",
    "derive_branch",
    "GradebookDataProcessor",
    "GradebookLoadError",
    "SummaryCalculator",
    "filter_by_class",
    "generate_summary_report",
    "TotalValidator",
    "expected_total",
    "validate_record",
]
