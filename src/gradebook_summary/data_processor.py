#!/usr/bin/env python3
"""
DATA PROCESSOR - Gradebook loading, column checks, and record assembly
Load a gradebook spreadsheet and turn each row into a StudentRecord

DATA SOURCES:
✅ Excel workbook (.xlsx / .xlsm) - first sheet only
✅ CSV export (.csv)

VALIDATION STRATEGY:
1. File Checks: File exists, is readable, sheet is not empty
2. Schema Validation: All required columns present in the header row
3. Cell Parsing: Integer scores, unparsable cells default to 0 (warned)

Priority: CRITICAL - Foundation for the summary report
Dependencies: pandas (openpyxl engine), tqdm, data_models
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import logging
import re

import pandas as pd
from tqdm import tqdm

from .data_models import COMPONENT_FIELDS, StudentRecord
from .summary_calculator import filter_by_class

logger = logging.getLogger(__name__)


ID_COLUMN = "CampusID"
CLASS_COLUMN = "ClassNo."

REQUIRED_COLUMNS = [
    ID_COLUMN,
    CLASS_COLUMN,
    "Quiz",
    "MidSem",
    "LabTest",
    "WeeklyLabs",
    "PreCompre",
    "Compre",
    "Total",
]

INTEGER_PATTERN = re.compile(r"[+-]?\d+")

# Read through openpyxl; legacy .xls workbooks are not supported
EXCEL_SUFFIXES = {".xlsx", ".xlsm"}


class GradebookLoadError(Exception):
    """Gradebook could not be loaded (missing file, empty sheet, missing column)"""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Gradebook could not be loaded")


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value)


class GradebookDataProcessor:
    """Load and validate a gradebook file"""

    def __init__(self, file_path: Path, progress: bool = False):
        self.file_path = Path(file_path)
        self.progress = progress

        # Data storage
        self.gradebook: Optional[pd.DataFrame] = None
        self.records: List[StudentRecord] = []

        # Validation results
        self.validation_errors: List[str] = []
        self.validation_warnings: List[str] = []

    def load_gradebook(self) -> bool:
        """Load the gradebook and assemble student records"""

        logger.info("🔍 LOADING GRADEBOOK")
        logger.info("=" * 60)

        self.records = []
        self.validation_errors = []
        self.validation_warnings = []

        if not self._read_sheet():
            logger.error("❌ Gradebook loading failed - check validation errors")
            return False

        if not self._validate_columns():
            logger.error("❌ Gradebook loading failed - check validation errors")
            return False

        self._assemble_records()

        logger.info(f"  ✅ Loaded {len(self.records)} student records")
        if self.validation_warnings:
            logger.warning(f"  ⚠️ {len(self.validation_warnings)} cells defaulted to 0")
        return True

    def load_records(self) -> List[StudentRecord]:
        """Load the gradebook, raising GradebookLoadError on failure"""
        if not self.load_gradebook():
            raise GradebookLoadError(self.validation_errors)
        return self.records

    def _read_sheet(self) -> bool:
        """Read the first sheet with every cell as text"""

        if not self.file_path.exists():
            self.validation_errors.append(f"Failed to open file: {self.file_path} does not exist")
            return False

        suffix = self.file_path.suffix.lower()
        if suffix != ".csv" and suffix not in EXCEL_SUFFIXES:
            self.validation_errors.append(
                f"Unsupported file type {self.file_path.suffix!r}: save the gradebook as .xlsx or .csv"
            )
            return False

        try:
            logger.info(f"📊 Loading gradebook from: {self.file_path}")

            if suffix == ".csv":
                self.gradebook = pd.read_csv(
                    self.file_path, dtype=str, keep_default_na=False, encoding="utf-8-sig"
                )
            else:
                self.gradebook = pd.read_excel(
                    self.file_path, sheet_name=0, dtype=str, keep_default_na=False
                )

        except pd.errors.EmptyDataError:
            self.validation_errors.append("The sheet is empty.")
            return False
        except Exception as e:
            self.validation_errors.append(f"Failed to read rows: {e}")
            logger.error(f"  ❌ Failed to read gradebook: {e}")
            return False

        if len(self.gradebook.columns) == 0:
            self.validation_errors.append("The sheet is empty.")
            return False

        self.gradebook.columns = [_cell_text(col) for col in self.gradebook.columns]
        return True

    def _validate_columns(self) -> bool:
        """Check the header row for every required column"""

        missing_columns = [
            col for col in REQUIRED_COLUMNS if col not in self.gradebook.columns
        ]
        for col in missing_columns:
            self.validation_errors.append(f"Missing required column: {col}")

        return not missing_columns

    def _assemble_records(self):
        """Build one StudentRecord per non-blank row"""

        rows = self.gradebook.to_dict("records")
        iterator = tqdm(rows, desc="Reading rows", unit="row", disable=not self.progress)

        skipped = 0
        for row_number, row in enumerate(iterator, start=2):
            cells = {col: _cell_text(value) for col, value in row.items()}
            if not any(text.strip() for text in cells.values()):
                skipped += 1
                continue

            campus_id = cells[ID_COLUMN]
            scores = {
                field: self._parse_score(cells[component], component, campus_id, row_number)
                for component, field in COMPONENT_FIELDS.items()
            }

            self.records.append(
                StudentRecord(campus_id=campus_id, class_no=cells[CLASS_COLUMN], **scores)
            )

        if skipped:
            logger.debug(f"  Skipped {skipped} blank rows")

    def _parse_score(self, text: str, component: str, campus_id: str, row_number: int) -> int:
        """Parse an integer cell; anything else counts as 0"""
        stripped = text.strip()
        if INTEGER_PATTERN.fullmatch(stripped):
            return int(stripped)
        if stripped:
            self.validation_warnings.append(
                f"Row {row_number} ({campus_id}): {component} value {text!r} is not an integer, using 0"
            )
        return 0

    def get_records(self, class_no: Optional[str] = None) -> List[StudentRecord]:
        """Loaded records, optionally for one class"""
        return filter_by_class(self.records, class_no)

    def get_class_labels(self) -> List[str]:
        """Distinct class labels in first-seen order"""
        labels: Dict[str, None] = {}
        for record in self.records:
            labels.setdefault(record.class_no, None)
        return list(labels)

    def generate_validation_report(self) -> str:
        """Generate gradebook validation report"""

        report = ["🔍 GRADEBOOK VALIDATION REPORT", "=" * 50, ""]

        if not self.validation_errors and not self.validation_warnings:
            report.append("✅ All validation checks passed!")
        else:
            if self.validation_errors:
                report.append("❌ ERRORS (Must be fixed):")
                for error in self.validation_errors:
                    report.append(f"  • {error}")
                report.append("")

            if self.validation_warnings:
                report.append("⚠️ WARNINGS (Review recommended):")
                for warning in self.validation_warnings:
                    report.append(f"  • {warning}")
                report.append("")

        if self.gradebook is not None:
            report.append("📊 DATA SUMMARY:")
            report.append(f"  Rows: {len(self.gradebook)}")
            report.append(f"  Student Records: {len(self.records)}")
            report.append(f"  Classes: {len(self.get_class_labels())}")

        return "\n".join(report)
