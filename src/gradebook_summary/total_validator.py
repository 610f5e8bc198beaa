#!/usr/bin/env python3
"""
TOTAL VALIDATOR - Check each row's declared total against its components

EXPECTED TOTAL:
✅ Total = PreCompre + Compre
   (PreCompre already carries Quiz, MidSem, LabTest and WeeklyLabs)

A mismatch produces one diagnostic message per record. Validation never
modifies a record and never removes it from the summary.

Priority: HIGH - Surfaces inconsistent gradebook rows
Dependencies: data_models
"""

from typing import List, Optional
import logging

from .data_models import StudentRecord

logger = logging.getLogger(__name__)


# Components summed into the expected total
TOTAL_FORMULA_COMPONENTS = ("PreCompre", "Compre")


def expected_total(record: StudentRecord) -> int:
    """Recompute the total from the formula components"""
    return sum(record.score_for(component) for component in TOTAL_FORMULA_COMPONENTS)


def validate_record(record: StudentRecord) -> Optional[str]:
    """
    Validate a single record's declared total

    Returns:
        Diagnostic message on mismatch, None when the total is consistent
    """
    expected = expected_total(record)
    if record.total != expected:
        return (
            f"Error: Mismatch for CAMPUSID {record.campus_id} "
            f"-> Expected {expected}, Found {record.total}"
        )
    return None


class TotalValidator:
    """Collect total-mismatch diagnostics for a set of records"""

    def __init__(self):
        self.validation_log: List[str] = []

    def validate_all(self, records: List[StudentRecord]) -> List[str]:
        """
        Validate every record in input order

        Args:
            records: Student records to check

        Returns:
            Diagnostic messages, at most one per record
        """
        self.validation_log = []
        self.validation_log.append(f"🔍 Validating totals for {len(records)} records")

        diagnostics = []
        for record in records:
            message = validate_record(record)
            if message is not None:
                diagnostics.append(message)

        if diagnostics:
            self.validation_log.append(f"⚠️ {len(diagnostics)} total mismatches found")
            logger.warning(f"⚠️ {len(diagnostics)} of {len(records)} records have mismatched totals")
        else:
            self.validation_log.append("✅ All totals consistent")

        return diagnostics

    def get_validation_log(self) -> List[str]:
        return self.validation_log
