#!/usr/bin/env python3
"""
DATA MODELS - Pydantic schemas for gradebook summary data
Type-safe data structures for student rows, rankings, and the summary report

MODELS:
✅ StudentRecord: One gradebook row with integer component scores
✅ RankingEntry: One position in a per-component leaderboard
✅ SummaryReport: Averages, branch averages, rankings, validation errors
✅ ReportOptions: Run configuration (class filter, total policy, export)

RULES:
- Records are immutable once built
- Branch is derived from the Campus ID, never stored on its own
- Component order is fixed and drives every report iteration

Priority: CRITICAL - Foundation for all summary calculations
Dependencies: Pydantic for validation and JSON serialization
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


# Assessment components in report order
COMPONENTS = [
    "Quiz",
    "MidSem",
    "LabTest",
    "WeeklyLabs",
    "PreCompre",
    "Compre",
    "Total",
]

# Component name -> StudentRecord attribute
COMPONENT_FIELDS = {
    "Quiz": "quiz",
    "MidSem": "mid_sem",
    "LabTest": "lab_test",
    "WeeklyLabs": "weekly_labs",
    "PreCompre": "pre_compre",
    "Compre": "compre",
    "Total": "total",
}

# Branch code location inside a Campus ID (e.g. 2021A7PS0001G -> "A7")
BRANCH_OFFSET = 4
BRANCH_LENGTH = 2


def derive_branch(campus_id: str) -> str:
    """Extract the branch code from a Campus ID, "" if the ID is too short"""
    end = BRANCH_OFFSET + BRANCH_LENGTH
    if len(campus_id) >= end:
        return campus_id[BRANCH_OFFSET:end]
    return ""


class StudentRecord(BaseModel):
    """One gradebook row"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    campus_id: str = Field(..., alias="CampusID", description="Student Campus ID")
    class_no: str = Field("", alias="ClassNo.", description="Class / section label")

    quiz: int = Field(0, alias="Quiz", description="Quiz score")
    mid_sem: int = Field(0, alias="MidSem", description="Mid-semester exam score")
    lab_test: int = Field(0, alias="LabTest", description="Lab test score")
    weekly_labs: int = Field(0, alias="WeeklyLabs", description="Weekly labs score")
    pre_compre: int = Field(0, alias="PreCompre", description="Total before comprehensive exam")
    compre: int = Field(0, alias="Compre", description="Comprehensive exam score")
    total: int = Field(0, alias="Total", description="Declared total")

    @field_validator("campus_id", "class_no", mode="before")
    @classmethod
    def coerce_label(cls, v):
        """Labels arrive from spreadsheets as str or int"""
        if v is None:
            return ""
        return str(v)

    @computed_field
    @property
    def branch(self) -> str:
        """Branch code derived from the Campus ID"""
        return derive_branch(self.campus_id)

    def score_for(self, component: str) -> int:
        """Get the score for a component name such as "MidSem" """
        return getattr(self, COMPONENT_FIELDS[component])

    def with_total(self, total: int) -> "StudentRecord":
        """Copy of this record carrying a different total"""
        return self.model_copy(update={"total": total})


class RankingEntry(BaseModel):
    """One position in a per-component top-N list"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    campus_id: str = Field(..., alias="CampusID")
    score: int = Field(..., alias="Score")
    rank: str = Field(..., alias="Rank", description="1st, 2nd or 3rd")


class SummaryReport(BaseModel):
    """Summary report built once per run"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    averages: Dict[str, float] = Field(default_factory=dict, alias="Averages")
    branch_averages: Dict[str, float] = Field(default_factory=dict, alias="BranchAverages")
    rankings: Dict[str, List[RankingEntry]] = Field(default_factory=dict, alias="Rankings")
    errors: List[str] = Field(default_factory=list, alias="Errors")
    student_count: int = Field(0, ge=0, alias="StudentCount", exclude=True)

    @property
    def is_empty(self) -> bool:
        return self.student_count == 0


class ReportOptions(BaseModel):
    """Run configuration for a summary report"""

    class_filter: Optional[str] = Field(None, description="Only include this ClassNo.")
    recompute_total: bool = Field(
        False, description="Replace declared totals with the expected total before aggregating"
    )
    export: bool = Field(False, description="Write the JSON report")
    export_path: str = Field("report.json", description="JSON report file name")
    progress: bool = Field(False, description="Show a progress bar while loading rows")

    @field_validator("class_filter")
    @classmethod
    def blank_filter_is_none(cls, v):
        """An empty class filter means no filtering"""
        if v is not None and not v.strip():
            return None
        return v


# Export all models
__all__ = [
    "COMPONENTS",
    "COMPONENT_FIELDS",
    "derive_branch",
    "StudentRecord",
    "RankingEntry",
    "SummaryReport",
    "ReportOptions",
]
