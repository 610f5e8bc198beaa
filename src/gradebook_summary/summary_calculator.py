#!/usr/bin/env python3
"""
SUMMARY CALCULATOR - Averages, branch averages, and top-3 rankings

CALCULATIONS:
✅ Overall Averages: Mean of every component over all records
✅ Branch Averages: Mean of Total per branch (from Campus ID)
✅ Top 3 Rankings: Highest scores per component, labelled 1st/2nd/3rd

RANKING METHODOLOGY:
- Primary Sort: Component score (descending)
- Tie Handling: Stable sort, the earlier row ranks higher
- Labels follow position, so two tied students get "1st" and "2nd"

EDGE CASES HANDLED:
- No records (or no records in the class filter): empty report, no division
- Unclassified branch (short Campus ID): grouped under ""
- Mismatched totals: reported, rows still counted with declared values
  unless total recompute is enabled

Priority: CRITICAL - Core summary calculations
Dependencies: data_models, total_validator
"""

from typing import Dict, List, Optional, Tuple
import logging

from .data_models import COMPONENTS, RankingEntry, ReportOptions, StudentRecord, SummaryReport
from .total_validator import TotalValidator, expected_total

logger = logging.getLogger(__name__)


TOP_N = 3
RANK_LABELS = ["1st", "2nd", "3rd"]


def filter_by_class(records: List[StudentRecord], class_no: Optional[str]) -> List[StudentRecord]:
    """Keep records in the given class; no filter keeps everything"""
    if not class_no:
        return list(records)
    return [record for record in records if record.class_no == class_no]


class SummaryCalculator:
    """Calculate summary statistics over a collection of student records"""

    def __init__(self, components: Optional[List[str]] = None):
        self.components = list(components) if components is not None else list(COMPONENTS)
        self.calculation_log: List[str] = []

    def calculate_overall_averages(self, records: List[StudentRecord]) -> Dict[str, float]:
        """Mean of each component, in component order"""
        if not records:
            return {}

        count = len(records)
        averages = {}
        for component in self.components:
            total = sum(record.score_for(component) for record in records)
            averages[component] = total / count
        return averages

    def calculate_branch_averages(self, records: List[StudentRecord]) -> Dict[str, float]:
        """Mean of Total per branch, branches in first-seen order"""
        branch_totals: Dict[str, int] = {}
        branch_counts: Dict[str, int] = {}

        for record in records:
            branch = record.branch
            if branch not in branch_totals:
                branch_totals[branch] = 0
                branch_counts[branch] = 0
            branch_totals[branch] += record.total
            branch_counts[branch] += 1

        return {
            branch: branch_totals[branch] / branch_counts[branch]
            for branch in branch_totals
        }

    def calculate_top_rankings(
        self,
        records: List[StudentRecord],
        top_n: int = TOP_N
    ) -> Dict[str, List[RankingEntry]]:
        """
        Top-N students per component

        Args:
            records: Records in input order
            top_n: Entries per component (at most len(RANK_LABELS))

        Returns:
            Component name -> ranking entries, best first
        """
        if not records:
            return {}

        top_n = min(top_n, len(RANK_LABELS))
        rankings = {}

        for component in self.components:
            scores: List[Tuple[str, int]] = [
                (record.campus_id, record.score_for(component)) for record in records
            ]
            # sorted() is stable, so equal scores keep input order
            sorted_scores = sorted(scores, key=lambda x: x[1], reverse=True)

            rankings[component] = [
                RankingEntry(campus_id=campus_id, score=score, rank=RANK_LABELS[position])
                for position, (campus_id, score) in enumerate(sorted_scores[:top_n])
            ]

            if rankings[component]:
                leader = rankings[component][0]
                self.calculation_log.append(
                    f"   {component}: {leader.campus_id} leads with {leader.score}"
                )

        return rankings

    def generate_report(
        self,
        records: List[StudentRecord],
        diagnostics: Optional[List[str]] = None
    ) -> SummaryReport:
        """
        Build the summary report for an already filtered record set

        Args:
            records: Records to aggregate
            diagnostics: Validation messages carried into the report unchanged

        Returns:
            SummaryReport (empty maps when there are no records)
        """
        errors = list(diagnostics) if diagnostics else []
        self.calculation_log = []

        if not records:
            logger.warning("⚠️ No student records found.")
            self.calculation_log.append("⚠️ No student records found - empty report")
            return SummaryReport(errors=errors, student_count=0)

        self.calculation_log.append(f"📊 Summarizing {len(records)} student records")

        averages = self.calculate_overall_averages(records)
        branch_averages = self.calculate_branch_averages(records)
        rankings = self.calculate_top_rankings(records)

        self.calculation_log.append(f"   Branches: {len(branch_averages)}")
        self.calculation_log.append("✅ Summary calculated successfully")
        logger.info(f"✅ Summarized {len(records)} records across {len(branch_averages)} branches")

        return SummaryReport(
            averages=averages,
            branch_averages=branch_averages,
            rankings=rankings,
            errors=errors,
            student_count=len(records),
        )

    def get_calculation_log(self) -> List[str]:
        return self.calculation_log


def generate_summary_report(
    records: List[StudentRecord],
    options: Optional[ReportOptions] = None
) -> SummaryReport:
    """
    Run the full summary: class filter, total validation, optional total
    recompute, then aggregation.

    Diagnostics always describe the declared totals. With recompute_total
    enabled the aggregation sees records whose Total is the expected total.
    """
    if options is None:
        options = ReportOptions()

    selected = filter_by_class(records, options.class_filter)
    if options.class_filter:
        logger.info(f"📊 Class {options.class_filter}: {len(selected)} of {len(records)} records")

    diagnostics = TotalValidator().validate_all(selected)

    if options.recompute_total:
        selected = [record.with_total(expected_total(record)) for record in selected]

    return SummaryCalculator().generate_report(selected, diagnostics)
