"""
Pytest Configuration and Fixtures

Provides common fixtures for all tests including:
- Sample student records
- Gradebook files written to a temporary directory
"""

import pytest
import pandas as pd

# Add src to path
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gradebook_summary.data_models import StudentRecord


GRADEBOOK_COLUMNS = [
    "CampusID", "ClassNo.", "Quiz", "MidSem", "LabTest",
    "WeeklyLabs", "PreCompre", "Compre", "Total",
]


def make_record(campus_id, class_no="1", quiz=0, mid_sem=0, lab_test=0,
                weekly_labs=0, pre_compre=0, compre=0, total=None):
    """Build a record; total defaults to the consistent PreCompre + Compre"""
    if total is None:
        total = pre_compre + compre
    return StudentRecord(
        campus_id=campus_id,
        class_no=class_no,
        quiz=quiz,
        mid_sem=mid_sem,
        lab_test=lab_test,
        weekly_labs=weekly_labs,
        pre_compre=pre_compre,
        compre=compre,
        total=total,
    )


@pytest.fixture
def sample_records():
    """Four students over two classes and three branches"""
    return [
        make_record("2021A7PS0001G", "1", quiz=10, mid_sem=30, lab_test=8,
                    weekly_labs=9, pre_compre=57, compre=30),
        make_record("2021A7PS0002G", "1", quiz=12, mid_sem=25, lab_test=10,
                    weekly_labs=7, pre_compre=54, compre=35),
        make_record("2021AAPS0003G", "2", quiz=8, mid_sem=30, lab_test=6,
                    weekly_labs=10, pre_compre=54, compre=20, total=80),
        make_record("2022B4PS0004G", "2", quiz=15, mid_sem=20, lab_test=9,
                    weekly_labs=8, pre_compre=52, compre=28),
    ]


@pytest.fixture
def gradebook_rows():
    """Gradebook rows as they appear in a spreadsheet"""
    return [
        ["2021A7PS0001G", "1", 10, 30, 8, 9, 57, 30, 87],
        ["2021A7PS0002G", "1", 12, 25, 10, 7, 54, 35, 89],
        ["2021AAPS0003G", "2", 8, 30, 6, 10, 54, 20, 80],
        ["2022B4PS0004G", "2", 15, 20, 9, 8, 52, 28, 80],
    ]


@pytest.fixture
def gradebook_xlsx(tmp_path, gradebook_rows):
    """Gradebook workbook with one sheet"""
    path = tmp_path / "gradebook.xlsx"
    pd.DataFrame(gradebook_rows, columns=GRADEBOOK_COLUMNS).to_excel(path, index=False)
    return path


@pytest.fixture
def gradebook_csv(tmp_path, gradebook_rows):
    """Gradebook CSV export"""
    path = tmp_path / "gradebook.csv"
    pd.DataFrame(gradebook_rows, columns=GRADEBOOK_COLUMNS).to_csv(path, index=False)
    return path


@pytest.fixture
def record_factory():
    """Factory fixture for single records"""
    return make_record
