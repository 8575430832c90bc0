# /tests/test_gpa_calculator.py

import pytest

from gradebook.models.curriculum_model import Subject
from gradebook.services.report_helpers.gpa_calculator import (
    activity_code,
    compute_gpa,
    parse_grade,
    subject_credits,
    subject_hour_count,
)


@pytest.fixture
def primary_subjects():
    return [Subject(code="A", name="ภาษาไทย", hours=80), Subject(code="B", name="คณิตศาสตร์", hours=40)]


def test_no_subjects_is_not_available():
    assert compute_gpa([], {}, True) == "N/A"


def test_no_numeric_grades_is_not_available(primary_subjects):
    assert compute_gpa(primary_subjects, {}, True) == "N/A"
    assert compute_gpa(primary_subjects, {"A": "ผ่าน", "B": ""}, True) == "N/A"


def test_primary_credits_weight_by_hours(primary_subjects):
    # credits 1.0 and 0.5: (3 * 1.0 + 4 * 0.5) / 1.5
    assert compute_gpa(primary_subjects, {"A": "3", "B": "4"}, True) == "3.33"


def test_secondary_credit_from_hours_string():
    subjects = [Subject(code="X", name="ภาษาไทย", hours="1.5 (60)")]
    assert compute_gpa(subjects, {"X": "4"}, False) == "4.00"


def test_secondary_weighted_average():
    subjects = [
        Subject(code="X", name="ภาษาไทย", hours="1.5 (60)"),
        Subject(code="Y", name="ประวัติศาสตร์", hours="0.5 (20)"),
    ]
    # (2.5 * 1.5 + 4 * 0.5) / 2.0 = 2.875
    assert compute_gpa(subjects, {"X": "2.5", "Y": "4"}, False) == "2.88"


def test_subjects_without_credit_are_excluded():
    subjects = [
        Subject(code="A", name="ภาษาไทย", hours=80),
        Subject(code="Z", name="ชุมนุม", hours="ไม่ระบุ"),
    ]
    assert compute_gpa(subjects, {"A": "2", "Z": "4"}, True) == "2.00"
    # A primary-style number is not a valid secondary credit string.
    assert compute_gpa(subjects, {"A": "2", "Z": "4"}, False) == "N/A"


def test_compute_gpa_is_repeatable(primary_subjects):
    grades = {"A": "3.5", "B": "1"}
    assert compute_gpa(primary_subjects, grades, True) == compute_gpa(primary_subjects, grades, True)


@pytest.mark.parametrize("value, expected", [
    ("3.5", 3.5), (" 4 ", 4.0), (2, 2.0), ("ผ่าน", None), ("", None), (None, None), ("nan", None),
])
def test_parse_grade(value, expected):
    assert parse_grade(value) == expected


@pytest.mark.parametrize("hours, is_primary, expected", [
    (80, True, 1.0), (120, True, 1.5), (0, True, 0.0), ("80", True, 0.0), (True, True, 0.0),
    ("1.5 (60)", False, 1.5), ("2(80)", False, 2.0), ("60", False, 0.0), (60, False, 0.0),
])
def test_subject_credits(hours, is_primary, expected):
    assert subject_credits(hours, is_primary) == expected


def test_subject_hour_count():
    assert subject_hour_count(40) == 40.0
    assert subject_hour_count("1.5 (60)") == 60.0
    assert subject_hour_count("n/a") == 0.0


def test_activity_code_synthesis():
    scout = Subject(code="", name="ลูกเสือ", hours=20)
    assert activity_code(scout, 2) == "ลูกเสือ-2"
    assert activity_code(Subject(code="", name="กิจกรรม เพื่อสังคม", hours=5), 1) == "กิจกรรมเพื่อสังคม-1"
    assert activity_code(Subject(code="ก21901", name="แนะแนว", hours=20), 2) == "ก21901"
