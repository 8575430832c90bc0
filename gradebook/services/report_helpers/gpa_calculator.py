# /gradebook/services/report_helpers/gpa_calculator.py

"""
Grade-point average computation.

The calculator is shape-agnostic: callers flatten whichever subject lists
apply (core + additional for a primary year, one semester or both semesters
for secondary grades) and pass them in together with the student's grades.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, Optional, Union

from ...core.grade_levels import HOURS_PER_CREDIT, GPA_NOT_AVAILABLE
from ...models.curriculum_model import Subject

# Leading credit value of a secondary "credit (hours)" string, e.g. "1.5 (60)".
_SECONDARY_CREDIT_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)\s*\(")
_HOURS_IN_PARENS_PATTERN = re.compile(r"\((\d+(?:\.\d+)?)\)")
_WHITESPACE = re.compile(r"\s")


def parse_grade(value: Union[str, int, float, None]) -> Optional[float]:
    """Returns the grade as a float, or None for missing and pass/fail grades."""
    if value is None or isinstance(value, bool):
        return None
    try:
        grade = float(str(value).strip())
    except ValueError:
        return None
    return grade if math.isfinite(grade) else None


def subject_credits(hours: Union[int, float, str, None], is_primary: bool) -> float:
    """Converts a subject's hours field into credit weight. Unusable values give 0."""
    if is_primary:
        if isinstance(hours, bool) or not isinstance(hours, (int, float)):
            return 0.0
        return hours / HOURS_PER_CREDIT if hours > 0 else 0.0

    match = _SECONDARY_CREDIT_PATTERN.match(str(hours))
    return float(match.group(1)) if match else 0.0


def subject_hour_count(hours: Union[int, float, str, None]) -> float:
    """Instructional hours of a subject: the number itself, or the '(60)' part of '1.5 (60)'."""
    if isinstance(hours, bool) or hours is None:
        return 0.0
    if isinstance(hours, (int, float)):
        return float(hours)
    match = _HOURS_IN_PARENS_PATTERN.search(hours)
    return float(match.group(1)) if match else 0.0


def activity_code(subject: Subject, semester_number: int) -> str:
    """
    The key grades for a development activity are stored under.

    Activities with an official code use it. Codeless ones are keyed by their
    name with whitespace removed plus the semester ordinal ("ลูกเสือ-2").
    Grade entry and the report card must both resolve keys through here.
    """
    if subject.code:
        return subject.code
    return f"{_WHITESPACE.sub('', subject.name)}-{semester_number}"


def compute_gpa(subjects: Iterable[Subject], grades: Mapping[str, Union[str, int, float]], is_primary: bool) -> str:
    """
    Credit-weighted average of the numeric grades recorded for `subjects`.

    Subjects without a numeric grade, or without positive credit, are left out
    of both the numerator and the denominator. Returns "N/A" when nothing
    creditable remains, otherwise the average to two decimals.
    """
    total_credits = 0.0
    total_grade_points = 0.0

    for subject in subjects:
        grade = parse_grade(grades.get(subject.code))
        if grade is None:
            continue

        credits = subject_credits(subject.hours, is_primary)
        if credits > 0:
            total_credits += credits
            total_grade_points += grade * credits

    if total_credits == 0:
        return GPA_NOT_AVAILABLE

    gpa = total_grade_points / total_credits
    return str(Decimal(repr(gpa)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
