# /gradebook/core/grade_levels.py

"""
Static school configuration shared by the promotion engine, the GPA calculator
and the application shell.

Nothing in this module is derived from stored data. The progression graph and
the credit conversion rate are policy constants of the Thai basic-education
structure the grade-book is built for.
"""

from typing import Dict, List, Optional

# --- Grade-level progression graph ---
# Maps every grade key to the grade a promoted student moves into.
# `None` marks the terminal grade: finishing it means graduating.
NEXT_GRADE_LEVEL: Dict[str, Optional[str]] = {
    "p1": "p2", "p2": "p3", "p3": "p4", "p4": "p5", "p5": "p6",
    "p6": "m1", "m1": "m2", "m2": "m3", "m3": None,
}

# The last primary grade. Its students may leave the school instead of
# advancing into secondary.
FEEDER_GRADE_LEVEL = "p6"

GRADE_LEVEL_LABELS: Dict[str, str] = {
    "p1": "ประถมศึกษาปีที่ 1", "p2": "ประถมศึกษาปีที่ 2", "p3": "ประถมศึกษาปีที่ 3",
    "p4": "ประถมศึกษาปีที่ 4", "p5": "ประถมศึกษาปีที่ 5", "p6": "ประถมศึกษาปีที่ 6",
    "m1": "มัธยมศึกษาปีที่ 1", "m2": "มัธยมศึกษาปีที่ 2", "m3": "มัธยมศึกษาปีที่ 3",
}

# --- Credit policy ---
# Primary grades record yearly hours; 80 instructional hours make one credit.
HOURS_PER_CREDIT = 80

# --- Grade tokens ---
NUMERIC_GRADE_OPTIONS: List[str] = ["4", "3.5", "3", "2.5", "2", "1.5", "1", "0"]
ACTIVITY_PASS = "ผ่าน"
ACTIVITY_FAIL = "ไม่ผ่าน"
ACTIVITY_GRADE_OPTIONS: List[str] = [ACTIVITY_PASS, ACTIVITY_FAIL]

GPA_NOT_AVAILABLE = "N/A"


def next_grade_level(grade_level: str) -> Optional[str]:
    """Returns the grade a promoted student enters, or None on graduation."""
    return NEXT_GRADE_LEVEL.get(grade_level)


def is_known_grade_level(grade_level: str) -> bool:
    return grade_level in NEXT_GRADE_LEVEL
