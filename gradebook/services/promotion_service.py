# /gradebook/services/promotion_service.py

"""
This service module owns the end-of-year promotion process.

`promote` is the promotion engine itself: a pure function from this year's
roster to next year's roster. `run_year_end_promotion` is the facade the admin
router calls; it loads the stored snapshot, applies the engine, and replaces
the stored roster in full with the result.
"""

import logging
from typing import Dict, List, Tuple

from ..core.grade_levels import FEEDER_GRADE_LEVEL, is_known_grade_level, next_grade_level
from ..models.promotion_model import NumberConflict, PromotionSummary
from ..models.student_model import Roster, Student
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

# Outcomes of a single student's promotion.
RETAINED = "retained"
TRANSFERRED_OUT = "transferred_out"
GRADUATED = "graduated"
PROMOTED = "promoted"
UNCHANGED = "unchanged"


def classify_student(student: Student, grade_level: str) -> str:
    """Decides what happens to one student. Retention is checked first."""
    if student.retained:
        return RETAINED
    if not is_known_grade_level(grade_level):
        return UNCHANGED
    if grade_level == FEEDER_GRADE_LEVEL and student.transferringOut:
        return TRANSFERRED_OUT
    if next_grade_level(grade_level) is None:
        return GRADUATED
    return PROMOTED


def _place(roster: Dict[str, Dict[str, List[Student]]], grade_level: str, room: str, student: Student) -> None:
    roster.setdefault(grade_level, {}).setdefault(room, []).append(student)


def _promote_with_outcomes(roster: Roster) -> Tuple[Roster, Dict[str, int]]:
    # Every input cell exists in the output, even if it ends up empty.
    next_roster: Dict[str, Dict[str, List[Student]]] = {
        grade_level: {room: [] for room in rooms} for grade_level, rooms in roster.items()
    }
    outcomes = {RETAINED: 0, TRANSFERRED_OUT: 0, GRADUATED: 0, PROMOTED: 0, UNCHANGED: 0}

    for grade_level, rooms in roster.items():
        for room, students in rooms.items():
            for student in students:
                outcome = classify_student(student, grade_level)
                outcomes[outcome] += 1

                if outcome == RETAINED:
                    _place(next_roster, grade_level, room, student.model_copy(update={"retained": False}))
                elif outcome == PROMOTED:
                    promoted = student.model_copy(update={"retained": False, "transferringOut": False})
                    _place(next_roster, next_grade_level(grade_level), room, promoted)
                elif outcome == UNCHANGED:
                    logger.warning(
                        "Unknown grade level '%s'; student %s kept in place.", grade_level, student.id
                    )
                    _place(next_roster, grade_level, room, student)
                # Transferred-out and graduated students leave the roster.

    for rooms in next_roster.values():
        for students in rooms.values():
            students.sort(key=lambda s: s.number)

    return next_roster, outcomes


def find_number_conflicts(roster: Roster) -> List[NumberConflict]:
    """
    Lists every classroom where several students share a roll number.

    Placement keeps both the classroom key and the number, so a retained
    student and a classmate promoted from the grade below can collide.
    """
    conflicts = []
    for grade_level, rooms in roster.items():
        for room, students in rooms.items():
            ids_by_number: Dict[int, List[str]] = {}
            for student in students:
                ids_by_number.setdefault(student.number, []).append(student.id)
            for number, student_ids in ids_by_number.items():
                if len(student_ids) > 1:
                    conflicts.append(NumberConflict(
                        gradeLevel=grade_level, room=room, number=number, studentIds=student_ids
                    ))
    return conflicts


def promote(roster: Roster) -> Roster:
    """
    Computes next academic year's roster.

    - Retained students stay in their grade and classroom, with `retained`
      cleared for the new cycle. `transferringOut` is kept.
    - p6 students marked as transferring out leave the school.
    - m3 students graduate and leave the roster.
    - Everyone else moves to the next grade level under the same classroom key,
      with both flags cleared.

    The input is never modified. Every classroom in the result is sorted by
    roll number.

    Students keep their roll number, so a retained student and one promoted
    into the same classroom may share a number; `find_number_conflicts`
    reports such clashes instead of renumbering anyone.
    """
    next_roster, _ = _promote_with_outcomes(roster)
    return next_roster


def _count_students(roster: Roster) -> int:
    return sum(len(students) for rooms in roster.values() for students in rooms.values())


def run_year_end_promotion(db: DatabaseService) -> PromotionSummary:
    """
    Applies the promotion engine to the stored roster and persists the result,
    replacing the previous roster entirely.
    """
    snapshot = db.load_snapshot()
    next_roster, outcomes = _promote_with_outcomes(snapshot.students)

    db.save_snapshot(snapshot.model_copy(update={"students": next_roster}))

    conflicts = find_number_conflicts(next_roster)
    for conflict in conflicts:
        logger.warning(
            "Roll number %d is shared by students %s in %s/%s after promotion.",
            conflict.number, ", ".join(conflict.studentIds), conflict.gradeLevel, conflict.room,
        )

    summary = PromotionSummary(
        promoted=outcomes[PROMOTED],
        retained=outcomes[RETAINED],
        graduated=outcomes[GRADUATED],
        transferredOut=outcomes[TRANSFERRED_OUT],
        studentsBefore=_count_students(snapshot.students),
        studentsAfter=_count_students(next_roster),
        numberConflicts=conflicts,
    )
    logger.info(
        "Year-end promotion complete: %d promoted, %d retained, %d graduated, %d transferred out.",
        summary.promoted, summary.retained, summary.graduated, summary.transferredOut,
    )
    return summary
