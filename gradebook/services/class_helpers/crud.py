# /gradebook/services/class_helpers/crud.py

import logging
from typing import Optional

from ...core.grade_levels import is_known_grade_level
from ...models import student_model
from ..database_service import DatabaseService
from . import roster as roster_helpers

logger = logging.getLogger(__name__)


class DuplicateStudentError(ValueError):
    """A student ID already exists in the school, or a roll number in the classroom."""


# --- STUDENT-RELATED CORE BUSINESS LOGIC ---

def add_student_to_class(
    grade_level: str,
    room: str,
    student_data: student_model.StudentCreate,
    db: DatabaseService,
) -> student_model.Student:
    """Business logic to add a new student to a classroom."""
    if not is_known_grade_level(grade_level):
        raise ValueError(f"Unknown grade level '{grade_level}'.")

    snapshot = db.load_snapshot()
    roster = snapshot.students

    if roster_helpers.find_student(roster, student_data.id):
        raise DuplicateStudentError(f"Student ID {student_data.id} already exists in the school.")

    class_students = roster_helpers.get_class_students(roster, grade_level, room)
    if any(s.number == student_data.number for s in class_students):
        raise DuplicateStudentError(f"Number {student_data.number} is already taken in {grade_level}/{room}.")

    new_student = student_model.Student(**student_data.model_dump())
    new_roster = roster_helpers.with_student_added(roster, grade_level, room, new_student)
    db.save_snapshot(snapshot.model_copy(update={"students": new_roster}))

    logger.info("Added student %s to %s/%s as number %d.", new_student.id, grade_level, room, new_student.number)
    return new_student


def remove_student_from_class(grade_level: str, room: str, student_id: str, academic_year: str, db: DatabaseService) -> bool:
    """
    Removes a student from a classroom and deletes the grades recorded for them
    in `academic_year`. Grades from other years are kept.
    """
    snapshot = db.load_snapshot()
    class_students = roster_helpers.get_class_students(snapshot.students, grade_level, room)
    if not any(s.id == student_id for s in class_students):
        return False

    new_roster = roster_helpers.without_student(snapshot.students, grade_level, room, student_id)

    new_grades = dict(snapshot.grades)
    if student_id in new_grades.get(academic_year, {}):
        new_grades[academic_year] = {
            sid: subject_grades for sid, subject_grades in new_grades[academic_year].items() if sid != student_id
        }

    db.save_snapshot(snapshot.model_copy(update={"students": new_roster, "grades": new_grades}))
    logger.info("Removed student %s from %s/%s (grades for %s deleted).", student_id, grade_level, room, academic_year)
    return True


def _update_student_flags(student_id: str, db: DatabaseService, **flags) -> Optional[student_model.Student]:
    snapshot = db.load_snapshot()
    new_roster = roster_helpers.with_student_updated(
        snapshot.students, student_id, lambda s: s.model_copy(update=flags)
    )
    if new_roster is None:
        return None
    db.save_snapshot(snapshot.model_copy(update={"students": new_roster}))
    return roster_helpers.find_student(new_roster, student_id).student


def set_student_retention(student_id: str, retained: bool, db: DatabaseService) -> Optional[student_model.Student]:
    """Marks or unmarks a student to repeat their grade at the next promotion."""
    return _update_student_flags(student_id, db, retained=retained)


def set_student_transfer(student_id: str, transferring_out: bool, db: DatabaseService) -> Optional[student_model.Student]:
    """Marks or unmarks a student as leaving the school at the next promotion."""
    return _update_student_flags(student_id, db, transferringOut=transferring_out)
