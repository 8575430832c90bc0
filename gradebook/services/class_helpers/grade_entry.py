# /gradebook/services/class_helpers/grade_entry.py

import logging
from typing import Dict, Optional

from ...core.grade_levels import ACTIVITY_GRADE_OPTIONS, GRADE_LEVEL_LABELS, NUMERIC_GRADE_OPTIONS
from ...models import grade_model
from ...models.curriculum_model import JuniorHighGradeData, Semester
from ..curriculum_helpers import catalog
from ..database_service import DatabaseService
from . import roster as roster_helpers

logger = logging.getLogger(__name__)


def get_class_grade_sheet(
    grade_level: str,
    room: str,
    semester: Optional[Semester],
    academic_year: str,
    db: DatabaseService,
) -> Optional[grade_model.ClassGradeSheet]:
    """
    Assembles the grade-entry sheet for one classroom. Returns None when the
    grade level has no curriculum. Secondary grades need a semester.
    """
    snapshot = db.load_snapshot()
    grade_data = snapshot.curriculum.get(grade_level)
    if grade_data is None:
        return None

    students = roster_helpers.get_class_students(snapshot.students, grade_level, room)
    year_grades = snapshot.grades.get(academic_year, {})

    subjects = [
        grade_model.GradeSheetSubject(
            code=entry.subject.code,
            name=entry.subject.name,
            hours=entry.subject.hours,
            category=entry.category.value,
            isActivity=entry.is_activity,
            gradeOptions=ACTIVITY_GRADE_OPTIONS if entry.is_activity else NUMERIC_GRADE_OPTIONS,
        )
        for entry in catalog.entry_subjects(grade_data, semester)
    ]

    return grade_model.ClassGradeSheet(
        gradeLevel=grade_level,
        room=room,
        level=GRADE_LEVEL_LABELS.get(grade_level, grade_data.level),
        semester=semester if isinstance(grade_data, JuniorHighGradeData) else None,
        academicYear=academic_year,
        students=students,
        subjects=subjects,
        grades={s.id: dict(year_grades.get(s.id, {})) for s in students},
    )


def save_class_grades(
    grades_for_class: Dict[str, Dict[str, str]],
    academic_year: str,
    db: DatabaseService,
) -> Dict[str, Dict[str, str]]:
    """
    Records grades for an academic year. Each submitted subject grade
    overwrites the stored one; subjects not submitted are left untouched.
    Returns the stored grades of the submitted students.
    """
    snapshot = db.load_snapshot()
    unknown = [sid for sid in grades_for_class if roster_helpers.find_student(snapshot.students, sid) is None]
    if unknown:
        raise ValueError(f"Unknown student ID(s): {', '.join(sorted(unknown))}")

    year_grades = dict(snapshot.grades.get(academic_year, {}))
    for student_id, subject_grades in grades_for_class.items():
        year_grades[student_id] = {**year_grades.get(student_id, {}), **subject_grades}

    new_grades = {**snapshot.grades, academic_year: year_grades}
    db.save_snapshot(snapshot.model_copy(update={"grades": new_grades}))

    logger.info("Saved grades for %d student(s) in academic year %s.", len(grades_for_class), academic_year)
    return {sid: year_grades[sid] for sid in grades_for_class}
