# /gradebook/services/class_service.py

"""
This service module acts as the primary business logic layer for all operations
on classrooms and the students in them.

It serves as a facade, orchestrating calls to lower-level specialist helpers
(`crud` for roster edits, `grade_entry` for the grade sheet) and the
`DatabaseService`. It is the link between the API routers and the data access
layer.
"""

import pandas as pd
from typing import Dict, Optional

from ..models import grade_model, student_model
from ..models.curriculum_model import Semester
from .database_service import DatabaseService

# Import the specialist helper modules this service orchestrates.
from .class_helpers import crud, grade_entry
from .class_helpers import roster as roster_helpers

DuplicateStudentError = crud.DuplicateStudentError


# --- Facade Methods for Roster Operations ---

def add_student_to_class(grade_level: str, room: str, student_data: student_model.StudentCreate, db: DatabaseService) -> student_model.Student:
    """Business logic to add a new student to a classroom, rejecting duplicate IDs and numbers."""
    return crud.add_student_to_class(grade_level=grade_level, room=room, student_data=student_data, db=db)


def remove_student_from_class(grade_level: str, room: str, student_id: str, academic_year: str, db: DatabaseService) -> bool:
    """Business logic to remove a student and their grades for the given academic year."""
    return crud.remove_student_from_class(
        grade_level=grade_level, room=room, student_id=student_id, academic_year=academic_year, db=db
    )


def set_student_retention(student_id: str, retained: bool, db: DatabaseService) -> Optional[student_model.Student]:
    """Business logic to mark or unmark a student to repeat their grade."""
    return crud.set_student_retention(student_id=student_id, retained=retained, db=db)


def set_student_transfer(student_id: str, transferring_out: bool, db: DatabaseService) -> Optional[student_model.Student]:
    """Business logic to mark or unmark a student as transferring out."""
    return crud.set_student_transfer(student_id=student_id, transferring_out=transferring_out, db=db)


# --- Facade Methods for Grade Entry ---

def get_class_grade_sheet(
    grade_level: str,
    room: str,
    semester: Optional[Semester],
    academic_year: str,
    db: DatabaseService,
) -> Optional[grade_model.ClassGradeSheet]:
    """Business logic to assemble the grade-entry sheet for one classroom."""
    return grade_entry.get_class_grade_sheet(
        grade_level=grade_level, room=room, semester=semester, academic_year=academic_year, db=db
    )


def save_class_grades(grades_for_class: Dict[str, Dict[str, str]], academic_year: str, db: DatabaseService) -> Dict[str, Dict[str, str]]:
    """Business logic to record a classroom's grades for an academic year."""
    return grade_entry.save_class_grades(grades_for_class=grades_for_class, academic_year=academic_year, db=db)


# --- Export Logic ---

EXPORT_COLUMNS = ['Number', 'Student ID', 'Student Name', 'Retained', 'Transferring Out', 'Grade Level', 'Room']


def export_roster_as_csv(grade_level: str, room: str, db: DatabaseService) -> str:
    """
    Business logic to generate a CSV export for a single classroom roster.
    """
    snapshot = db.load_snapshot()
    if room not in snapshot.students.get(grade_level, {}):
        raise ValueError(f"Classroom {grade_level}/{room} not found.")

    students_in_class = roster_helpers.get_class_students(snapshot.students, grade_level, room)
    export_data = [
        {
            'Number': s.number,
            'Student ID': s.id,
            'Student Name': s.name,
            'Retained': s.retained,
            'Transferring Out': s.transferringOut,
            'Grade Level': grade_level,
            'Room': room,
        } for s in students_in_class
    ]

    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=EXPORT_COLUMNS)

    return df.to_csv(index=False)
