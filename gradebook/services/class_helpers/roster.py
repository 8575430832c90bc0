# /gradebook/services/class_helpers/roster.py

"""
Pure helpers over a roster (grade -> classroom -> students).

None of these functions modify their input. Each edit copies only the grade
and classroom it touches and shares everything else, so a previously loaded
snapshot is never changed behind its owner's back.
"""

from typing import Callable, List, NamedTuple, Optional

from ...models.student_model import Roster, Student


class StudentLocation(NamedTuple):
    student: Student
    grade_level: str
    room: str


def find_student(roster: Roster, student_id: str) -> Optional[StudentLocation]:
    """Finds a student anywhere in the school by their 4-digit ID."""
    for grade_level, rooms in roster.items():
        for room, students in rooms.items():
            for student in students:
                if student.id == student_id:
                    return StudentLocation(student, grade_level, room)
    return None


def get_class_students(roster: Roster, grade_level: str, room: str) -> List[Student]:
    return list(roster.get(grade_level, {}).get(room, []))


def _with_class(roster: Roster, grade_level: str, room: str, students: List[Student]) -> Roster:
    rooms = dict(roster.get(grade_level, {}))
    rooms[room] = sorted(students, key=lambda s: s.number)
    return {**roster, grade_level: rooms}


def with_student_added(roster: Roster, grade_level: str, room: str, student: Student) -> Roster:
    """Adds a student, creating the grade/classroom cell if needed."""
    return _with_class(roster, grade_level, room, get_class_students(roster, grade_level, room) + [student])


def without_student(roster: Roster, grade_level: str, room: str, student_id: str) -> Roster:
    students = [s for s in get_class_students(roster, grade_level, room) if s.id != student_id]
    return _with_class(roster, grade_level, room, students)


def with_student_updated(roster: Roster, student_id: str, update: Callable[[Student], Student]) -> Optional[Roster]:
    """Replaces one student with `update(student)`. Returns None if the ID is unknown."""
    location = find_student(roster, student_id)
    if location is None:
        return None
    students = [
        update(s) if s.id == student_id else s
        for s in get_class_students(roster, location.grade_level, location.room)
    ]
    return _with_class(roster, location.grade_level, location.room, students)
