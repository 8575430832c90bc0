# /gradebook/models/grade_model.py

from pydantic import BaseModel, Field, RootModel, field_validator
from typing import Dict, List, Literal, Optional, Union

from ..core.grade_levels import NUMERIC_GRADE_OPTIONS, ACTIVITY_GRADE_OPTIONS
from .curriculum_model import PrimaryTotals, Semester
from .student_model import Student

# subject code -> recorded grade ("3.5", "ผ่าน", ...)
GradeMap = Dict[str, str]

# academic year -> student id -> subject code -> grade
GradeRecord = Dict[str, Dict[str, GradeMap]]

ALLOWED_GRADE_VALUES = set(NUMERIC_GRADE_OPTIONS) | set(ACTIVITY_GRADE_OPTIONS) | {""}


# --- Grade entry (write path) ---

class ClassGradesUpdate(RootModel[Dict[str, Dict[str, Union[str, int, float]]]]):
    """
    The grades submitted for one classroom: student id -> subject code -> grade.
    Numbers are normalised to their string form ("4", "3.5").
    """

    @field_validator('root')
    @classmethod
    def grades_must_be_known_tokens(cls, v):
        normalised: Dict[str, Dict[str, str]] = {}
        for student_id, subject_grades in v.items():
            normalised[student_id] = {}
            for code, grade in subject_grades.items():
                text = grade if isinstance(grade, str) else format(grade, "g")
                text = text.strip()
                if text not in ALLOWED_GRADE_VALUES:
                    raise ValueError(f"Grade '{grade}' for subject '{code}' is not a recognised grade.")
                normalised[student_id][code] = text
        return normalised


class GradeSheetSubject(BaseModel):
    code: str = Field(..., description="The key grades are stored under. Synthesized for codeless activities.")
    name: str
    hours: Union[int, float, str]
    category: str
    isActivity: bool
    gradeOptions: List[str]


class ClassGradeSheet(BaseModel):
    """Everything the grade-entry screen needs for one classroom."""
    gradeLevel: str
    room: str
    level: str
    semester: Optional[Semester] = None
    academicYear: str
    students: List[Student]
    subjects: List[GradeSheetSubject]
    grades: Dict[str, GradeMap]


# --- Report card (read path) ---

class ReportSubjectRow(BaseModel):
    code: str
    name: str
    hours: Union[int, float, str]
    grade: Optional[str] = None


class ReportSubjectTable(BaseModel):
    title: str
    unitLabel: str
    subjects: List[ReportSubjectRow]
    total: Optional[Union[int, float, str]] = None
    totalLabel: str = "รวม"


class PrimaryReportBody(BaseModel):
    kind: Literal["primary"] = "primary"
    tables: List[ReportSubjectTable]
    totals: PrimaryTotals
    gpa: str


class SemesterReport(BaseModel):
    semester: Semester
    title: str
    tables: List[ReportSubjectTable]
    totalHours: float
    gpa: str


class SecondaryReportBody(BaseModel):
    kind: Literal["secondary"] = "secondary"
    semesters: List[SemesterReport]
    gpax: str


class StudentReport(BaseModel):
    studentId: str
    studentName: str
    studentNumber: int
    gradeLevel: str
    level: str
    room: str
    academicYear: str
    body: Union[PrimaryReportBody, SecondaryReportBody] = Field(..., discriminator="kind")
