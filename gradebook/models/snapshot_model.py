# /gradebook/models/snapshot_model.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List

from .curriculum_model import GradeLevelData, tag_grade_level_data
from .grade_model import GradeRecord
from .student_model import Student


class GradebookSnapshot(BaseModel):
    """
    The complete persisted state of the grade-book: the roster, the curriculum
    catalog and every recorded grade. Repositories load and save it whole.
    """
    model_config = ConfigDict(frozen=True)

    students: Dict[str, Dict[str, List[Student]]] = Field(default_factory=dict)
    curriculum: Dict[str, GradeLevelData] = Field(default_factory=dict)
    grades: GradeRecord = Field(default_factory=dict)

    @field_validator('curriculum', mode='before')
    @classmethod
    def tag_untagged_grade_levels(cls, v):
        if isinstance(v, dict):
            return {grade: tag_grade_level_data(data) for grade, data in v.items()}
        return v

    @field_validator('grades', mode='before')
    @classmethod
    def grades_are_strings(cls, v):
        # Older stores kept numeric grades as numbers.
        if not isinstance(v, dict):
            return v
        return {
            year: {
                student_id: {code: str(grade) for code, grade in subject_grades.items()}
                for student_id, subject_grades in students.items()
            }
            for year, students in v.items()
        }
