# /gradebook/models/curriculum_model.py

"""
Pydantic models for the curriculum catalog.

A grade level is described by one of two shapes. Primary grades (p1-p6) keep a
single yearly list per subject category, with hours counted per year. Secondary
grades (m1-m3) keep the same three lists once per semester, with hours written
as "credit (hours)". The shapes are an explicit tagged union on `kind`, so
every consumer handles both variants instead of probing for keys.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Core Enumerations ---
class SubjectCategory(str, Enum):
    CORE = "coreSubjects"
    ADDITIONAL = "additionalSubjects"
    DEVELOPMENT = "developmentActivities"


class Semester(str, Enum):
    SEMESTER_1 = "semester1"
    SEMESTER_2 = "semester2"

    @property
    def number(self) -> int:
        return 1 if self is Semester.SEMESTER_1 else 2


class CurriculumKind(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


# --- Subject ---

class Subject(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    code: str = Field(default="", description="Official subject code. May be empty for development activities.")
    name: str = Field(..., min_length=1)
    hours: Union[int, float, str] = Field(
        ...,
        description="Yearly hours (primary) or a 'credit (hours)' string such as '1.5 (60)' (secondary)."
    )

    @field_validator('hours', mode='before')
    @classmethod
    def numeric_strings_become_numbers(cls, v: Any) -> Any:
        # Hours typed into a form arrive as text; a bare number is stored as a number.
        if isinstance(v, str):
            text = v.strip()
            try:
                number = float(text)
            except ValueError:
                return text
            return int(number) if number.is_integer() else number
        return v


class SubjectCreate(BaseModel):
    """Payload for adding or replacing a subject in the catalog."""
    code: str = Field(default="")
    name: str = Field(..., min_length=1)
    hours: Union[int, float, str]

    @field_validator('name')
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Subject name is required.')
        return v.strip()

    @field_validator('hours')
    @classmethod
    def hours_must_not_be_empty(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError('Subject credit/hours is required.')
        if not isinstance(v, str) and v <= 0:
            raise ValueError('Subject hours must be positive.')
        return v


# --- Grade level shapes ---

class PrimaryTotals(BaseModel):
    model_config = ConfigDict(frozen=True)
    core: float = 0
    additional: float = 0
    development: float = 0
    total: float = 0


class PrimaryGradeData(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    kind: Literal["primary"] = "primary"
    title: str
    level: str
    coreSubjects: List[Subject] = Field(default_factory=list)
    additionalSubjects: List[Subject] = Field(default_factory=list)
    developmentActivities: List[Subject] = Field(default_factory=list)
    totals: PrimaryTotals = Field(default_factory=PrimaryTotals)


class SemesterData(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    coreSubjects: List[Subject] = Field(default_factory=list)
    additionalSubjects: List[Subject] = Field(default_factory=list)
    developmentActivities: List[Subject] = Field(default_factory=list)
    totalHours: float = 0


class SemesterSet(BaseModel):
    model_config = ConfigDict(frozen=True)
    semester1: SemesterData = Field(default_factory=SemesterData)
    semester2: SemesterData = Field(default_factory=SemesterData)

    def get(self, semester: Semester) -> SemesterData:
        return getattr(self, semester.value)


class JuniorHighGradeData(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    kind: Literal["secondary"] = "secondary"
    title: str
    level: str
    semesters: SemesterSet = Field(default_factory=SemesterSet)


GradeLevelData = Annotated[Union[PrimaryGradeData, JuniorHighGradeData], Field(discriminator="kind")]

Curriculum = Dict[str, GradeLevelData]


def tag_grade_level_data(raw: Any) -> Any:
    """
    Adds the `kind` tag to an untagged grade-level blob.

    Older stores saved the two shapes without a tag; the shape is recognised
    once here, by the presence of top-level `coreSubjects`, and never again.
    """
    if not isinstance(raw, dict) or "kind" in raw:
        return raw
    kind = CurriculumKind.PRIMARY.value if "coreSubjects" in raw else CurriculumKind.SECONDARY.value
    return {**raw, "kind": kind}
