# /gradebook/models/student_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Dict, List

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains fields common to create and read operations.
    """
    id: str = Field(..., pattern=r"^\d{4}$", description="The 4-digit student ID, unique across the whole school.")
    name: str = Field(..., description="The full name of the student.")
    number: int = Field(..., gt=0, description="The student's roll number, unique within a classroom.")

    @field_validator('name')
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Student name must not be blank.')
        return v.strip()


class StudentCreate(StudentBase):
    """The model used for adding a student to a classroom."""
    pass


class Student(StudentBase):
    """
    The full representation of a Student as stored in the roster.

    Instances are frozen: roster edits build new records with `model_copy`
    instead of mutating shared ones.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    retained: bool = Field(default=False, description="Repeat the current grade at the next promotion.")
    transferringOut: bool = Field(
        default=False,
        description="Leave the school at the next promotion. Only honoured for the feeder grade (p6)."
    )


class RetentionUpdate(BaseModel):
    retained: bool


class TransferUpdate(BaseModel):
    transferringOut: bool


# A roster maps grade key -> classroom key -> students sorted by number.
Roster = Dict[str, Dict[str, List[Student]]]
