# /gradebook/models/promotion_model.py

from pydantic import BaseModel, Field
from typing import List


class NumberConflict(BaseModel):
    """Two or more students who ended up with the same roll number in one classroom."""
    gradeLevel: str
    room: str
    number: int
    studentIds: List[str]


class PromotionSummary(BaseModel):
    """
    Defines the data contract for the response of the year-end promotion endpoint.
    """
    promoted: int = Field(..., description="Students moved into their next grade level.")
    retained: int = Field(..., description="Students repeating their current grade level.")
    graduated: int = Field(..., description="Students who completed the terminal grade (m3).")
    transferredOut: int = Field(..., description="Feeder-grade (p6) students who left the school.")
    studentsBefore: int
    studentsAfter: int
    numberConflicts: List[NumberConflict] = Field(
        default_factory=list,
        description="Classrooms where a retained student and a promoted student share a roll number. "
                    "Both are kept; an administrator renumbers one of them."
    )
