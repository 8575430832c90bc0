# /gradebook/models/academic_year_model.py

from pydantic import BaseModel, Field
from typing import List


class AcademicYearOptions(BaseModel):
    current: str = Field(..., description="The current academic year in the Buddhist Era.", examples=["2569"])
    options: List[str] = Field(..., description="Selectable academic years, newest first.")
