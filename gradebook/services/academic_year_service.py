# /gradebook/services/academic_year_service.py

from datetime import date
from typing import List, Optional

from ..core.config import ACADEMIC_YEAR_CHOICES, ACADEMIC_YEAR_OFFSET
from ..models.academic_year_model import AcademicYearOptions


def get_current_academic_year(today: Optional[date] = None) -> str:
    """The current academic year in the Buddhist Era, e.g. 2026 -> '2569'."""
    today = today or date.today()
    return str(today.year + ACADEMIC_YEAR_OFFSET)


def get_academic_year_options(today: Optional[date] = None) -> List[str]:
    """The current academic year and the ones before it, newest first."""
    current = int(get_current_academic_year(today))
    return [str(current - i) for i in range(ACADEMIC_YEAR_CHOICES)]


def get_academic_years(today: Optional[date] = None) -> AcademicYearOptions:
    return AcademicYearOptions(current=get_current_academic_year(today), options=get_academic_year_options(today))


def resolve_academic_year(academic_year: Optional[str]) -> str:
    """Defaults a missing academic year to the current one."""
    return academic_year or get_current_academic_year()
