# /gradebook/routers/reports_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Optional

# --- Service and Model Imports ---
from ..models.grade_model import StudentReport
from ..services import academic_year_service, report_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/{student_id}",
    response_model=StudentReport,
    summary="Get a Student's Report Card",
    description="Looks a student up by their 4-digit ID and returns their grades and GPA for an academic year."
)
def get_student_report(student_id: str, academic_year: Optional[str] = None, db: DatabaseService = Depends(get_db_service)):
    try:
        report = report_service.get_student_report(
            student_id=student_id,
            academic_year=academic_year_service.resolve_academic_year(academic_year),
            db=db,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if report is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No student found with ID {student_id}")
    return report
