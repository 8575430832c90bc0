# /gradebook/routers/admin_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..services import promotion_service, academic_year_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.promotion_model import PromotionSummary
from ..models.academic_year_model import AcademicYearOptions

router = APIRouter()


@router.post(
    "/promotion",
    response_model=PromotionSummary,
    summary="Run Year-End Promotion",
    description=(
        "Advances every student to the next grade level, keeps retained students in place, "
        "and removes graduating m3 students and p6 students transferring out. This cannot be undone."
    )
)
def run_year_end_promotion(db: DatabaseService = Depends(get_db_service)):
    return promotion_service.run_year_end_promotion(db=db)


@router.get("/academic-years", response_model=AcademicYearOptions, summary="Get Selectable Academic Years")
def get_academic_years():
    return academic_year_service.get_academic_years()
