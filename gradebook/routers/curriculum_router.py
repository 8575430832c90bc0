# /gradebook/routers/curriculum_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from typing import Dict, Optional

from ..models.curriculum_model import GradeLevelData, Semester, SubjectCategory, SubjectCreate
from ..services import curriculum_service, database_service

router = APIRouter()


class SubjectAddRequest(BaseModel):
    category: SubjectCategory
    subject: SubjectCreate


@router.get("", response_model=Dict[str, GradeLevelData], summary="Get the Full Curriculum Catalog")
def get_curriculum(db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    return curriculum_service.get_curriculum(db=db)


@router.get("/{grade_level}", response_model=GradeLevelData, summary="Get the Curriculum of a Grade Level")
def get_grade_curriculum(grade_level: str, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    grade_data = curriculum_service.get_grade_curriculum(grade_level=grade_level, db=db)
    if grade_data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No curriculum found for grade level {grade_level}")
    return grade_data


@router.post("/{grade_level}/subjects", response_model=GradeLevelData, status_code=status.HTTP_201_CREATED, summary="Add a Subject")
def add_subject(grade_level: str, request: SubjectAddRequest, semester: Optional[Semester] = None,
                db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    try:
        updated = curriculum_service.add_subject(
            grade_level=grade_level, category=request.category, subject=request.subject, db=db, semester=semester
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No curriculum found for grade level {grade_level}")
    return updated


@router.put("/{grade_level}/subjects/{category}/{index}", response_model=GradeLevelData, summary="Replace a Subject")
def update_subject(grade_level: str, category: SubjectCategory, index: int, subject: SubjectCreate,
                   semester: Optional[Semester] = None,
                   db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    try:
        updated = curriculum_service.update_subject(
            grade_level=grade_level, category=category, index=index, subject=subject, db=db, semester=semester
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Subject #{index} not found in {grade_level} {category.value}")
    return updated


@router.delete("/{grade_level}/subjects/{category}/{index}", response_model=GradeLevelData, summary="Delete a Subject")
def delete_subject(grade_level: str, category: SubjectCategory, index: int, semester: Optional[Semester] = None,
                   db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    try:
        updated = curriculum_service.delete_subject(
            grade_level=grade_level, category=category, index=index, db=db, semester=semester
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Subject #{index} not found in {grade_level} {category.value}")
    return updated
