# /gradebook/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..models import student_model
from ..services import class_service, database_service

router = APIRouter()


@router.patch("/{student_id}/retention", response_model=student_model.Student, summary="Mark a Student to Repeat the Grade")
def update_student_retention(student_id: str, update: student_model.RetentionUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    student = class_service.set_student_retention(student_id=student_id, retained=update.retained, db=db)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return student


@router.patch("/{student_id}/transfer", response_model=student_model.Student, summary="Mark a Student as Transferring Out")
def update_student_transfer(student_id: str, update: student_model.TransferUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    student = class_service.set_student_transfer(student_id=student_id, transferring_out=update.transferringOut, db=db)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return student
