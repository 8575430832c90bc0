# /gradebook/routers/classes_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.responses import StreamingResponse
from typing import Dict, Optional

from ..models import grade_model, student_model
from ..models.curriculum_model import Semester
from ..services import academic_year_service, class_service, database_service

router = APIRouter()

# --- GRADE SHEET ENDPOINTS (/api/classes/{grade_level}/{room}) ---

@router.get("/{grade_level}/{room}", response_model=grade_model.ClassGradeSheet, summary="Get the Grade Sheet of a Classroom")
def get_class_grade_sheet(
    grade_level: str,
    room: str,
    semester: Optional[Semester] = None,
    academic_year: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    try:
        sheet = class_service.get_class_grade_sheet(
            grade_level=grade_level,
            room=room,
            semester=semester,
            academic_year=academic_year_service.resolve_academic_year(academic_year),
            db=db,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if sheet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No curriculum found for grade level {grade_level}")
    return sheet

@router.post("/{grade_level}/{room}/grades", response_model=Dict[str, grade_model.GradeMap], summary="Save Grades for a Classroom")
def save_class_grades(
    grade_level: str,
    room: str,
    grades: grade_model.ClassGradesUpdate,
    academic_year: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    try:
        return class_service.save_class_grades(
            grades_for_class=grades.root,
            academic_year=academic_year_service.resolve_academic_year(academic_year),
            db=db,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.get("/{grade_level}/{room}/export", summary="Export Classroom Roster as CSV", response_class=StreamingResponse)
def export_class_roster_csv(grade_level: str, room: str, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    try:
        csv_string = class_service.export_roster_as_csv(grade_level=grade_level, room=room, db=db)
        file_name = f"roster_{grade_level}_{room}.csv".replace(' ', '_').lower()
        return StreamingResponse(iter([csv_string]), media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={file_name}"})
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

# --- STUDENT SUB-RESOURCE ENDPOINTS ---

@router.post("/{grade_level}/{room}/students", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Add a Student to a Classroom")
def add_student(grade_level: str, room: str, student_create: student_model.StudentCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    try:
        return class_service.add_student_to_class(grade_level=grade_level, room=room, student_data=student_create, db=db)
    except class_service.DuplicateStudentError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.delete("/{grade_level}/{room}/students/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove a Student from a Classroom")
def remove_student_from_class(
    grade_level: str,
    room: str,
    student_id: str,
    academic_year: Optional[str] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
):
    was_deleted = class_service.remove_student_from_class(
        grade_level=grade_level,
        room=room,
        student_id=student_id,
        academic_year=academic_year_service.resolve_academic_year(academic_year),
        db=db,
    )
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found in {grade_level}/{room}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
