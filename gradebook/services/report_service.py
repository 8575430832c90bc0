# /gradebook/services/report_service.py

"""
Assembles a student's report card for one academic year.

The report mirrors the curriculum shape of the student's grade level: a single
yearly body for primary grades, two semester columns plus a yearly GPAX for
secondary grades. All GPA figures come from `gpa_calculator.compute_gpa`.
"""

import re
from typing import List, Mapping, Optional

from ..core.grade_levels import GRADE_LEVEL_LABELS
from ..models import grade_model
from ..models.curriculum_model import (
    JuniorHighGradeData,
    PrimaryGradeData,
    Semester,
    Subject,
)
from .class_helpers import roster as roster_helpers
from .curriculum_helpers.catalog import PRIMARY_PERIOD_NUMBER, activities_with_codes
from .database_service import DatabaseService
from .report_helpers.gpa_calculator import compute_gpa

STUDENT_ID_PATTERN = re.compile(r"[0-9]{4}")

CORE_TITLE = "รายวิชาพื้นฐาน"
ADDITIONAL_TITLE = "รายวิชาเพิ่มเติม"
DEVELOPMENT_TITLE = "กิจกรรมพัฒนาผู้เรียน"
SEMESTER_TITLES = {Semester.SEMESTER_1: "ภาคเรียนที่ 1", Semester.SEMESTER_2: "ภาคเรียนที่ 2"}


def _table(title: str, subjects: List[Subject], grades: Mapping[str, str], unit_label: str,
           total=None, total_label: str = "รวม") -> grade_model.ReportSubjectTable:
    rows = [
        grade_model.ReportSubjectRow(code=s.code, name=s.name, hours=s.hours, grade=grades.get(s.code) or None)
        for s in subjects
    ]
    return grade_model.ReportSubjectTable(
        title=title, unitLabel=unit_label, subjects=rows, total=total, totalLabel=total_label
    )


def build_primary_report(data: PrimaryGradeData, grades: Mapping[str, str]) -> grade_model.PrimaryReportBody:
    """Whole-year report. GPA covers core and additional subjects only."""
    activities = activities_with_codes(data.developmentActivities, PRIMARY_PERIOD_NUMBER)
    tables = [
        _table(CORE_TITLE, data.coreSubjects, grades, "ชม./ปี", total=data.totals.core),
        _table(ADDITIONAL_TITLE, data.additionalSubjects, grades, "ชม./ปี", total=data.totals.additional),
        _table(DEVELOPMENT_TITLE, activities, grades, "ชม./ปี", total=data.totals.development),
    ]
    gpa = compute_gpa(data.coreSubjects + data.additionalSubjects, grades, is_primary=True)
    return grade_model.PrimaryReportBody(tables=tables, totals=data.totals, gpa=gpa)


def build_secondary_report(data: JuniorHighGradeData, grades: Mapping[str, str]) -> grade_model.SecondaryReportBody:
    """Per-semester GPA, plus GPAX over both semesters' core and additional subjects."""
    semesters = []
    all_graded_subjects: List[Subject] = []
    for semester in Semester:
        semester_data = data.semesters.get(semester)
        graded_subjects = semester_data.coreSubjects + semester_data.additionalSubjects
        all_graded_subjects.extend(graded_subjects)

        activities = activities_with_codes(semester_data.developmentActivities, semester.number)
        tables = [
            _table(CORE_TITLE, semester_data.coreSubjects, grades, "หน่วยกิต (ชม.)"),
            _table(ADDITIONAL_TITLE, semester_data.additionalSubjects, grades, "หน่วยกิต (ชม.)"),
            _table(DEVELOPMENT_TITLE, activities, grades, "ชั่วโมง",
                   total=semester_data.totalHours, total_label="รวมเวลาเรียน"),
        ]
        semesters.append(grade_model.SemesterReport(
            semester=semester,
            title=SEMESTER_TITLES[semester],
            tables=tables,
            totalHours=semester_data.totalHours,
            gpa=compute_gpa(graded_subjects, grades, is_primary=False),
        ))

    gpax = compute_gpa(all_graded_subjects, grades, is_primary=False)
    return grade_model.SecondaryReportBody(semesters=semesters, gpax=gpax)


def get_student_report(student_id: str, academic_year: str, db: DatabaseService) -> Optional[grade_model.StudentReport]:
    """
    Looks a student up by ID and builds their report card for `academic_year`.

    Raises ValueError for a malformed ID or a grade level without curriculum.
    Returns None when no student has the ID.
    """
    if not STUDENT_ID_PATTERN.fullmatch(student_id or ""):
        raise ValueError("Student ID must be 4 digits.")

    snapshot = db.load_snapshot()
    location = roster_helpers.find_student(snapshot.students, student_id)
    if location is None:
        return None

    grade_data = snapshot.curriculum.get(location.grade_level)
    if grade_data is None:
        raise ValueError(f"No curriculum found for grade level {location.grade_level}.")

    grades = snapshot.grades.get(academic_year, {}).get(student_id, {})
    if isinstance(grade_data, PrimaryGradeData):
        body = build_primary_report(grade_data, grades)
    else:
        body = build_secondary_report(grade_data, grades)

    return grade_model.StudentReport(
        studentId=location.student.id,
        studentName=location.student.name,
        studentNumber=location.student.number,
        gradeLevel=location.grade_level,
        level=grade_data.level or GRADE_LEVEL_LABELS.get(location.grade_level, location.grade_level),
        room=location.room,
        academicYear=academic_year,
        body=body,
    )
