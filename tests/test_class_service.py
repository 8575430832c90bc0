# /tests/test_class_service.py

import pytest
from pydantic import ValidationError

from gradebook.models.curriculum_model import Semester
from gradebook.models.grade_model import ClassGradesUpdate
from gradebook.models.student_model import StudentCreate
from gradebook.services import class_service

YEAR = "2568"


# --- Adding students ---

def test_add_student_keeps_class_sorted_by_number(db_service):
    class_service.add_student_to_class("p1", "1", StudentCreate(id="2001", name="เด็กหญิงมะลิ สวยงาม", number=3), db_service)
    class_service.add_student_to_class("p1", "1", StudentCreate(id="2002", name="เด็กชายต้นกล้า ดีงาม", number=4), db_service)

    students = db_service.load_snapshot().students["p1"]["1"]
    assert [s.number for s in students] == [1, 2, 3, 4]
    assert students[2].id == "2001"
    assert students[2].retained is False


def test_add_student_creates_missing_classroom(db_service):
    class_service.add_student_to_class("p3", "2", StudentCreate(id="2003", name="Somchai", number=1), db_service)
    assert [s.id for s in db_service.load_snapshot().students["p3"]["2"]] == ["2003"]


def test_duplicate_student_id_is_rejected_school_wide(db_service):
    # 1015 is a seed m2 student.
    with pytest.raises(class_service.DuplicateStudentError):
        class_service.add_student_to_class("p1", "1", StudentCreate(id="1015", name="Somchai", number=9), db_service)


def test_duplicate_number_is_rejected_within_class(db_service):
    with pytest.raises(class_service.DuplicateStudentError):
        class_service.add_student_to_class("p1", "1", StudentCreate(id="2004", name="Somchai", number=2), db_service)
    # The same number is fine in another classroom.
    class_service.add_student_to_class("p1", "2", StudentCreate(id="2004", name="Somchai", number=2), db_service)


def test_unknown_grade_level_is_rejected(db_service):
    with pytest.raises(ValueError):
        class_service.add_student_to_class("k1", "1", StudentCreate(id="2005", name="Somchai", number=1), db_service)


@pytest.mark.parametrize("payload", [
    {"id": "123", "name": "Somchai", "number": 1},
    {"id": "12a4", "name": "Somchai", "number": 1},
    {"id": "1234", "name": "   ", "number": 1},
    {"id": "1234", "name": "Somchai", "number": 0},
])
def test_student_create_validation(payload):
    with pytest.raises(ValidationError):
        StudentCreate(**payload)


# --- Removing students ---

def test_remove_student_cascades_grades_for_that_year_only(db_service):
    class_service.save_class_grades({"1001": {"ท11101": "4"}, "1002": {"ท11101": "3"}}, YEAR, db_service)
    class_service.save_class_grades({"1001": {"ท11101": "2"}}, "2567", db_service)

    assert class_service.remove_student_from_class("p1", "1", "1001", YEAR, db_service) is True

    snapshot = db_service.load_snapshot()
    assert [s.id for s in snapshot.students["p1"]["1"]] == ["1002"]
    assert "1001" not in snapshot.grades[YEAR]
    assert snapshot.grades[YEAR]["1002"] == {"ท11101": "3"}
    assert snapshot.grades["2567"]["1001"] == {"ท11101": "2"}


def test_remove_student_from_wrong_class_returns_false(db_service):
    assert class_service.remove_student_from_class("p2", "1", "1001", YEAR, db_service) is False


# --- Flags ---

def test_toggle_retention_and_transfer(db_service):
    student = class_service.set_student_retention("1011", True, db_service)
    assert student.retained is True

    student = class_service.set_student_transfer("1011", True, db_service)
    assert student.retained is True
    assert student.transferringOut is True

    stored = next(s for s in db_service.load_snapshot().students["p6"]["1"] if s.id == "1011")
    assert stored.retained and stored.transferringOut


def test_toggle_unknown_student_returns_none(db_service):
    assert class_service.set_student_retention("9999", True, db_service) is None
    assert class_service.set_student_transfer("9999", True, db_service) is None


# --- Grade entry ---

def test_secondary_grade_sheet_uses_synthesized_activity_codes(db_service):
    sheet = class_service.get_class_grade_sheet("m1", "1", Semester.SEMESTER_2, YEAR, db_service)

    activity_codes = [s.code for s in sheet.subjects if s.isActivity]
    assert "ลูกเสือ-เนตรนารี-2" in activity_codes
    assert all(s.gradeOptions == ["ผ่าน", "ไม่ผ่าน"] for s in sheet.subjects if s.isActivity)
    assert "ท21102" in [s.code for s in sheet.subjects if not s.isActivity]
    assert [s.id for s in sheet.students] == ["1013", "1014"]


def test_activity_grade_written_through_sheet_is_read_back(db_service):
    sheet = class_service.get_class_grade_sheet("m1", "1", Semester.SEMESTER_2, YEAR, db_service)
    scout_code = next(s.code for s in sheet.subjects if s.name == "ลูกเสือ-เนตรนารี")

    class_service.save_class_grades({"1013": {scout_code: "ผ่าน"}}, YEAR, db_service)

    reread = class_service.get_class_grade_sheet("m1", "1", Semester.SEMESTER_2, YEAR, db_service)
    assert reread.grades["1013"][scout_code] == "ผ่าน"


def test_secondary_grade_sheet_requires_semester(db_service):
    with pytest.raises(ValueError):
        class_service.get_class_grade_sheet("m2", "1", None, YEAR, db_service)


def test_primary_grade_sheet_ignores_semester(db_service):
    sheet = class_service.get_class_grade_sheet("p4", "1", Semester.SEMESTER_1, YEAR, db_service)
    assert sheet.semester is None
    assert sheet.subjects[0].code == "ท14101"


def test_grade_sheet_without_curriculum_returns_none(db_service):
    assert class_service.get_class_grade_sheet("k1", "1", None, YEAR, db_service) is None


def test_save_grades_merges_per_subject(db_service):
    class_service.save_class_grades({"1013": {"ท21101": "4"}}, YEAR, db_service)
    stored = class_service.save_class_grades({"1013": {"ท21102": "3.5"}}, YEAR, db_service)
    assert stored["1013"] == {"ท21101": "4", "ท21102": "3.5"}


def test_save_grades_for_unknown_student_is_rejected(db_service):
    with pytest.raises(ValueError):
        class_service.save_class_grades({"9999": {"ท21101": "4"}}, YEAR, db_service)


def test_grade_payload_normalises_numbers_and_rejects_unknown_tokens():
    update = ClassGradesUpdate.model_validate({"1013": {"ท21101": 4, "ท21102": 3.5, "x": "ผ่าน"}})
    assert update.root == {"1013": {"ท21101": "4", "ท21102": "3.5", "x": "ผ่าน"}}

    with pytest.raises(ValidationError):
        ClassGradesUpdate.model_validate({"1013": {"ท21101": "A+"}})


# --- Export ---

def test_export_roster_as_csv(db_service):
    csv_string = class_service.export_roster_as_csv("p1", "1", db_service)
    lines = csv_string.strip().splitlines()
    assert lines[0] == "Number,Student ID,Student Name,Retained,Transferring Out,Grade Level,Room"
    assert lines[1].startswith("1,1001,")
    assert len(lines) == 3


def test_export_unknown_classroom_raises(db_service):
    with pytest.raises(ValueError):
        class_service.export_roster_as_csv("p1", "9", db_service)
