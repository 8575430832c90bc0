# /tests/test_database_service.py

import json

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from gradebook.db.base import Base
from gradebook.db.models.store_models import StoreEntry
from gradebook.models.curriculum_model import JuniorHighGradeData, PrimaryGradeData
from gradebook.models.student_model import Student
from gradebook.services.database_service import DatabaseService
from gradebook.services.database_helpers.snapshot_repository_json import SnapshotRepositoryJSON
from gradebook.services.database_helpers.snapshot_repository_sql import SnapshotRepositorySQL


# --- Test Data Fixtures ---

@pytest.fixture
def sql_session(tmp_path):
    """A throwaway SQLite database with the store table created."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()


def _with_extra_student(snapshot):
    students = {**snapshot.students, "p1": {**snapshot.students["p1"], "2": [Student(id="4001", name="Mali", number=1)]}}
    return snapshot.model_copy(update={"students": students, "grades": {"2568": {"4001": {"ท11101": "3.5"}}}})


# --- JSON-file store ---

def test_empty_json_store_loads_seed_data(db_service):
    snapshot = db_service.load_snapshot()

    assert len(snapshot.curriculum) == 9
    assert [s.id for s in snapshot.students["p1"]["1"]] == ["1001", "1002"]
    assert snapshot.grades == {}


def test_json_store_roundtrip(db_service, data_dir):
    db_service.save_snapshot(_with_extra_student(db_service.load_snapshot()))

    assert sorted(p.name for p in data_dir.iterdir()) == ["allGrades.json", "curriculumData.json", "studentsData.json"]

    reloaded = DatabaseService(repository=SnapshotRepositoryJSON(str(data_dir))).load_snapshot()
    assert reloaded.students["p1"]["2"][0].name == "Mali"
    assert reloaded.grades["2568"]["4001"] == {"ท11101": "3.5"}
    assert isinstance(reloaded.curriculum["m2"], JuniorHighGradeData)


def test_malformed_blob_falls_back_without_losing_the_others(db_service, data_dir):
    db_service.save_snapshot(_with_extra_student(db_service.load_snapshot()))
    (data_dir / "studentsData.json").write_text("{not json", encoding="utf-8")

    snapshot = db_service.load_snapshot()

    assert "2" not in snapshot.students["p1"]
    assert snapshot.grades["2568"]["4001"] == {"ท11101": "3.5"}


def test_invalid_blob_shape_falls_back_to_seed(db_service, data_dir):
    data_dir.mkdir(parents=True)
    (data_dir / "studentsData.json").write_text(json.dumps({"p1": {"1": [{"id": "x"}]}}), encoding="utf-8")

    snapshot = db_service.load_snapshot()
    assert [s.id for s in snapshot.students["p1"]["1"]] == ["1001", "1002"]


def test_legacy_untagged_curriculum_and_numeric_grades(db_service, data_dir):
    data_dir.mkdir(parents=True)
    legacy = {
        "p1": {"title": "t", "level": "ป.1", "coreSubjects": [{"code": "ท11101", "name": "ภาษาไทย", "hours": 200}]},
        "m1": {"title": "t", "level": "ม.1", "semesters": {"semester1": {"coreSubjects": []}}},
    }
    (data_dir / "curriculumData.json").write_text(json.dumps(legacy), encoding="utf-8")
    (data_dir / "allGrades.json").write_text(json.dumps({"2568": {"1001": {"ท11101": 4}}}), encoding="utf-8")

    snapshot = db_service.load_snapshot()

    assert isinstance(snapshot.curriculum["p1"], PrimaryGradeData)
    assert isinstance(snapshot.curriculum["m1"], JuniorHighGradeData)
    assert snapshot.grades["2568"]["1001"]["ท11101"] == "4"


# --- SQL store ---

def test_sql_store_roundtrip(sql_session):
    service = DatabaseService(repository=SnapshotRepositorySQL(sql_session))

    # Nothing stored yet: seed data.
    snapshot = service.load_snapshot()
    assert len(snapshot.students) == 9

    assert service.save_snapshot(_with_extra_student(snapshot)) is True
    assert sql_session.query(StoreEntry).count() == 3

    reloaded = service.load_snapshot()
    assert reloaded.students["p1"]["2"][0].id == "4001"
    assert reloaded.grades["2568"]["4001"]["ท11101"] == "3.5"

    # Saving again updates rows in place.
    service.save_snapshot(reloaded.model_copy(update={"grades": {}}))
    assert sql_session.query(StoreEntry).count() == 3
    assert service.load_snapshot().grades == {}


def test_sql_mode_requires_a_session(mocker):
    mocker.patch("gradebook.services.database_service.USE_SQL_STORE", True)
    with pytest.raises(ValueError):
        DatabaseService()
    assert isinstance(DatabaseService(db_session=mocker.MagicMock()).snapshot_repo, SnapshotRepositorySQL)
