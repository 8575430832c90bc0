# /gradebook/services/curriculum_service.py

"""
Curriculum catalog administration: reading the catalog and adding, replacing
or deleting subjects in one category of one grade level (and semester, for
secondary grades). Hour totals are recomputed after every edit.
"""

import logging
from typing import Dict, List, Optional

from ..models.curriculum_model import (
    PrimaryGradeData,
    Semester,
    Subject,
    SubjectCategory,
    SubjectCreate,
)
from .curriculum_helpers import catalog
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def get_curriculum(db: DatabaseService) -> Dict[str, catalog.GradeLevelData]:
    """Business logic to fetch the whole curriculum catalog."""
    return db.load_snapshot().curriculum


def get_grade_curriculum(grade_level: str, db: DatabaseService) -> Optional[catalog.GradeLevelData]:
    """Business logic to fetch one grade level's curriculum, or None if it has none."""
    return db.load_snapshot().curriculum.get(grade_level)


def _edit_subject_list(grade_level: str, category: SubjectCategory, semester: Optional[Semester],
                       db: DatabaseService, edit) -> Optional[catalog.GradeLevelData]:
    """
    Loads the target subject list, applies `edit(subjects) -> subjects`, and
    saves the grade level back. Returns None if the grade level does not exist.
    """
    snapshot = db.load_snapshot()
    grade_data = snapshot.curriculum.get(grade_level)
    if grade_data is None:
        return None
    if isinstance(grade_data, PrimaryGradeData):
        semester = None

    subjects: List[Subject] = list(getattr(catalog.subject_lists(grade_data, semester), category.value))
    new_subjects = edit(subjects)
    if new_subjects is None:
        return None

    updated = catalog.with_subject_list(grade_data, semester, category, new_subjects)
    db.save_snapshot(snapshot.model_copy(update={"curriculum": {**snapshot.curriculum, grade_level: updated}}))
    return updated


def add_subject(grade_level: str, category: SubjectCategory, subject: SubjectCreate,
                db: DatabaseService, semester: Optional[Semester] = None) -> Optional[catalog.GradeLevelData]:
    """Business logic to append a subject to one category of a grade level (and semester)."""
    new_subject = Subject(**subject.model_dump())
    result = _edit_subject_list(grade_level, category, semester, db, lambda subjects: subjects + [new_subject])
    if result is not None:
        logger.info("Added subject '%s' to %s %s.", new_subject.name, grade_level, category.value)
    return result


def update_subject(grade_level: str, category: SubjectCategory, index: int, subject: SubjectCreate,
                   db: DatabaseService, semester: Optional[Semester] = None) -> Optional[catalog.GradeLevelData]:
    """Business logic to replace the subject at `index`. Returns None if it does not exist."""
    new_subject = Subject(**subject.model_dump())

    def replace(subjects: List[Subject]) -> Optional[List[Subject]]:
        if not 0 <= index < len(subjects):
            return None
        return subjects[:index] + [new_subject] + subjects[index + 1:]

    return _edit_subject_list(grade_level, category, semester, db, replace)


def delete_subject(grade_level: str, category: SubjectCategory, index: int,
                   db: DatabaseService, semester: Optional[Semester] = None) -> Optional[catalog.GradeLevelData]:
    """Business logic to delete the subject at `index`. Returns None if it does not exist."""
    def remove(subjects: List[Subject]) -> Optional[List[Subject]]:
        if not 0 <= index < len(subjects):
            return None
        return subjects[:index] + subjects[index + 1:]

    result = _edit_subject_list(grade_level, category, semester, db, remove)
    if result is not None:
        logger.info("Deleted subject #%d from %s %s.", index, grade_level, category.value)
    return result
