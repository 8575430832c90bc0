# /gradebook/services/database_helpers/base_repository.py

"""
Shared load/save logic for the snapshot repositories.

A snapshot is stored as three independent JSON blobs. Subclasses only know how
to read and write a blob by key; this base class turns blobs into a validated
`GradebookSnapshot` and back, and falls back to seed data whenever a blob is
missing or unreadable so one damaged blob never takes the others down with it.
"""

import logging
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from ...models.snapshot_model import GradebookSnapshot
from .. import seed_data

logger = logging.getLogger(__name__)

STUDENTS_KEY = "studentsData"
CURRICULUM_KEY = "curriculumData"
GRADES_KEY = "allGrades"

# blob key -> (snapshot field, default when missing or unreadable)
BLOB_FIELDS: Dict[str, tuple] = {
    STUDENTS_KEY: ("students", seed_data.initial_students),
    CURRICULUM_KEY: ("curriculum", seed_data.initial_curriculum),
    GRADES_KEY: ("grades", dict),
}


class BaseSnapshotRepository:
    def _read_blob(self, key: str) -> Optional[Any]:
        """Returns the decoded blob, or None if it was never written."""
        raise NotImplementedError

    def _write_blobs(self, blobs: Dict[str, Any]) -> None:
        raise NotImplementedError

    def _load_field(self, key: str, field: str, default_factory: Callable[[], Any]) -> Any:
        try:
            raw = self._read_blob(key)
        except ValueError as e:
            logger.error("Error loading %s from the store: %s", key, e)
            raw = None

        if raw is None:
            raw = default_factory()

        try:
            return getattr(GradebookSnapshot.model_validate({field: raw}), field)
        except ValidationError as e:
            logger.error("Stored %s is malformed, falling back to defaults: %s", key, e)
            return getattr(GradebookSnapshot.model_validate({field: default_factory()}), field)

    def load(self) -> GradebookSnapshot:
        fields = {
            field: self._load_field(key, field, default_factory)
            for key, (field, default_factory) in BLOB_FIELDS.items()
        }
        return GradebookSnapshot(**fields)

    def save(self, snapshot: GradebookSnapshot) -> bool:
        dumped = snapshot.model_dump(mode="json")
        self._write_blobs({key: dumped[field] for key, (field, _) in BLOB_FIELDS.items()})
        return True
