# /gradebook/services/database_helpers/snapshot_repository_sql.py

"""
This module contains the SQLAlchemy queries for the `gradebook_store` table.
Each of the three snapshot blobs is one row, keyed by its blob name.
"""

from typing import Any, Dict, Optional
from sqlalchemy.orm import Session

from gradebook.db.models.store_models import StoreEntry
from .base_repository import BaseSnapshotRepository


class SnapshotRepositorySQL(BaseSnapshotRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def _read_blob(self, key: str) -> Optional[Any]:
        entry = self.db.query(StoreEntry).filter(StoreEntry.key == key).first()
        return entry.value if entry else None

    def _write_blobs(self, blobs: Dict[str, Any]) -> None:
        for key, value in blobs.items():
            entry = self.db.query(StoreEntry).filter(StoreEntry.key == key).first()
            if entry:
                entry.value = value
            else:
                self.db.add(StoreEntry(key=key, value=value))
        # All three blobs are committed together so a snapshot is never half-saved.
        self.db.commit()
