# /gradebook/services/database_service.py

from typing import Generator, Optional
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from gradebook.core.config import USE_SQL_STORE
from gradebook.db.database import get_db

# --- Repository Imports ---
from .database_helpers.base_repository import BaseSnapshotRepository
from .database_helpers.snapshot_repository_sql import SnapshotRepositorySQL
from .database_helpers.snapshot_repository_json import SnapshotRepositoryJSON
from ..models.snapshot_model import GradebookSnapshot


class DatabaseService:
    def __init__(self, db_session: Optional[Session] = None, repository: Optional[BaseSnapshotRepository] = None):
        """
        Initializes the DatabaseService.
        An explicit repository wins. Otherwise, if USE_SQL_STORE is true, it
        requires a db_session; if not, it falls back to the JSON-file store.
        """
        if repository is not None:
            self.snapshot_repo = repository
        elif USE_SQL_STORE:
            if not db_session:
                raise ValueError("A database session is required when USE_SQL_STORE is true.")
            self.snapshot_repo = SnapshotRepositorySQL(db_session)
        else:
            self.snapshot_repo = SnapshotRepositoryJSON()

    # --- SNAPSHOT METHODS (DELEGATED) ---
    def load_snapshot(self) -> GradebookSnapshot: return self.snapshot_repo.load()
    def save_snapshot(self, snapshot: GradebookSnapshot) -> bool: return self.snapshot_repo.save(snapshot)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService instance.
    It decides whether to use the SQL store or the JSON files.
    """
    yield DatabaseService(db_session=db if USE_SQL_STORE else None)
