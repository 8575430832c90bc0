# /tests/conftest.py

"""
Shared fixtures: a DatabaseService backed by a JSON-file store in a temporary
directory, so every test starts from the seed data and never touches the
developer's own store.
"""

import pytest

from gradebook.services.database_service import DatabaseService
from gradebook.services.database_helpers.snapshot_repository_json import SnapshotRepositoryJSON


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def db_service(data_dir):
    """A NEW, CLEAN DatabaseService for EACH test function."""
    return DatabaseService(repository=SnapshotRepositoryJSON(str(data_dir)))
