# /gradebook/services/database_helpers/snapshot_repository_json.py

import json
import os
from typing import Any, Dict, Optional

from gradebook.core.config import GRADEBOOK_DATA_DIR
from .base_repository import BaseSnapshotRepository


class SnapshotRepositoryJSON(BaseSnapshotRepository):
    """File-based store for local development: one JSON file per blob."""

    def __init__(self, data_dir: str = GRADEBOOK_DATA_DIR):
        self.data_dir = data_dir

    def _path(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{key}.json")

    def _read_blob(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path} is not valid JSON: {e}") from e

    def _write_blobs(self, blobs: Dict[str, Any]) -> None:
        os.makedirs(self.data_dir, exist_ok=True)
        for key, value in blobs.items():
            path = self._path(key)
            tmp_path = f"{path}.tmp"
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, path)
