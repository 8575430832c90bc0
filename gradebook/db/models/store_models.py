# /gradebook/db/models/store_models.py

"""
The grade-book is persisted as a small key/value store: one row per blob
(`studentsData`, `curriculumData`, `allGrades`), each holding a JSON document.
"""

from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func

from ..base_class import Base


class StoreEntry(Base):
    __tablename__ = "gradebook_store"

    key = Column(String, primary_key=True, index=True)
    value = Column(JSON, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
