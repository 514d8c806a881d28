"""
Persistence for school records.

``SchoolStore`` is the interface the service layer relies on.
``SqliteSchoolStore`` stores schools in the ``schools`` table;
``InMemorySchoolStore`` keeps them in a dictionary.  Both return
records in ascending identifier order.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..core.db import get_connection, init_db
from ..core.exceptions import StorageError
from ..schemas.school import SchoolCreate, SchoolRead


logger = logging.getLogger(__name__)


class SchoolStore(ABC):
    """Interface for school persistence."""

    def init_schema(self) -> None:
        """Prepare the backing storage.  Nothing to do by default."""

    @abstractmethod
    def save(self, data: SchoolCreate) -> SchoolRead:
        """Insert a school and return it with its assigned identifier."""

    @abstractmethod
    def find_by_id(self, school_id: int) -> Optional[SchoolRead]:
        """Return the school with ``school_id`` or ``None``."""

    @abstractmethod
    def find_all(self) -> List[SchoolRead]:
        """Return every stored school."""


class SqliteSchoolStore(SchoolStore):
    """School store backed by the ``schools`` SQLite table.

    Each operation opens its own connection.  Driver errors are logged
    and re-raised as :class:`StorageError`.
    """

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def init_schema(self) -> None:
        try:
            init_db(self.db_path)
        except sqlite3.Error as exc:
            logger.error("Failed to initialise school database %s: %s", self.db_path, exc)
            raise StorageError(f"Cannot initialise school database: {exc}") from exc

    def save(self, data: SchoolCreate) -> SchoolRead:
        try:
            conn = get_connection(self.db_path)
            try:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO schools (name, email) VALUES (?, ?)",
                    (data.name, data.email),
                )
                school_id = cursor.lastrowid
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.error("Failed to insert school: %s", exc)
            raise StorageError(f"Cannot save school: {exc}") from exc
        return SchoolRead(id=school_id, name=data.name, email=data.email)

    def find_by_id(self, school_id: int) -> Optional[SchoolRead]:
        rows = self._fetch("SELECT id, name, email FROM schools WHERE id = ?", (school_id,))
        return rows[0] if rows else None

    def find_all(self) -> List[SchoolRead]:
        return self._fetch("SELECT id, name, email FROM schools ORDER BY id ASC")

    def _fetch(self, query: str, params: tuple = ()) -> List[SchoolRead]:
        try:
            conn = get_connection(self.db_path)
            try:
                rows = conn.execute(query, params).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.error("Failed to query schools: %s", exc)
            raise StorageError(f"Cannot read schools: {exc}") from exc
        return [SchoolRead(id=row["id"], name=row["name"], email=row["email"]) for row in rows]


class InMemorySchoolStore(SchoolStore):
    """School store that keeps records in a dictionary keyed by id."""

    def __init__(self) -> None:
        self._rows: Dict[int, SchoolRead] = {}
        self._next_id = 1

    def save(self, data: SchoolCreate) -> SchoolRead:
        school = SchoolRead(id=self._next_id, name=data.name, email=data.email)
        self._rows[school.id] = school
        self._next_id += 1
        return school

    def find_by_id(self, school_id: int) -> Optional[SchoolRead]:
        return self._rows.get(school_id)

    def find_all(self) -> List[SchoolRead]:
        return [self._rows[key] for key in sorted(self._rows)]
