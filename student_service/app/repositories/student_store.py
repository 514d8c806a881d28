"""
Persistence for student records.

``StudentStore`` defines the operations the service layer relies on.
Two implementations are provided: ``SqliteStudentStore`` keeps the
records in a SQLite table and is used by the running service, while
``InMemoryStudentStore`` keeps them in a dictionary and is handy in
tests.  Both return records in ascending identifier order.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..core.db import get_connection, init_db
from ..core.exceptions import StorageError
from ..schemas.student import StudentCreate, StudentRead


logger = logging.getLogger(__name__)


class StudentStore(ABC):
    """Interface for student persistence."""

    def init_schema(self) -> None:
        """Prepare the backing storage.  Nothing to do by default."""

    @abstractmethod
    def save(self, data: StudentCreate) -> StudentRead:
        """Insert a student and return it with its assigned identifier."""

    @abstractmethod
    def find_by_id(self, student_id: int) -> Optional[StudentRead]:
        """Return the student with ``student_id`` or ``None``."""

    @abstractmethod
    def find_all(self) -> List[StudentRead]:
        """Return every stored student."""

    @abstractmethod
    def find_all_by_school_id(self, school_id: int) -> List[StudentRead]:
        """Return the students whose ``school_id`` equals ``school_id``."""


class SqliteStudentStore(StudentStore):
    """Student store backed by the ``students`` SQLite table.

    A new connection is opened for every operation and closed before
    returning.  Driver errors are logged and re-raised as
    :class:`StorageError`.
    """

    _COLUMNS = "id, firstname, lastname, email, school_id"

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def init_schema(self) -> None:
        try:
            init_db(self.db_path)
        except sqlite3.Error as exc:
            logger.error("Failed to initialise student database %s: %s", self.db_path, exc)
            raise StorageError(f"Cannot initialise student database: {exc}") from exc

    def save(self, data: StudentCreate) -> StudentRead:
        try:
            conn = get_connection(self.db_path)
            try:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    INSERT INTO students (firstname, lastname, email, school_id)
                    VALUES (?, ?, ?, ?)
                    """,
                    (data.firstname, data.lastname, data.email, data.school_id),
                )
                student_id = cursor.lastrowid
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.error("Failed to insert student: %s", exc)
            raise StorageError(f"Cannot save student: {exc}") from exc
        return StudentRead(
            id=student_id,
            firstname=data.firstname,
            lastname=data.lastname,
            email=data.email,
            school_id=data.school_id,
        )

    def find_by_id(self, student_id: int) -> Optional[StudentRead]:
        rows = self._fetch(
            f"SELECT {self._COLUMNS} FROM students WHERE id = ?",
            (student_id,),
        )
        return rows[0] if rows else None

    def find_all(self) -> List[StudentRead]:
        return self._fetch(f"SELECT {self._COLUMNS} FROM students ORDER BY id ASC")

    def find_all_by_school_id(self, school_id: int) -> List[StudentRead]:
        return self._fetch(
            f"SELECT {self._COLUMNS} FROM students WHERE school_id = ? ORDER BY id ASC",
            (school_id,),
        )

    def _fetch(self, query: str, params: tuple = ()) -> List[StudentRead]:
        try:
            conn = get_connection(self.db_path)
            try:
                rows = conn.execute(query, params).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            logger.error("Failed to query students: %s", exc)
            raise StorageError(f"Cannot read students: {exc}") from exc
        return [self._row_to_student(row) for row in rows]

    @staticmethod
    def _row_to_student(row: sqlite3.Row) -> StudentRead:
        return StudentRead(
            id=row["id"],
            firstname=row["firstname"],
            lastname=row["lastname"],
            email=row["email"],
            school_id=row["school_id"],
        )


class InMemoryStudentStore(StudentStore):
    """Student store that keeps records in a dictionary keyed by id."""

    def __init__(self) -> None:
        self._rows: Dict[int, StudentRead] = {}
        self._next_id = 1

    def save(self, data: StudentCreate) -> StudentRead:
        student = StudentRead(id=self._next_id, **data.model_dump())
        self._rows[student.id] = student
        self._next_id += 1
        return student

    def find_by_id(self, student_id: int) -> Optional[StudentRead]:
        return self._rows.get(student_id)

    def find_all(self) -> List[StudentRead]:
        return [self._rows[key] for key in sorted(self._rows)]

    def find_all_by_school_id(self, school_id: int) -> List[StudentRead]:
        return [student for student in self.find_all() if student.school_id == school_id]
