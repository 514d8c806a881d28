"""
SQLite database integration for the Student Service.

This module provides functions for resolving the database location
(``get_database_path``), opening a connection (``get_connection``)
and creating the ``students`` table on application start
(``init_db``).  The table layout is fixed; there is no migration
history to apply.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are returned unchanged; relative paths are resolved
    against the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects so columns can be
    accessed by name.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: str) -> None:
    """Create the ``students`` table if it does not exist.

    ``school_id`` is a plain integer column: schools live in another
    service's database, so no foreign key can be declared.
    """
    with get_cursor(db_path) as cursor:
        cursor.executescript(
            """
            CREATE TABLE IF NOT EXISTS students (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                firstname TEXT,
                lastname TEXT,
                email TEXT,
                school_id INTEGER
            );

            CREATE INDEX IF NOT EXISTS idx_students_school_id ON students(school_id);
            """
        )
