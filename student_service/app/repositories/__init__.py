"""
Store implementations for student records.
"""

from .student_store import InMemoryStudentStore, SqliteStudentStore, StudentStore

__all__ = ["StudentStore", "SqliteStudentStore", "InMemoryStudentStore"]
