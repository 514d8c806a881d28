"""
Store implementations for school records.
"""

from .school_store import InMemorySchoolStore, SchoolStore, SqliteSchoolStore

__all__ = ["SchoolStore", "SqliteSchoolStore", "InMemorySchoolStore"]
