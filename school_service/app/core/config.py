"""
Configuration for the School Service.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults suitable for running both
services on one machine.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_float(value: Optional[str]) -> Optional[float]:
    return float(value) if value else None


@dataclass
class Settings:
    """School Service settings loaded from environment variables."""

    project_name: str = "School Service"
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("SCHOOL_DATABASE_URL", "school.db")

    host: str = os.getenv("SCHOOL_HOST", "0.0.0.0")
    port: int = int(os.getenv("SCHOOL_PORT", "8070"))

    # Base URL of the Student Service's student resource.  The lookup
    # by school is requested at ``{students_url}/school/{id}``.
    students_url: str = os.getenv("STUDENTS_URL", "http://localhost:8090/api/v1/students")

    # Seconds to wait for the Student Service.  Unset means wait
    # indefinitely.
    students_timeout: Optional[float] = _optional_float(os.getenv("STUDENTS_TIMEOUT"))


# Environment variables must be set before importing this module.
settings = Settings()
