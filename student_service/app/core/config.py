"""
Configuration for the Student Service.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can be started locally without any setup; in a deployment
override them via the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Student Service settings loaded from environment variables."""

    project_name: str = "Student Service"
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("STUDENT_DATABASE_URL", "student.db")

    host: str = os.getenv("STUDENT_HOST", "0.0.0.0")
    port: int = int(os.getenv("STUDENT_PORT", "8090"))


# Environment variables must be set before importing this module.
settings = Settings()
