"""
Clients for the services the School Service depends on.
"""

from .student_client import HttpStudentClient, StudentClient

__all__ = ["StudentClient", "HttpStudentClient"]
