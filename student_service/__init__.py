"""
Top‑level package for the Student Service.

The service owns the student records and exposes them over HTTP,
including the lookup by school that the School Service calls when
it assembles a school together with its students.  All functionality
lives in submodules under ``app``.
"""

__all__ = []
