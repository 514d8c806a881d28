"""
Top‑level package for the School Service.

The service owns the school records and builds the combined view of
a school and its students by calling the Student Service.  All
functionality lives in submodules under ``app``.
"""

__all__ = []
