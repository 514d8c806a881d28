"""
Pydantic schema definitions for Student Service payloads.
"""
