"""
Pydantic schema definitions for School Service payloads.

``student`` mirrors the record served by the Student Service; it is
only ever decoded from remote responses, never stored here.
"""
