"""
Pydantic schemas for student records.

``StudentCreate`` is the request body for creating a student and
``StudentRead`` is the stored record returned by the list endpoints.
The school reference travels as ``schoolId`` on the wire; both
models also accept ``school_id`` when populated from Python code.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StudentBase(BaseModel):
    firstname: Optional[str] = Field(None, examples=["Ada"])
    lastname: Optional[str] = Field(None, examples=["Lovelace"])
    email: Optional[str] = Field(None, examples=["ada@example.com"])
    school_id: Optional[int] = Field(None, alias="schoolId", examples=[1])

    model_config = ConfigDict(populate_by_name=True)


class StudentCreate(StudentBase):
    """Schema for creating a student.

    A client-supplied ``id`` is accepted and ignored; the store
    assigns the identifier.
    """

    id: Optional[int] = Field(None, exclude=True)


class StudentRead(StudentBase):
    """Schema for reading a student from the API."""

    id: int

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
