"""
Pydantic models for school data.

``SchoolCreate`` is the body of the create request, ``SchoolRead``
a stored record, and ``SchoolWithStudents`` the combined view of a
school and the students the Student Service reports for it.  The
combined view is built per request and never stored.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .student import Student


class SchoolBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Springfield High"])
    email: Optional[str] = Field(None, examples=["office@springfield.edu"])


class SchoolCreate(SchoolBase):
    """Schema for creating a school.

    A client-supplied ``id`` is accepted and ignored; the store
    assigns the identifier.
    """

    id: Optional[int] = Field(None, exclude=True)


class SchoolRead(SchoolBase):
    """Schema for reading a school from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class SchoolWithStudents(BaseModel):
    """A school's name and email together with its students."""

    name: Optional[str] = None
    email: Optional[str] = None
    students: List[Student] = Field(default_factory=list)
