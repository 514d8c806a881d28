"""
Student record as returned by the Student Service.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Student(BaseModel):
    id: Optional[int] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    school_id: Optional[int] = Field(None, alias="schoolId")

    model_config = ConfigDict(populate_by_name=True)
