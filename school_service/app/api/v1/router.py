"""
Top‑level router for version 1 of the School Service API.
"""

from fastapi import APIRouter

from .endpoints import schools

router = APIRouter()

router.include_router(schools.router, prefix="/schools", tags=["schools"])
