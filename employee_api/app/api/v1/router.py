"""
Top-level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

# The original public contract uses the singular ``/employee`` prefix.
router.include_router(employees.router, prefix="/employee", tags=["employees"])
