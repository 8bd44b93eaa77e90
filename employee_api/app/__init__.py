"""
Application package initializer.

The application is split into ``core`` (configuration, logging,
database), ``repositories`` (SQL), ``services`` (business rules),
``schemas`` (pydantic models) and ``api`` (versioned FastAPI routers).
"""

from .main import app  # noqa: F401
