"""
Top-level package for the Employee Records API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``employee_api.app.main:app``.
"""

__all__ = []
