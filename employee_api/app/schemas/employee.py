"""
Pydantic schemas for employee records.

The JSON representation uses camelCase keys (``firstName``,
``lastName``) while the Python attributes are snake_case.  Input models
accept either spelling.  ``EmployeeUpdate`` deliberately carries only
the three mutable fields so an update can never touch ``id``.
"""

from pydantic import BaseModel, Field


class EmployeeBase(BaseModel):
    first_name: str = Field(..., alias="firstName", examples=["Rei"])
    last_name: str = Field(..., alias="lastName", examples=["Dallo"])
    email: str = Field(..., examples=["rd@domain.com"])

    model_config = {
        "populate_by_name": True,
    }


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee.  Any ``id`` in the body is ignored."""


class EmployeeUpdate(EmployeeBase):
    """Fields replaced by an update: first name, last name and email."""


class EmployeeRead(EmployeeBase):
    """Schema for reading an employee from the API."""

    id: int
