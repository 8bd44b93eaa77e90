"""
Employee endpoints.

These routes expose the CRUD API for employee records.  Service
outcomes map to status codes as follows: a duplicate email is 409, a
missing employee is 404.  Deleting an unknown id still answers 200.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Path, Query, status
from fastapi.responses import PlainTextResponse

from employee_api.app.core.exceptions import EmployeeConflictError
from employee_api.app.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate
from employee_api.app.services.employee_service import EmployeeService

# Ids are SQLite INTEGER PRIMARY KEYs: positive signed 64-bit values.
MAX_EMPLOYEE_ID = 2**63 - 1

router = APIRouter()


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(employee_in: EmployeeCreate) -> EmployeeRead:
    """Create a new employee.  Returns 409 if the email is already taken."""
    try:
        return await EmployeeService.create_employee(employee_in)
    except EmployeeConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("", response_model=List[EmployeeRead])
async def list_employees() -> List[EmployeeRead]:
    return await EmployeeService.list_employees()


@router.get("/search", response_model=EmployeeRead)
async def find_employee(
    first_name: str = Query(..., alias="firstName"),
    last_name: str = Query(..., alias="lastName"),
) -> EmployeeRead:
    """Find an employee by exact first and last name."""
    employee = await EmployeeService.get_employee_by_name(first_name, last_name)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(employee_id: int = Path(..., ge=1, le=MAX_EMPLOYEE_ID)) -> EmployeeRead:
    employee = await EmployeeService.get_employee(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    employee_in: EmployeeUpdate,
    employee_id: int = Path(..., ge=1, le=MAX_EMPLOYEE_ID),
) -> EmployeeRead:
    """Replace first name, last name and email of an existing employee."""
    try:
        employee = await EmployeeService.update_employee(employee_id, employee_in)
    except EmployeeConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee(employee_id: int = Path(..., ge=1, le=MAX_EMPLOYEE_ID)) -> str:
    """Delete an employee.  Unknown ids are accepted silently."""
    await EmployeeService.delete_employee(employee_id)
    return "Employee deleted successfully!"
