"""
Custom exceptions shared by the repository and service layers.
"""


class EmployeeConflictError(ValueError):
    """An employee with the given email already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"An employee already exists with the given email: {email}")
        self.email = email
