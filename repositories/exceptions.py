"""
repositories/exceptions.py
--------------------------
Error taxonomy for the employee data-access layer.

Callers catch ``EmployeeServiceError`` to handle every failure raised by this
package; the subclasses distinguish configuration mistakes, expected
"no such row" outcomes, store failures and schema contract violations.
"""

from typing import Optional


class EmployeeServiceError(Exception):
    """Base exception for all employee service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(EmployeeServiceError):
    """Raised at construction time when the provider or connection string is unusable."""

    def __init__(self, setting: str, reason: str):
        super().__init__(
            message=f"Invalid {setting}: {reason}",
            details={"setting": setting, "reason": reason},
        )


class NotFoundError(EmployeeServiceError):
    """Raised when a lookup or update by id matches no row."""

    def __init__(self, message: str, employee_id: Optional[int] = None):
        super().__init__(message=message, details={"employee_id": employee_id})
        self.employee_id = employee_id


class PersistenceError(EmployeeServiceError):
    """
    Raised when a statement or the generated-id retrieval fails.

    The driver exception is chained as ``__cause__`` (``raise ... from e``).
    """


class RowMappingError(EmployeeServiceError):
    """Raised when a fetched row does not satisfy the Employees schema contract."""

    def __init__(self, column: str, reason: str):
        super().__init__(
            message=f"Cannot map column {column}: {reason}",
            details={"column": column, "reason": reason},
        )
        self.column = column
