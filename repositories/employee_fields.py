"""
repositories/employee_fields.py
-------------------------------
Static description of the persisted Employee fields and the row mapper
built on it.

EMPLOYEE_FIELDS lists every column of the Employees table except the
identity, in one fixed order. INSERT, UPDATE and row mapping all iterate the
same tuple, so the column list and the parameter list of a statement always
line up.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from models.employee import Employee
from repositories.coercion import (
    date_from_column,
    int_from_column,
    string_from_column,
    to_parameter,
)
from repositories.exceptions import RowMappingError

TABLE_NAME = "Employees"
ID_COLUMN = "EmployeeID"


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One persisted field.

    Attributes:
        column: Column name in the Employees table (also the bind parameter name).
        attribute: Attribute name on the Employee dataclass.
        from_column: Converts a fetched value to the domain type.
        required: True for NOT NULL columns, which are read without coercion to None.
    """
    column: str
    attribute: str
    from_column: Callable[[str, Any], Any]
    required: bool = False

    def read(self, employee: Employee) -> Any:
        """Return the field's value from ``employee`` ready for binding."""
        return to_parameter(getattr(employee, self.attribute))

    def write(self, employee: Employee, value: Any) -> None:
        setattr(employee, self.attribute, value)


EMPLOYEE_FIELDS: tuple[FieldDescriptor, ...] = (
    FieldDescriptor("LastName", "last_name", string_from_column, required=True),
    FieldDescriptor("FirstName", "first_name", string_from_column, required=True),
    FieldDescriptor("Title", "title", string_from_column),
    FieldDescriptor("TitleOfCourtesy", "title_of_courtesy", string_from_column),
    FieldDescriptor("BirthDate", "birth_date", date_from_column),
    FieldDescriptor("HireDate", "hire_date", date_from_column),
    FieldDescriptor("Address", "address", string_from_column),
    FieldDescriptor("City", "city", string_from_column),
    FieldDescriptor("Region", "region", string_from_column),
    FieldDescriptor("PostalCode", "postal_code", string_from_column),
    FieldDescriptor("Country", "country", string_from_column),
    FieldDescriptor("HomePhone", "home_phone", string_from_column),
    FieldDescriptor("Extension", "extension", string_from_column),
    FieldDescriptor("Notes", "notes", string_from_column),
    FieldDescriptor("ReportsTo", "reports_to", int_from_column),
    FieldDescriptor("PhotoPath", "photo_path", string_from_column),
)


def bind_parameters(employee: Employee) -> dict[str, Any]:
    """Named parameters for every descriptor column, keyed by column name."""
    return {field.column: field.read(employee) for field in EMPLOYEE_FIELDS}


def _column(row: Mapping[str, Any], column: str) -> Any:
    try:
        return row[column]
    except KeyError:
        raise RowMappingError(column, "column missing from result row") from None


def _required(row: Mapping[str, Any], column: str, parse) -> Any:
    value = parse(column, _column(row, column))
    if value is None:
        raise RowMappingError(column, "required column is NULL")
    return value


def row_to_employee(row: Mapping[str, Any]) -> Employee:
    """
    Convert a fetched row (a column-name mapping) to an Employee.

    Raises:
        RowMappingError: If a required column is missing or NULL, or an
            optional column holds a value that cannot be parsed.
    """
    employee = Employee(
        id=_required(row, ID_COLUMN, int_from_column),
        last_name=_required(row, "LastName", string_from_column),
        first_name=_required(row, "FirstName", string_from_column),
    )
    for field in EMPLOYEE_FIELDS:
        if field.required:
            continue
        field.write(employee, field.from_column(field.column, _column(row, field.column)))
    return employee
