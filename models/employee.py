"""
models/employee.py
------------------
Domain model for a row of the Employees table.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Employee:
    """
    Represents a single employee record.

    Attributes:
        last_name: Required family name.
        first_name: Required given name.
        title: Job title, e.g. "Sales Representative".
        title_of_courtesy: Salutation, e.g. "Ms.".
        birth_date: Date of birth, stored as text in the database.
        hire_date: Date of hire, stored as text in the database.
        reports_to: Id of the manager's record. Not enforced as a foreign key.
        photo_path: URL or path of the employee's photo.
        id: Database primary key (None for new records).
    """
    last_name: str
    first_name: str
    title: Optional[str] = None
    title_of_courtesy: Optional[str] = None
    birth_date: Optional[date] = None
    hire_date: Optional[date] = None
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    home_phone: Optional[str] = None
    extension: Optional[str] = None
    notes: Optional[str] = None
    reports_to: Optional[int] = None
    photo_path: Optional[str] = None
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        ident = f"#{self.id}" if self.id is not None else "(new)"
        return f"{ident} {self.full_name}"
