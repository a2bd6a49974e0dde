from __future__ import annotations

from datetime import date

import pytest

from db.connection import ConnectionFactory
from db.init_db import create_tables
from db.providers import SqliteProvider
from models.employee import Employee
from repositories.employee_repo import EmployeeRepository


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "employees.db")


@pytest.fixture
def connections(db_path):
    factory = ConnectionFactory(SqliteProvider(), db_path)
    create_tables(factory)
    return factory


@pytest.fixture
def repo(connections):
    return EmployeeRepository(connections)


@pytest.fixture
def full_employee():
    return Employee(
        last_name="Davolio",
        first_name="Nancy",
        title="Sales Representative",
        title_of_courtesy="Ms.",
        birth_date=date(1948, 12, 8),
        hire_date=date(1992, 5, 1),
        address="507 - 20th Ave. E. Apt. 2A",
        city="Seattle",
        region="WA",
        postal_code="98122",
        country="USA",
        home_phone="(206) 555-9857",
        extension="5467",
        notes="Education includes a BA in psychology.",
        reports_to=2,
        photo_path="http://accweb/emmployees/davolio.bmp",
    )
