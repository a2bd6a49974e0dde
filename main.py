"""
main.py
-------
Entry point for the employee data-access service.

Responsibilities:
    - Resolve the database provider and connection string from config.
    - Make sure the Employees table exists.
    - Report how many employees are stored.
"""

from config import EMPLOYEES_DB_PROVIDER, EMPLOYEES_DB_URL
from db.connection import ConnectionFactory
from db.init_db import create_tables
from db.providers import get_provider
from repositories.employee_repo import EmployeeRepository
from repositories.exceptions import EmployeeServiceError
from utils.logger import get_logger

logger = get_logger(__name__)


def build_repository(provider_name: str = EMPLOYEES_DB_PROVIDER,
                     connection_string: str = EMPLOYEES_DB_URL) -> EmployeeRepository:
    """Wire provider, connection factory and repository together."""
    connections = ConnectionFactory(get_provider(provider_name), connection_string)
    return EmployeeRepository(connections)


def main() -> int:
    """Start-up routine; returns a process exit code."""
    try:
        repo = build_repository()
        create_tables(repo.connections)
        employees = repo.list_all()
    except EmployeeServiceError as e:
        logger.error(f"Startup failed: {e}")
        return 1
    logger.info(f"{len(employees)} employee(s) in {EMPLOYEES_DB_PROVIDER} store.")
    for employee in employees:
        logger.info(str(employee))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
