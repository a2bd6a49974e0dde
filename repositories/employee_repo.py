"""
repositories/employee_repo.py
-----------------------------
Data access layer for employee records.
All SQL for the `Employees` table is built here from EMPLOYEE_FIELDS.
"""

from db.connection import ConnectionFactory
from models.employee import Employee
from repositories.employee_fields import (
    EMPLOYEE_FIELDS,
    ID_COLUMN,
    TABLE_NAME,
    bind_parameters,
    row_to_employee,
)
from repositories.exceptions import NotFoundError, PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)


class EmployeeRepository:
    """Repository for CRUD operations on the Employees table."""

    def __init__(self, connections: ConnectionFactory):
        self._connections = connections
        self._provider = connections.provider
        q = self._provider.quote
        p = self._provider.placeholder
        table = q(TABLE_NAME)

        # Statements are built once per repository from the descriptor table.
        self._select_all_sql = f"SELECT * FROM {table}"
        self._select_by_id_sql = f"SELECT * FROM {table} WHERE {q(ID_COLUMN)} = {p(ID_COLUMN)}"
        self._insert_sql = "INSERT INTO {} ({}) VALUES ({})".format(
            table,
            ", ".join(q(f.column) for f in EMPLOYEE_FIELDS),
            ", ".join(p(f.column) for f in EMPLOYEE_FIELDS),
        )
        self._update_sql = "UPDATE {} SET {} WHERE {} = {}".format(
            table,
            ", ".join(f"{q(f.column)} = {p(f.column)}" for f in EMPLOYEE_FIELDS),
            q(ID_COLUMN),
            p(ID_COLUMN),
        )
        self._delete_sql = f"DELETE FROM {table} WHERE {q(ID_COLUMN)} = {p(ID_COLUMN)}"

    @property
    def connections(self) -> ConnectionFactory:
        return self._connections

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[Employee]:
        """
        Fetch every employee, in the order the store returns them.

        Returns:
            List of Employee objects; empty if the table is empty.

        Raises:
            PersistenceError: If the query fails.
            RowMappingError: If a row violates the schema contract.
        """
        with self._connections.open() as conn:
            try:
                cur = self._provider.cursor(conn)
                cur.execute(self._select_all_sql)
                rows = [dict(r) for r in cur.fetchall()]
            except self._provider.Error as e:
                logger.error(f"Failed to list employees: {e}")
                raise PersistenceError("Listing employees failed.") from e
        logger.debug(f"Fetched {len(rows)} employee rows")
        return [row_to_employee(r) for r in rows]

    def get_by_id(self, employee_id: int) -> Employee:
        """
        Fetch a single employee by ID.

        Args:
            employee_id: Primary key.

        Returns:
            The matching Employee.

        Raises:
            NotFoundError: If no row has this ID.
            PersistenceError: If the query fails, or more than one row matches.
        """
        with self._connections.open() as conn:
            try:
                cur = self._provider.cursor(conn)
                cur.execute(self._select_by_id_sql, {ID_COLUMN: employee_id})
                rows = [dict(r) for r in cur.fetchmany(2)]
            except self._provider.Error as e:
                logger.error(f"Failed to fetch employee #{employee_id}: {e}")
                raise PersistenceError("Fetching the employee failed.") from e

        if not rows:
            raise NotFoundError("Employee not found.", employee_id)
        if len(rows) > 1:
            raise PersistenceError(
                f"More than one employee has id {employee_id}.",
                details={"employee_id": employee_id},
            )
        return row_to_employee(rows[0])

    # ── CREATE ────────────────────────────────────────────

    def add(self, employee: Employee) -> int:
        """
        Insert a new employee record.

        The `id` attribute of ``employee`` is ignored; the store assigns one.

        Args:
            employee: The Employee domain object to persist.

        Returns:
            The newly assigned employee ID.

        Raises:
            PersistenceError: If a field cannot be bound (e.g. a ``datetime``
                where a date is expected), or the insert or the identity
                lookup fails. The transaction is rolled back first.
        """
        with self._connections.open() as conn:
            try:
                with self._connections.transaction(conn):
                    cur = self._provider.cursor(conn)
                    cur.execute(self._insert_sql, bind_parameters(employee))
                    new_id = self._provider.last_inserted_id(cur)
            except Exception as e:
                logger.error(f"Failed to add employee {employee.full_name}: {e}")
                raise PersistenceError("Inserting an employee failed.") from e
        logger.info(f"Added employee #{new_id} ({employee.full_name})")
        return new_id

    # ── UPDATE ────────────────────────────────────────────

    def update(self, employee: Employee) -> None:
        """
        Overwrite every persisted field of an existing employee.

        Args:
            employee: Employee with updated fields (must have id set).

        Raises:
            NotFoundError: If no row has ``employee.id``. Nothing is changed.
            PersistenceError: If the update fails. The transaction is rolled back.
        """
        with self._connections.open() as conn:
            try:
                with self._connections.transaction(conn):
                    params = bind_parameters(employee)
                    params[ID_COLUMN] = employee.id
                    cur = self._provider.cursor(conn)
                    cur.execute(self._update_sql, params)
                    if cur.rowcount == 0:
                        raise NotFoundError("Employee is not updated.", employee.id)
            except NotFoundError:
                logger.info(f"Update skipped: employee #{employee.id} does not exist")
                raise
            except Exception as e:
                logger.error(f"Failed to update employee #{employee.id}: {e}")
                raise PersistenceError("Employee update failed.") from e
        logger.info(f"Updated employee #{employee.id}")

    # ── DELETE ────────────────────────────────────────────

    def remove(self, employee_id: int) -> None:
        """
        Delete an employee by ID. Deleting a missing ID is not an error.

        Raises:
            PersistenceError: If the delete statement fails.
        """
        with self._connections.open() as conn:
            try:
                cur = self._provider.cursor(conn)
                cur.execute(self._delete_sql, {ID_COLUMN: employee_id})
                deleted = cur.rowcount > 0
            except self._provider.Error as e:
                logger.error(f"Failed to remove employee #{employee_id}: {e}")
                raise PersistenceError("Error removing the employee.") from e
        if deleted:
            logger.info(f"Removed employee #{employee_id}")
