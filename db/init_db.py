"""
db/init_db.py
-------------
Creates the Employees table if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import ConnectionFactory
from repositories.employee_fields import EMPLOYEE_FIELDS, ID_COLUMN, TABLE_NAME
from repositories.exceptions import PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)

# Column types beyond TEXT NULL. Dates are stored as text.
_COLUMN_TYPES = {
    "LastName": "TEXT NOT NULL",
    "FirstName": "TEXT NOT NULL",
}

# Columns holding another employee's id; sized like the identity column.
_REFERENCE_COLUMNS = ("ReportsTo",)


def schema_sql(provider) -> str:
    """Return the CREATE TABLE statement for ``provider``'s dialect."""
    q = provider.quote
    columns = [f"{q(ID_COLUMN)} {provider.identity_column_ddl}"]
    for field in EMPLOYEE_FIELDS:
        if field.column in _REFERENCE_COLUMNS:
            ddl = f"{provider.bigint_column_ddl} NULL"
        else:
            ddl = _COLUMN_TYPES.get(field.column, "TEXT NULL")
        columns.append(f"{q(field.column)} {ddl}")
    body = ",\n    ".join(columns)
    return f"CREATE TABLE IF NOT EXISTS {q(TABLE_NAME)} (\n    {body}\n)"


def create_tables(connections: ConnectionFactory) -> None:
    """
    Execute the schema SQL to create the Employees table.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    provider = connections.provider
    with connections.open() as conn:
        try:
            cur = provider.cursor(conn)
            cur.execute(schema_sql(provider))
            logger.info("Database schema initialized successfully.")
        except provider.Error as e:
            logger.error(f"Failed to initialize schema: {e}")
            raise PersistenceError("Creating the Employees table failed.") from e


if __name__ == "__main__":
    from config import EMPLOYEES_DB_PROVIDER, EMPLOYEES_DB_URL
    from db.providers import get_provider

    create_tables(ConnectionFactory(get_provider(EMPLOYEES_DB_PROVIDER), EMPLOYEES_DB_URL))
    print("Database schema created successfully.")
