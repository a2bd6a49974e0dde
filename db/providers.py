"""
db/providers.py
---------------
Database provider capabilities.

A provider hides everything that differs between DB-API drivers: how a
connection is opened, the named-parameter syntax, how rows are addressed by
column name, explicit transaction control, and how the identity assigned by
the last INSERT is read back. Repositories talk only to this interface.
"""

import sqlite3
from typing import Any

import psycopg2
from psycopg2 import extras

from repositories.exceptions import ConfigurationError


class DatabaseProvider:
    """Interface implemented by each supported backend."""

    name: str = ""
    #: Base class of every error the driver raises.
    Error: type = Exception
    #: Column definition used for the auto-assigned primary key.
    identity_column_ddl: str = "INTEGER PRIMARY KEY"
    #: Column type for 64-bit integer columns that reference an identity.
    bigint_column_ddl: str = "INTEGER"

    def connect(self, connection_string: str) -> Any:
        """Open a new connection in autocommit mode."""
        raise NotImplementedError

    def cursor(self, conn) -> Any:
        """Return a cursor whose rows can be read by column name."""
        return conn.cursor()

    def placeholder(self, name: str) -> str:
        """Return the bind marker for the named parameter ``name``."""
        raise NotImplementedError

    def quote(self, identifier: str) -> str:
        """Quote an identifier so its case is preserved."""
        return '"' + identifier.replace('"', '""') + '"'

    def begin(self, conn) -> None:
        raise NotImplementedError

    def commit(self, conn) -> None:
        raise NotImplementedError

    def rollback(self, conn) -> None:
        raise NotImplementedError

    def last_inserted_id(self, cursor) -> int:
        """Return the identity generated by the last INSERT on this cursor's connection."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class SqliteProvider(DatabaseProvider):
    """Provider backed by the standard library ``sqlite3`` module."""

    name = "sqlite"
    Error = sqlite3.Error

    def connect(self, connection_string: str) -> sqlite3.Connection:
        # isolation_level=None disables the driver's implicit BEGIN.
        conn = sqlite3.connect(connection_string, isolation_level=None)
        conn.row_factory = sqlite3.Row
        return conn

    def placeholder(self, name: str) -> str:
        return f":{name}"

    def begin(self, conn) -> None:
        conn.execute("BEGIN")

    def commit(self, conn) -> None:
        conn.commit()

    def rollback(self, conn) -> None:
        conn.rollback()

    def last_inserted_id(self, cursor) -> int:
        cursor.execute("SELECT last_insert_rowid()")
        return cursor.fetchone()[0]


class PostgresProvider(DatabaseProvider):
    """Provider backed by ``psycopg2``."""

    name = "postgres"
    Error = psycopg2.Error
    identity_column_ddl = "BIGSERIAL PRIMARY KEY"
    bigint_column_ddl = "BIGINT"

    def connect(self, connection_string: str):
        conn = psycopg2.connect(connection_string)
        conn.autocommit = True
        return conn

    def cursor(self, conn):
        return conn.cursor(cursor_factory=extras.RealDictCursor)

    def placeholder(self, name: str) -> str:
        return f"%({name})s"

    def begin(self, conn) -> None:
        # psycopg2 opens the transaction implicitly on the next statement.
        conn.autocommit = False

    def commit(self, conn) -> None:
        conn.commit()
        conn.autocommit = True

    def rollback(self, conn) -> None:
        conn.rollback()
        conn.autocommit = True

    def last_inserted_id(self, cursor) -> int:
        cursor.execute("SELECT lastval() AS id")
        return cursor.fetchone()["id"]


_PROVIDERS: dict[str, type[DatabaseProvider]] = {
    "sqlite": SqliteProvider,
    "sqlite3": SqliteProvider,
    "postgres": PostgresProvider,
    "postgresql": PostgresProvider,
}


def get_provider(name: str) -> DatabaseProvider:
    """
    Resolve a provider by name.

    Args:
        name: One of "sqlite", "sqlite3", "postgres", "postgresql" (case-insensitive).

    Returns:
        A new provider instance.

    Raises:
        ConfigurationError: If the name is not recognised.
    """
    key = (name or "").strip().lower()
    try:
        return _PROVIDERS[key]()
    except KeyError:
        raise ConfigurationError(
            "provider", f"unknown database provider {name!r}"
        ) from None
