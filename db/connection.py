"""
db/connection.py
----------------
Opens database connections for the repositories.
Every call to ConnectionFactory.open() creates one new connection and closes
it when the block exits; pooling, if any, belongs to the driver.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from db.providers import DatabaseProvider
from repositories.exceptions import ConfigurationError, PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionFactory:
    """Creates connections for a provider and connection string."""

    def __init__(self, provider: Optional[DatabaseProvider], connection_string: Optional[str]):
        """
        Args:
            provider: The database provider capability.
            connection_string: Driver-specific connection string.

        Raises:
            ConfigurationError: If the provider is missing, or the connection
                string is missing, empty or whitespace-only.
        """
        if provider is None:
            raise ConfigurationError("provider", "a database provider is required")
        if connection_string is None:
            raise ConfigurationError("connection_string", "a connection string is required")
        if not connection_string.strip():
            raise ConfigurationError(
                "connection_string",
                "connection string is empty or contains only white-space characters",
            )
        self.provider = provider
        self.connection_string = connection_string

    @contextmanager
    def open(self) -> Iterator:
        """
        Open a connection in autocommit mode.

        Yields:
            A DB-API connection, closed when the block exits.

        Raises:
            PersistenceError: If the store is unreachable.
        """
        try:
            conn = self.provider.connect(self.connection_string)
        except self.provider.Error as e:
            logger.error(f"Failed to open {self.provider.name} connection: {e}")
            raise PersistenceError("Opening a database connection failed.") from e
        try:
            yield conn
        finally:
            conn.close()

    @contextmanager
    def transaction(self, conn) -> Iterator:
        """
        Run the block inside one transaction on ``conn``.

        Commits when the block completes; rolls back and re-raises otherwise.
        """
        self.provider.begin(conn)
        try:
            yield conn
        except BaseException:
            self.provider.rollback(conn)
            logger.debug("Transaction rolled back.")
            raise
        self.provider.commit(conn)

    def __repr__(self) -> str:
        return f"ConnectionFactory(provider={self.provider!r})"
