from __future__ import annotations

from unittest.mock import MagicMock, patch

import psycopg2
import pytest
from psycopg2 import extras

from db.providers import PostgresProvider, SqliteProvider, get_provider
from repositories.exceptions import ConfigurationError


@pytest.mark.parametrize(
    "name, expected",
    [
        ("sqlite", SqliteProvider),
        ("SQLite3", SqliteProvider),
        ("postgres", PostgresProvider),
        (" postgresql ", PostgresProvider),
    ],
)
def test_get_provider_resolves_known_names(name, expected):
    assert isinstance(get_provider(name), expected)


@pytest.mark.parametrize("name", ["mysql", "", None])
def test_get_provider_rejects_unknown_names(name):
    with pytest.raises(ConfigurationError):
        get_provider(name)


def test_placeholders_follow_driver_paramstyle():
    assert SqliteProvider().placeholder("City") == ":City"
    assert PostgresProvider().placeholder("City") == "%(City)s"


def test_quote_escapes_embedded_quotes():
    assert SqliteProvider().quote('Odd"Name') == '"Odd""Name"'


def test_sqlite_last_inserted_id(tmp_path):
    provider = SqliteProvider()
    conn = provider.connect(str(tmp_path / "ids.db"))
    try:
        cur = provider.cursor(conn)
        cur.execute("CREATE TABLE t (id INTEGER PRIMARY KEY, v TEXT)")
        cur.execute("INSERT INTO t (v) VALUES ('a')")
        cur.execute("INSERT INTO t (v) VALUES ('b')")
        assert provider.last_inserted_id(cur) == 2
    finally:
        conn.close()


def test_sqlite_connection_is_autocommit(tmp_path):
    provider = SqliteProvider()
    conn = provider.connect(str(tmp_path / "auto.db"))
    try:
        conn.execute("CREATE TABLE t (x INTEGER)")
        conn.execute("INSERT INTO t VALUES (1)")
        assert not conn.in_transaction
    finally:
        conn.close()


@patch("db.providers.psycopg2.connect")
def test_postgres_connect_enables_autocommit(mock_connect):
    conn = PostgresProvider().connect("dbname=northwind")

    mock_connect.assert_called_once_with("dbname=northwind")
    assert conn.autocommit is True


def test_postgres_transaction_toggles_autocommit():
    provider = PostgresProvider()
    conn = MagicMock()
    conn.autocommit = True

    provider.begin(conn)
    assert conn.autocommit is False

    provider.commit(conn)
    conn.commit.assert_called_once()
    assert conn.autocommit is True

    provider.begin(conn)
    provider.rollback(conn)
    conn.rollback.assert_called_once()
    assert conn.autocommit is True


def test_postgres_cursor_returns_dict_rows():
    conn = MagicMock()
    PostgresProvider().cursor(conn)
    conn.cursor.assert_called_once_with(cursor_factory=extras.RealDictCursor)


def test_postgres_last_inserted_id_uses_lastval():
    cursor = MagicMock()
    cursor.fetchone.return_value = {"id": 17}

    assert PostgresProvider().last_inserted_id(cursor) == 17
    cursor.execute.assert_called_once_with("SELECT lastval() AS id")


def test_postgres_error_is_driver_base_error():
    assert PostgresProvider.Error is psycopg2.Error
