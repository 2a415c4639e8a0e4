import pytest

from fluentsql.connection import connect, get_connection
from fluentsql.query_builder import QueryBuilder


@pytest.fixture
def qb():
    """A QueryBuilder without connection, for rendering only."""
    return QueryBuilder()


@pytest.fixture
def expr(qb):
    return qb.expr()


@pytest.fixture(scope="function")
def sqlite_connection(tmp_path):
    """A Connection on a temporary file SQLite database with a populated `users` table."""
    connect(f"sqlite:///{tmp_path / 'test.sqlite3'}", name="tests")
    connection = get_connection(name="tests")
    connection.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY AUTOINCREMENT, name CHAR, age INTEGER, active INTEGER)"
    )
    for name, age, active in (("alice", 31, 1), ("bob", 17, 1), ("carol", 45, 0), ("dave", 28, 1)):
        connection.execute(
            "INSERT INTO users (name, age, active) VALUES (:name, :age, :active)",
            {"name": name, "age": age, "active": active},
        )
    connection.commit()
    yield connection
    connection.close()
