"""Tests for fluentsql.dialects.sqlite: connect and named placeholders."""

from fluentsql.dialects import SqliteDialect


def test_sqlite_keeps_named_placeholders():
    sql = "SELECT * FROM users WHERE id = :id"
    assert SqliteDialect().translate_placeholders(sql) == sql


def test_sqlite_connect_creates_connection(tmp_path):
    d = SqliteDialect()
    url = f"sqlite:///{tmp_path / 'test.db'}"
    conn = d.connect(url)
    conn.execute("SELECT 1")
    conn.close()
    assert (tmp_path / "test.db").exists()


def test_sqlite_connect_enables_foreign_keys(tmp_path):
    conn = SqliteDialect().connect(f"sqlite:///{tmp_path / 'fk.db'}")
    assert conn.execute("PRAGMA foreign_keys").fetchone()[0] == 1
    conn.close()


def test_sqlite_connect_defaults_to_memory():
    conn = SqliteDialect().connect("sqlite://")
    conn.execute("CREATE TABLE t (x INTEGER)")
    conn.close()
