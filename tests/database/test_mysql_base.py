from __future__ import annotations

import threading
import time
from datetime import date

import pytest

from src.hr_admin.hr_admin.database.bootstrap import _without_database_directives, iter_sql_statements
from src.hr_admin.hr_admin.database.connection import DBConfig, DatabasePool, PoolClosedError, PoolTimeoutError
from src.hr_admin.hr_admin.database.mysql_base import db_cursor, fetchall, fetchone
from src.hr_admin.hr_admin.employees.mysql_employee_repository import MySQLEmployeeRepository
from src.hr_admin.hr_admin.users.mysql_user_repository import MySQLUserRepository


class FakeCursor:
    def __init__(self, rows=None, lastrowid=None, fail=False):
        self.rows = list(rows or [])
        self.lastrowid = lastrowid
        self.rowcount = len(self.rows)
        self.fail = fail
        self.executed = []
        self.closed = False

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        if self.fail:
            raise RuntimeError("boom")

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeMySQLPool:
    def __init__(self, cursor: FakeCursor):
        self.connections = []
        self._cursor = cursor
        self.removed = False

    def get_connection(self):
        conn = FakeConnection(self._cursor)
        self.connections.append(conn)
        return conn

    def _remove_connections(self):
        self.removed = True


def _pool(cursor: FakeCursor, *, size: int = 10, timeout: float = 1.0):
    raw = FakeMySQLPool(cursor)
    config = DBConfig(
        host="localhost", port=3306, user="root", password="", database="rh_admin", pool_size=size, pool_timeout=timeout
    )
    return DatabasePool(config, pool=raw), raw


def test_connection_is_committed_and_released():
    pool, raw = _pool(FakeCursor(rows=[{"id": 1}]))

    with db_cursor(pool) as (_, cur):
        cur.execute("SELECT 1")

    conn = raw.connections[0]
    assert conn.committed and conn.closed and not conn.rolled_back


def test_connection_is_released_when_query_fails():
    pool, raw = _pool(FakeCursor(fail=True))

    with pytest.raises(RuntimeError):
        with db_cursor(pool) as (_, cur):
            cur.execute("SELECT 1")

    conn = raw.connections[0]
    assert conn.rolled_back and conn.closed and not conn.committed


def test_closed_pool_refuses_connections():
    pool, raw = _pool(FakeCursor())

    with pool:
        pass

    assert pool.closed and raw.removed
    with pytest.raises(PoolClosedError):
        pool.connect()


def test_user_repository_maps_rows():
    row = {"id": 5, "name": "Ana", "last_name": "Ruiz", "email": "ana@x.com", "password": "abc", "agency": "N"}
    pool, raw = _pool(FakeCursor(rows=[row]))

    user = MySQLUserRepository(pool).get_by_email("ana@x.com")

    assert user.id == 5 and user.password_digest == "abc"
    assert raw.connections[0].closed


def test_user_update_without_digest_leaves_password_column_alone():
    cursor = FakeCursor()
    pool, _ = _pool(cursor)

    MySQLUserRepository(pool).update_user(3, name="A", last_name="B", email="a@b.c", agency="N")

    sql, params = cursor.executed[0]
    assert "password" not in sql
    assert params == ("A", "B", "a@b.c", "N", 3)


def test_employee_repository_keeps_dates_native():
    row = {
        "id": 1,
        "name": "Lucia",
        "last_name": "Torres",
        "agency": "North",
        "date_of_birth": date(1990, 5, 14),
        "high_date": date(2018, 1, 15),
        "status": "Activo",
        "low_date": None,
        "photo": b"data:image/png;base64,AAA",
        "id_user": 2,
        "user_email": "ana@x.com",
    }
    pool, _ = _pool(FakeCursor(rows=[row]))

    employee = MySQLEmployeeRepository(pool).get_by_id(1)

    assert employee.to_dict()["date_of_birth"] == "14/05/1990"
    assert employee.photo == "data:image/png;base64,AAA"


def test_count_for_user():
    pool, _ = _pool(FakeCursor(rows=[{"total": 2}]))

    assert MySQLEmployeeRepository(pool).count_for_user(2) == 2


def test_sql_splitter_skips_comments_and_quoted_semicolons():
    sql = """
    -- header comment
    CREATE TABLE a (x INT);
    INSERT INTO a VALUES ('x;y'); -- trailing
    """

    statements = list(iter_sql_statements(sql))

    assert statements == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES ('x;y')"]


def test_exhausted_pool_times_out_instead_of_failing_at_once():
    pool, _ = _pool(FakeCursor(), size=1, timeout=0.05)
    held = pool.connect()

    with pytest.raises(PoolTimeoutError):
        pool.connect()

    held.close()
    pool.connect().close()


def test_waiting_checkout_gets_the_released_connection():
    pool, raw = _pool(FakeCursor(), size=1, timeout=2.0)
    held = pool.connect()
    got = []

    waiter = threading.Thread(target=lambda: got.append(pool.connect()))
    waiter.start()
    time.sleep(0.05)
    assert not got

    held.close()
    waiter.join(timeout=2.0)

    assert len(got) == 1
    assert len(raw.connections) == 2


def test_releasing_twice_frees_only_one_slot():
    pool, _ = _pool(FakeCursor(), size=1, timeout=0.05)
    conn = pool.connect()

    conn.close()
    conn.close()

    pool.connect()
    with pytest.raises(PoolTimeoutError):
        pool.connect()


def test_connection_returned_after_close_is_drained():
    pool, raw = _pool(FakeCursor())
    conn = pool.connect()

    pool.close()
    raw.removed = False
    conn.close()

    assert raw.removed


def test_fetch_helpers_apply_mapper():
    cursor = FakeCursor(rows=[{"id": 1}, {"id": 2}])

    assert fetchall(cursor, lambda r: r["id"]) == [1, 2]
    assert fetchone(cursor, lambda r: r["id"] * 10) == 10
    assert fetchone(FakeCursor()) is None


def test_database_directives_are_stripped_from_schema():
    sql = "CREATE DATABASE IF NOT EXISTS rh_admin;\nuse rh_admin;\nCREATE TABLE Users (id INT);\n"

    assert _without_database_directives(sql).strip() == "CREATE TABLE Users (id INT);"
