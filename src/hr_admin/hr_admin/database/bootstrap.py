from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector

from ..security.hashing import PasswordHasher, LegacyPasswordHasher
from .connection import DBConfig

logger = logging.getLogger(__name__)

SQL_DIR = Path(__file__).resolve().parents[4] / "database"


_DATABASE_DIRECTIVE = re.compile(r"^\s*(?:CREATE\s+DATABASE|USE)\b[^;]*;[ \t]*$", re.IGNORECASE | re.MULTILINE)


def _without_database_directives(sql: str) -> str:
    """Drop CREATE DATABASE / USE lines; the target database comes from DBConfig."""
    return _DATABASE_DIRECTIVE.sub("", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes, skips -- comments).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False
    in_comment = False
    prev = ""

    for ch in sql:
        if in_comment:
            if ch == "\n":
                in_comment = False
                buf.append(ch)
            prev = ch
            continue

        if escape:
            buf.append(ch)
            escape = False
            prev = ch
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            prev = ch
            continue

        if ch == "-" and prev == "-" and not in_single and not in_double:
            buf.pop()
            in_comment = True
            prev = ""
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            prev = ch
            continue

        buf.append(ch)
        prev = ch

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in iter_sql_statements(sql):
        cur.execute(stmt)


def _connect(config: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=config.host,
        port=int(config.port),
        user=config.user,
        password=config.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = config.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(config: DBConfig) -> None:
    conn = _connect(config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(config: DBConfig, *, schema_path: str | Path = SQL_DIR / "schema.sql") -> None:
    ensure_database_exists(config)
    sql = _without_database_directives(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(config)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %s to %s", Path(schema_path).name, config.describe())


def apply_seed_sql(config: DBConfig, *, seed_path: str | Path = SQL_DIR / "seed.sql") -> None:
    sql = _without_database_directives(Path(seed_path).read_text(encoding="utf-8"))

    conn = _connect(config)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %s to %s", Path(seed_path).name, config.describe())


def ensure_demo_admin(
    config: DBConfig,
    *,
    hasher: Optional[PasswordHasher] = None,
    email: str = "admin@rh.local",
    password: str = "admin123",
) -> None:
    """Create or refresh the demo administrator so a fresh database can log in."""
    hasher = hasher or LegacyPasswordHasher()
    digest = hasher.hash(password)

    conn = _connect(config)
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT id FROM Users WHERE email=%s", (email,))
        existing = cur.fetchone()
        if existing:
            cur.execute("UPDATE Users SET password=%s WHERE id=%s", (digest, existing["id"]))
        else:
            cur.execute(
                """
                INSERT INTO Users (name, last_name, email, password, agency)
                VALUES (%s, %s, %s, %s, %s)
                """,
                ("Admin", "Demo", email, digest, "Central"),
            )
        conn.commit()
    finally:
        conn.close()


def list_tables(config: DBConfig) -> list[str]:
    conn = _connect(config)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
