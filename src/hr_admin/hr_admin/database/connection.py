from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling

from ..core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT, POOL_NAME

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    # seconds a request waits for a free connection
    pool_timeout: float = DEFAULT_POOL_TIMEOUT

    @classmethod
    def from_mapping(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "rh_admin")),
            pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
            pool_timeout=float(db_config.get("pool_timeout", DEFAULT_POOL_TIMEOUT)),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class PoolClosedError(RuntimeError):
    """Raised when a connection is requested from a closed pool."""


class PoolTimeoutError(RuntimeError):
    """Raised when no connection frees up within ``pool_timeout`` seconds."""


class _CheckedOutConnection:
    """Proxy around a pooled connection that gives its slot back on close()."""

    def __init__(self, owner: "DatabasePool", cnx):
        self._owner = owner
        self._cnx = cnx
        self._released = False

    def __getattr__(self, name):
        return getattr(self._cnx, name)

    def close(self) -> None:
        if self._released:
            return
        self._released = True
        try:
            self._cnx.close()
        finally:
            self._owner._release()


class DatabasePool:
    """Bounded pool of MySQL connections.

    Constructed explicitly and handed to repositories through the container.
    mysql-connector fails at once when its pool is empty, so checkouts are
    gated by a semaphore and wait up to ``pool_timeout`` for a slot.
    """

    def __init__(self, config: DBConfig, *, pool: Optional[pooling.MySQLConnectionPool] = None):
        self._config = config
        self._closed = False
        self._slots = threading.BoundedSemaphore(max(1, int(config.pool_size)))
        if pool is None:
            pool = pooling.MySQLConnectionPool(
                pool_name=POOL_NAME,
                pool_size=int(config.pool_size),
                pool_reset_session=True,
                host=config.host,
                port=int(config.port),
                user=config.user,
                password=config.password,
                database=config.database,
            )
            logger.info("Created MySQL pool size=%s db=%s", config.pool_size, config.describe())
        self._pool = pool

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def connect(self) -> _CheckedOutConnection:
        if self._closed:
            raise PoolClosedError("Database pool is closed")
        if not self._slots.acquire(timeout=self._config.pool_timeout):
            raise PoolTimeoutError(
                f"No database connection available after {self._config.pool_timeout:g}s "
                f"(pool size {self._config.pool_size})"
            )
        try:
            return _CheckedOutConnection(self, self._pool.get_connection())
        except Exception:
            self._slots.release()
            raise

    def _release(self) -> None:
        self._slots.release()
        if self._closed:
            # a connection handed back after close() must not linger in the queue
            self._drain()

    def _drain(self) -> None:
        remove = getattr(self._pool, "_remove_connections", None)
        if remove is not None:
            remove()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._drain()
        logger.info("Closed MySQL pool db=%s", self._config.describe())

    def __enter__(self) -> "DatabasePool":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
