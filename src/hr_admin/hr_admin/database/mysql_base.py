from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, TypeVar

from .connection import DatabasePool

logger = logging.getLogger(__name__)

T = TypeVar("T")
Row = Dict[str, Any]


@contextmanager
def db_cursor(pool: DatabasePool, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """Check a connection out of the pool for one unit of work.

    Commits when the block finishes, rolls back when it raises, and hands the
    connection back to the pool either way.
    """
    conn = pool.connect()
    cur = None
    try:
        cur = conn.cursor(dictionary=dictionary)
        yield conn, cur
        conn.commit()
    except Exception:
        logger.debug("Rolling back unit of work", exc_info=True)
        conn.rollback()
        raise
    finally:
        if cur is not None:
            cur.close()
        conn.close()


def fetchone(cur, mapper: Optional[Callable[[Row], T]] = None) -> Optional[Any]:
    """Next row (mapped when ``mapper`` is given) or None."""
    row = cur.fetchone()
    if not row:
        return None
    return mapper(row) if mapper else row


def fetchall(cur, mapper: Optional[Callable[[Row], T]] = None) -> List[Any]:
    rows = list(cur.fetchall() or [])
    return [mapper(r) for r in rows] if mapper else rows
