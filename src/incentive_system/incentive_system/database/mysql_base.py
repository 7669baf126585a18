"""Thin query helpers shared by the MySQL repositories.

Each call opens its own connection and commits on success, so the
repositories stay free of connection bookkeeping.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

Row = dict[str, Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Dictionary cursor; commit on success, roll back and re-raise on error."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True)
    try:
        yield cur
        conn.commit()
    except Exception:
        logger.exception("[MySQL] statement failed, rolling back")
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> list[Row]:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return list(cur.fetchall() or [])


def query_one(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return cur.fetchone() or None


def execute(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> None:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
