"""Cursor handling and column conversions shared by the MySQL repositories."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import time, timedelta
from decimal import Decimal
from typing import Any, Optional

import mysql.connector

from ..core.exceptions import StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, roll back on error.

    Driver errors are re-raised as ``StoreError`` so services never depend on
    the connector's exception types.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StoreError(f"Database unavailable: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.warning("Store operation failed (errno=%s): %s", getattr(e, "errno", None), e)
        raise StoreError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[dict]:
    return cur.fetchone() or None


def fetchall(cur) -> list[dict]:
    return list(cur.fetchall() or [])


def to_decimal(value: Any) -> Decimal:
    """DECIMAL columns (hours, rates, pay). NULL reads as zero."""
    if value is None:
        return Decimal("0")
    return value if isinstance(value, Decimal) else Decimal(str(value))


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Read a TIME column (start/end of a work log).

    The pure-Python connector returns TIME as ``timedelta``; other drivers may
    hand back ``time`` or ``'HH:MM[:SS]'`` strings.
    """

    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        minutes, seconds = divmod(int(value.total_seconds()) % 86400, 60)
        hours, minutes = divmod(minutes, 60)
        return time(hours, minutes, seconds)
    if isinstance(value, (str, bytes)):
        raw = value.decode() if isinstance(value, bytes) else value
        parts = [int(p) for p in raw.strip().split(":")]
        if len(parts) not in (2, 3):
            raise ValueError(f"Invalid TIME value: {value!r}")
        return time(*parts)
    raise TypeError(f"Unsupported TIME value type: {type(value)!r}")
