"""FastAPI dependencies for shared resources."""

import sqlite3
from collections.abc import Iterator

from fastapi import Request

from core.database import get_connection


def get_db() -> Iterator[sqlite3.Connection]:
    """
    One SQLite connection per request.

    Sync dependencies and async endpoints may run on different threads, so
    the connection is opened without the same-thread check.
    """
    conn = get_connection(check_same_thread=False)
    try:
        yield conn
    finally:
        conn.close()


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"
