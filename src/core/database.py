"""
SQLite database operations for users, tasks and API request logs.
"""

import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from core.config import DB_PATH
from models.schedule import ScheduleEntry, TaskRow, UserRow

if TYPE_CHECKING:
    from api.logging import RequestLog

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        email TEXT UNIQUE NOT NULL,
        password TEXT NOT NULL,
        created_at TEXT DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tasks (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        task TEXT NOT NULL,
        duration REAL NOT NULL,
        date TEXT NOT NULL,
        done INTEGER NOT NULL DEFAULT 0,
        created_at TEXT DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (user_id) REFERENCES users(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS api_requests (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        request_id TEXT UNIQUE NOT NULL,
        timestamp TEXT NOT NULL,
        endpoint TEXT NOT NULL,
        method TEXT NOT NULL,
        client_ip TEXT,
        user_id INTEGER,
        status_code INTEGER NOT NULL,
        error_code TEXT,
        error_message TEXT,
        processing_time_ms INTEGER NOT NULL,
        tasks_generated INTEGER,
        total_hours REAL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS api_request_details (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        request_id TEXT NOT NULL,
        detail_type TEXT NOT NULL CHECK(detail_type IN ('validation_error', 'llm_error', 'warning')),
        message TEXT NOT NULL,
        FOREIGN KEY (request_id) REFERENCES api_requests(request_id)
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_tasks_user_date ON tasks(user_id, date)",
    "CREATE INDEX IF NOT EXISTS idx_api_requests_timestamp ON api_requests(timestamp)",
    "CREATE INDEX IF NOT EXISTS idx_api_requests_status ON api_requests(status_code)",
    "CREATE INDEX IF NOT EXISTS idx_api_request_details_request ON api_request_details(request_id)",
]


def get_connection(db_path: Path | None = None, check_same_thread: bool = True) -> sqlite3.Connection:
    """Get a database connection with dict-like rows."""
    conn = sqlite3.connect(db_path or DB_PATH, check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_schema(conn: sqlite3.Connection):
    """Create tables and indexes if they don't exist."""
    cursor = conn.cursor()
    for statement in SCHEMA:
        cursor.execute(statement)
    conn.commit()


# =============================================================================
# USERS
# =============================================================================


def create_user(conn: sqlite3.Connection, email: str, password_hash: str) -> int:
    """Create user record and return user_id."""
    cursor = conn.cursor()
    cursor.execute(
        "INSERT INTO users (email, password) VALUES (?, ?)",
        (email, password_hash),
    )
    conn.commit()
    return cursor.lastrowid


def get_user_by_email(conn: sqlite3.Connection, email: str) -> UserRow | None:
    row = conn.execute(
        "SELECT id, email, password, created_at FROM users WHERE email = ?",
        (email,),
    ).fetchone()
    return dict(row) if row else None


def get_user_by_id(conn: sqlite3.Connection, user_id: int) -> UserRow | None:
    row = conn.execute(
        "SELECT id, email, password, created_at FROM users WHERE id = ?",
        (user_id,),
    ).fetchone()
    return dict(row) if row else None


# =============================================================================
# TASKS
# =============================================================================


def insert_task(
    conn: sqlite3.Connection, user_id: int, task: str, duration: float, task_date: str
) -> int:
    """Insert a single task and return its id."""
    cursor = conn.cursor()
    cursor.execute(
        "INSERT INTO tasks (user_id, task, duration, date) VALUES (?, ?, ?, ?)",
        (user_id, task, duration, task_date),
    )
    conn.commit()
    return cursor.lastrowid


def insert_tasks(conn: sqlite3.Connection, user_id: int, entries: list[ScheduleEntry]) -> list[int]:
    """
    Insert parsed schedule entries for a user, in list order.

    All rows are written in one transaction; a failure leaves none behind.
    """
    task_ids = []
    with conn:
        for entry in entries:
            cursor = conn.execute(
                "INSERT INTO tasks (user_id, task, duration, date) VALUES (?, ?, ?, ?)",
                (user_id, entry.task, entry.duration_hours, entry.date),
            )
            task_ids.append(cursor.lastrowid)
    return task_ids


def list_tasks(conn: sqlite3.Connection, user_id: int) -> list[TaskRow]:
    """All tasks for a user, ordered by date (insertion order within a day)."""
    rows = conn.execute(
        """
        SELECT id, user_id, task, duration, date, done, created_at
        FROM tasks
        WHERE user_id = ?
        ORDER BY date, id
        """,
        (user_id,),
    ).fetchall()
    return [{**dict(row), "done": bool(row["done"])} for row in rows]


def set_task_done(conn: sqlite3.Connection, task_id: int, done: bool) -> bool:
    """Update completion flag. Returns False if the task doesn't exist."""
    cursor = conn.execute(
        "UPDATE tasks SET done = ? WHERE id = ?",
        (1 if done else 0, task_id),
    )
    conn.commit()
    return cursor.rowcount > 0


def delete_task(conn: sqlite3.Connection, task_id: int) -> bool:
    """Delete a task. Returns False if the task doesn't exist."""
    cursor = conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
    conn.commit()
    return cursor.rowcount > 0


# =============================================================================
# API REQUEST LOGS
# =============================================================================


def insert_request_log(conn: sqlite3.Connection, log: "RequestLog") -> None:
    """Write a request log and its detail rows."""
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO api_requests (
            request_id, timestamp, endpoint, method, client_ip, user_id,
            status_code, error_code, error_message, processing_time_ms,
            tasks_generated, total_hours
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            log.request_id,
            log.timestamp,
            log.endpoint,
            log.method,
            log.client_ip,
            log.user_id,
            log.status_code,
            log.error_code,
            log.error_message,
            log.processing_time_ms,
            log.tasks_generated,
            log.total_hours,
        ),
    )

    for detail_type, message in log.details:
        cursor.execute(
            """
            INSERT INTO api_request_details (request_id, detail_type, message)
            VALUES (?, ?, ?)
            """,
            (log.request_id, detail_type, message),
        )

    conn.commit()
