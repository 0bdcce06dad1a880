"""Tests for the SQLite persistence layer."""

import inspect
import sqlite3

import pytest

from api.logging import RequestLog, log_request
from core.database import (
    create_user,
    delete_task,
    get_user_by_email,
    get_user_by_id,
    init_schema,
    insert_task,
    insert_tasks,
    list_tasks,
    set_task_done,
)
from models.schedule import ScheduleEntry


@pytest.fixture
def user_id(db_conn):
    return create_user(db_conn, "student@example.com", "hash")


def test_init_schema_is_idempotent(db_conn):
    init_schema(db_conn)
    init_schema(db_conn)
    tables = {
        row["name"]
        for row in db_conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    }
    assert {"users", "tasks", "api_requests", "api_request_details"} <= tables


def test_user_lookup(db_conn, user_id):
    assert get_user_by_email(db_conn, "student@example.com")["id"] == user_id
    assert get_user_by_id(db_conn, user_id)["email"] == "student@example.com"
    assert get_user_by_email(db_conn, "nobody@example.com") is None
    assert get_user_by_id(db_conn, user_id + 1) is None


def test_duplicate_email_rejected(db_conn, user_id):
    with pytest.raises(sqlite3.IntegrityError):
        create_user(db_conn, "student@example.com", "other")


def test_insert_tasks_keeps_order_and_defaults(db_conn, user_id):
    entries = [
        ScheduleEntry(task="Read", duration_hours=2.0, date="2025-05-22"),
        ScheduleEntry(task="Practice", duration_hours=1.5, date="2025-05-22"),
        ScheduleEntry(task="Review", duration_hours=1.0, date="2025-05-23"),
    ]
    ids = insert_tasks(db_conn, user_id, entries)

    assert ids == sorted(ids)
    tasks = list_tasks(db_conn, user_id)
    assert [(t["task"], t["duration"], t["date"], t["done"]) for t in tasks] == [
        ("Read", 2.0, "2025-05-22", False),
        ("Practice", 1.5, "2025-05-22", False),
        ("Review", 1.0, "2025-05-23", False),
    ]


def test_insert_tasks_is_all_or_nothing(db_conn, user_id):
    entries = [
        ScheduleEntry(task="Read", duration_hours=2.0, date="2025-05-22"),
        ScheduleEntry(task=None, duration_hours=1.0, date="2025-05-23"),  # NOT NULL violation
    ]
    with pytest.raises(sqlite3.IntegrityError):
        insert_tasks(db_conn, user_id, entries)
    assert list_tasks(db_conn, user_id) == []


def test_list_tasks_orders_by_date(db_conn, user_id):
    insert_task(db_conn, user_id, "Later", 1, "2025-06-01")
    insert_task(db_conn, user_id, "Sooner", 1, "2025-05-01")
    other = create_user(db_conn, "other@example.com", "hash")
    insert_task(db_conn, other, "Not mine", 1, "2025-05-15")

    assert [t["task"] for t in list_tasks(db_conn, user_id)] == ["Sooner", "Later"]


def test_task_for_unknown_user_rejected(db_conn):
    with pytest.raises(sqlite3.IntegrityError):
        insert_task(db_conn, 999, "Orphan", 1, "2025-05-01")


def test_set_done_and_delete(db_conn, user_id):
    task_id = insert_task(db_conn, user_id, "Read", 2, "2025-05-22")

    assert set_task_done(db_conn, task_id, True)
    assert list_tasks(db_conn, user_id)[0]["done"] is True
    assert set_task_done(db_conn, task_id, False)
    assert list_tasks(db_conn, user_id)[0]["done"] is False

    assert delete_task(db_conn, task_id)
    assert list_tasks(db_conn, user_id) == []
    assert not delete_task(db_conn, task_id)
    assert not set_task_done(db_conn, task_id, True)


def test_log_request(db_conn):
    log = RequestLog(
        endpoint="/api/plan",
        method="POST",
        user_id=1,
        status_code=422,
        error_code="EMPTY_PLAN",
        error_message="No tasks",
        details=[("warning", "No tasks")],
    )
    log_request(log)

    row = db_conn.execute(
        "SELECT * FROM api_requests WHERE request_id = ?", (log.request_id,)
    ).fetchone()
    assert row["status_code"] == 422
    assert row["error_code"] == "EMPTY_PLAN"

    details = db_conn.execute(
        "SELECT detail_type, message FROM api_request_details WHERE request_id = ?",
        (log.request_id,),
    ).fetchall()
    assert [tuple(d) for d in details] == [("warning", "No tasks")]


def test_insert_request_log_takes_a_request_log():
    from core.database import insert_request_log

    assert inspect.signature(insert_request_log).parameters["log"].annotation == "RequestLog"
