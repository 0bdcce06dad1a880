"""Task CRUD endpoints."""

import sqlite3

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_db
from api.models.responses import (
    ErrorCodes,
    SuccessResponse,
    TaskCreate,
    TaskDoneUpdate,
    TaskResponse,
)
from core.database import delete_task, insert_task, list_tasks, set_task_done

router = APIRouter(prefix="/api/tasks")


def task_not_found(task_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error": "Task not found",
            "code": ErrorCodes.TASK_NOT_FOUND,
            "details": [f"id: {task_id}"],
        },
    )


@router.post("", response_model=SuccessResponse)
def add_task(body: TaskCreate, conn: sqlite3.Connection = Depends(get_db)):
    """Add a single task by hand."""
    try:
        insert_task(conn, body.user_id, body.task.strip(), body.duration, body.date.isoformat())
    except sqlite3.IntegrityError:
        # Foreign key: no such user
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": "User not found",
                "code": ErrorCodes.USER_NOT_FOUND,
                "details": [f"userId: {body.user_id}"],
            },
        )
    return SuccessResponse()


@router.get("/{user_id}", response_model=list[TaskResponse])
def get_tasks(user_id: int, conn: sqlite3.Connection = Depends(get_db)):
    """All tasks for a user, ordered by date."""
    return list_tasks(conn, user_id)


@router.patch("/{task_id}/done", response_model=SuccessResponse)
def update_done(
    task_id: int, body: TaskDoneUpdate, conn: sqlite3.Connection = Depends(get_db)
):
    """Set a task's completion flag."""
    if not set_task_done(conn, task_id, body.done):
        raise task_not_found(task_id)
    return SuccessResponse()


@router.delete("/{task_id}", response_model=SuccessResponse)
def remove_task(task_id: int, conn: sqlite3.Connection = Depends(get_db)):
    if not delete_task(conn, task_id):
        raise task_not_found(task_id)
    return SuccessResponse()
