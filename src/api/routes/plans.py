"""Plan generation endpoint."""

import asyncio
import sqlite3
import time

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import get_client_ip, get_db
from api.logging import RequestLog, log_request
from api.models.responses import ErrorCodes, PlannedTask, PlanRequest, PlanResponse
from core.database import get_user_by_id
from services import planner

router = APIRouter(prefix="/api")

PLAN_ERROR_STATUS = {
    ErrorCodes.EMPTY_PLAN: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCodes.LLM_ERROR: status.HTTP_502_BAD_GATEWAY,
}


@router.post("/plan", response_model=PlanResponse)
async def create_plan(
    request: Request,
    body: PlanRequest,
    conn: sqlite3.Connection = Depends(get_db),
):
    """
    Generate a study plan for a goal and store its tasks for the user.

    Day 1 of the plan is today.
    """
    start_time = time.time()

    request_log = RequestLog(
        endpoint="/api/plan",
        method="POST",
        client_ip=get_client_ip(request),
        user_id=body.user_id,
    )

    try:
        if not body.goal or not body.goal.strip() or body.user_id is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={
                    "error": "Missing goal or userId",
                    "code": ErrorCodes.INVALID_REQUEST,
                    "details": [],
                },
            )

        if await asyncio.to_thread(get_user_by_id, conn, body.user_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={
                    "error": "User not found",
                    "code": ErrorCodes.USER_NOT_FOUND,
                    "details": [f"userId: {body.user_id}"],
                },
            )

        entries = await planner.generate_plan(conn, body.user_id, body.goal.strip())

        # Log success
        request_log.status_code = 200
        request_log.tasks_generated = len(entries)
        request_log.total_hours = sum(entry.duration_hours for entry in entries)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        return PlanResponse(tasks=[PlannedTask(**entry.to_dict()) for entry in entries])

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
            for detail in e.detail.get("details", []):
                request_log.details.append(("validation_error", detail))
        else:
            request_log.error_message = str(e.detail)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        raise

    except planner.PlanGenerationError as e:
        status_code = PLAN_ERROR_STATUS.get(e.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        request_log.status_code = status_code
        request_log.error_code = e.code
        request_log.error_message = str(e)
        request_log.details.append(("llm_error" if e.code == ErrorCodes.LLM_ERROR else "warning", str(e)))
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        raise HTTPException(
            status_code=status_code,
            detail={
                "error": "Plan generation failed",
                "code": e.code,
                "details": [str(e)],
            },
        )

    except Exception as e:
        # Unexpected errors
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Plan generation failed",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    finally:
        # Always log the request
        try:
            await asyncio.to_thread(log_request, request_log)
        except Exception as e:
            # Don't fail the request if logging fails
            print(f"Failed to write request log: {e}")
