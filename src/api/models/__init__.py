"""API Pydantic models."""

from .responses import (
    Credentials,
    ErrorCodes,
    ErrorResponse,
    HealthResponse,
    PlannedTask,
    PlanRequest,
    PlanResponse,
    SuccessResponse,
    TaskCreate,
    TaskDoneUpdate,
    TaskResponse,
    UserIdResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ErrorCodes",
    "Credentials",
    "PlanRequest",
    "PlanResponse",
    "PlannedTask",
    "SuccessResponse",
    "TaskCreate",
    "TaskDoneUpdate",
    "TaskResponse",
    "UserIdResponse",
]
