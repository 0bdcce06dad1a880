"""Pydantic request and response models for API endpoints."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    database_available: bool
    llm_configured: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    USER_EXISTS = "USER_EXISTS"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    EMPTY_PLAN = "EMPTY_PLAN"
    LLM_ERROR = "LLM_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# REQUESTS
# =============================================================================


class Credentials(BaseModel):
    """Register/login body."""

    email: str = Field(min_length=3)
    password: str = Field(min_length=1)


class PlanRequest(BaseModel):
    """Plan generation body. Both fields are checked in the route."""

    model_config = ConfigDict(populate_by_name=True)

    goal: str | None = None
    user_id: int | None = Field(default=None, alias="userId")


class TaskCreate(BaseModel):
    """Manual task body."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    task: str = Field(min_length=1)
    duration: float = Field(ge=0)
    date: date


class TaskDoneUpdate(BaseModel):
    done: bool


# =============================================================================
# RESPONSES
# =============================================================================


class UserIdResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(serialization_alias="userId")


class SuccessResponse(BaseModel):
    success: bool = True


class PlannedTask(BaseModel):
    task: str
    duration: float
    date: str


class PlanResponse(BaseModel):
    success: bool = True
    tasks: list[PlannedTask]


class TaskResponse(BaseModel):
    """Stored task as returned by GET /api/tasks/{user_id}."""

    id: int
    user_id: int
    task: str
    duration: float
    date: str
    done: bool
    created_at: str | None = None
