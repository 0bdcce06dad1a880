"""API route modules."""

from .auth import router as auth_router
from .health import router as health_router
from .plans import router as plans_router
from .tasks import router as tasks_router

__all__ = ["health_router", "auth_router", "plans_router", "tasks_router"]
