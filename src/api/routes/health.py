"""Health check endpoint."""

import sqlite3
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION, DEEPSEEK_API_KEY
from core.database import get_connection

router = APIRouter()


def database_available() -> bool:
    """True if the tasks table can be queried."""
    try:
        conn = get_connection()
    except sqlite3.Error:
        return False
    try:
        conn.execute("SELECT 1 FROM tasks LIMIT 1").fetchall()
        return True
    except sqlite3.Error:
        return False
    finally:
        conn.close()


@router.get("/health", response_model=HealthResponse)
def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 if healthy, 503 if unhealthy.
    """
    db_ok = database_available()
    timestamp = datetime.now(timezone.utc).isoformat()

    if db_ok:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            database_available=True,
            llm_configured=bool(DEEPSEEK_API_KEY),
            timestamp=timestamp,
        )
    else:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                database_available=False,
                llm_configured=bool(DEEPSEEK_API_KEY),
                timestamp=timestamp,
                error="Database not available",
            ).model_dump(),
        )
