"""SQLite request logging for API."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from core.database import get_connection, insert_request_log


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    user_id: int | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    tasks_generated: int | None = None
    total_hours: float | None = None
    details: list[tuple[str, str]] = field(default_factory=list)  # (type, message)


def log_request(log: RequestLog) -> None:
    """Write request log to SQLite database."""
    conn = get_connection()
    try:
        insert_request_log(conn, log)
    finally:
        conn.close()
