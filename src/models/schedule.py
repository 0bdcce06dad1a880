"""
Data models for parsed schedules and stored rows.

Parsed values are frozen dataclasses so a parse result can be handed to the
caller without copying. Database rows use TypedDict like the rest of the
persistence layer.
"""

from dataclasses import dataclass
from typing import TypedDict


@dataclass(frozen=True)
class ScheduleEntry:
    """One task anchored to a calendar date."""

    task: str
    duration_hours: float
    date: str  # YYYY-MM-DD

    def to_dict(self) -> dict:
        return {"task": self.task, "duration": self.duration_hours, "date": self.date}


# =============================================================================
# LINE CLASSIFICATION
# =============================================================================


@dataclass(frozen=True)
class DayMarker:
    """'DAY<n>' header. Tasks that follow belong to day `number` (1-based)."""

    number: int

    @property
    def day_index(self) -> int:
        return self.number - 1


@dataclass(frozen=True)
class TaskLine:
    """'- <description> @ <hours>' bullet."""

    description: str
    hours: float


@dataclass(frozen=True)
class Unrecognized:
    """Anything else: prose, headings, malformed bullets."""

    text: str


ClassifiedLine = DayMarker | TaskLine | Unrecognized


# =============================================================================
# DATABASE ROWS
# =============================================================================


class UserRow(TypedDict):
    """Stored account."""
    id: int
    email: str
    password: str
    created_at: str


class TaskRow(TypedDict):
    """Stored task, as returned to API clients."""
    id: int
    user_id: int
    task: str
    duration: float
    date: str
    done: bool
    created_at: str
