"""
Plan text parsing.

Turns the language model's day-delimited schedule into dated task entries:

    DAY1:
    - Read chapter 1 @ 2
    - Practice problems @ 1.5
    DAY2:
    - Review notes @ 1

Lines that don't fit the grammar are dropped, never raised on.
"""

import math
import re
from datetime import date, datetime, timedelta

from models.schedule import ClassifiedLine, DayMarker, ScheduleEntry, TaskLine, Unrecognized

LINE_SPLIT_RE = re.compile(r"\r?\n")

# "DAY3", "Day 3:", "day3 - revision" -> 3. Digits are ASCII 0-9 only.
DAY_MARKER_RE = re.compile(r"^DAY\s*(\d+)", re.IGNORECASE | re.ASCII)

# "- Maths @ 2", "• English@1.5". The description is non-greedy, so the first
# '@' followed by a number is the separator; anything after the number is ignored.
TASK_LINE_RE = re.compile(r"^[-•]\s*(.+?)\s*@\s*(\d+(?:\.\d*)?|\.\d+)", re.ASCII)

NO_DAY = -1

# timedelta caps out at 999999999 days; any longer day number can't be dated
MAX_DAY_DIGITS = 9
OUT_OF_RANGE_DAY = 10**MAX_DAY_DIGITS


def parse_day_number(digits: str) -> int:
    """Day number from its digits, clamped past the datable range."""
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_DAY_DIGITS:
        return OUT_OF_RANGE_DAY
    return int(digits)


def split_lines(raw_text: str) -> list[str]:
    """Split on LF or CRLF, strip each line and drop blanks."""
    lines = []
    for line in LINE_SPLIT_RE.split(raw_text):
        line = line.strip()
        if line:
            lines.append(line)
    return lines


def parse_hours(token: str) -> float | None:
    """Convert an hours token, or None if it isn't a usable duration."""
    try:
        hours = float(token)
    except ValueError:
        return None
    if not math.isfinite(hours) or hours < 0:
        return None
    return hours


def classify_line(line: str) -> ClassifiedLine:
    """
    Classify one stripped line.

    The day-marker check runs first, so a line matching both patterns is
    always a DayMarker.
    """
    day_match = DAY_MARKER_RE.match(line)
    if day_match:
        return DayMarker(number=parse_day_number(day_match.group(1)))

    task_match = TASK_LINE_RE.match(line)
    if task_match:
        description = task_match.group(1).strip()
        hours = parse_hours(task_match.group(2))
        if description and hours is not None:
            return TaskLine(description=description, hours=hours)

    return Unrecognized(text=line)


def to_calendar_date(reference_date: date | datetime | None) -> date:
    """Reduce the reference to its calendar date. Defaults to today."""
    if reference_date is None:
        return date.today()
    if isinstance(reference_date, datetime):
        return reference_date.date()
    return reference_date


def advance(
    day_index: int, line: ClassifiedLine, start: date
) -> tuple[int, ScheduleEntry | None]:
    """
    Apply one classified line to the scan state.

    Returns the new day index and the entry to emit, if any:
    - DayMarker sets the day index (last marker wins, no sorting)
    - TaskLine emits an entry only once a day has been declared
    - anything else leaves the state untouched
    """
    if isinstance(line, DayMarker):
        return line.day_index, None

    if isinstance(line, TaskLine) and day_index >= 0:
        try:
            entry_date = start + timedelta(days=day_index)
        except OverflowError:
            # Day number past date.max
            return day_index, None
        return day_index, ScheduleEntry(
            task=line.description,
            duration_hours=line.hours,
            date=entry_date.isoformat(),
        )

    return day_index, None


def parse_schedule_text(
    raw_text: str | None, reference_date: date | datetime | None = None
) -> list[ScheduleEntry]:
    """
    Parse plan text into schedule entries, in source order.

    Day N's tasks are dated reference_date + (N - 1) days. Only the calendar
    date of the reference matters; a datetime's time of day and tzinfo are
    ignored. Empty, malformed or entirely unrecognized text gives [].
    """
    if not raw_text:
        return []

    start = to_calendar_date(reference_date)
    day_index = NO_DAY
    entries = []

    for line in split_lines(raw_text):
        day_index, entry = advance(day_index, classify_line(line), start)
        if entry is not None:
            entries.append(entry)

    return entries
