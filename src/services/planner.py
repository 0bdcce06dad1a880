"""
Study plan generation: prompt the language model, parse its schedule, store it.
"""

import asyncio
import sqlite3
from datetime import date

from api.models.responses import ErrorCodes
from core.config import LLM_MODEL, PLAN_DAYS, SYSTEM_PROMPT
from core.database import insert_tasks
from core.llm_client import get_llm_client
from core.schedule_parser import parse_schedule_text
from models.schedule import ScheduleEntry


class PlanGenerationError(Exception):
    """Plan could not be produced. `code` is one of ErrorCodes."""

    def __init__(self, message: str, code: str = ErrorCodes.LLM_ERROR):
        super().__init__(message)
        self.code = code


def build_plan_prompt(goal: str, days: int = PLAN_DAYS) -> str:
    """
    Build the planning prompt.

    The format block is what parse_schedule_text expects: a 'DAY<n>:' header
    per day followed by '- <description> @ <hours>' bullets.
    """
    return (
        "You are a supportive study-planning assistant.\n"
        f'The user goal is: "{goal}".\n'
        f"Return a {days}-day schedule. STRICT FORMAT:\n"
        "DAY1:\n- Task description @ hours\nDAY2:\n...\n"
        "Respond only with the schedule."
    )


async def request_plan_text(goal: str) -> str:
    """Ask the model for a schedule and return the raw reply text."""
    try:
        client = get_llm_client()
    except RuntimeError as e:
        raise PlanGenerationError(str(e), code=ErrorCodes.INTERNAL_ERROR) from e

    try:
        completion = await client.chat.completions.create(
            model=LLM_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_plan_prompt(goal)},
            ],
        )
    except Exception as e:
        print(f"[PLAN LLM ERROR] model={LLM_MODEL} error={e}")
        raise PlanGenerationError(f"Language model request failed: {e}") from e

    if not completion.choices:
        return ""
    return completion.choices[0].message.content or ""


async def generate_plan(
    conn: sqlite3.Connection,
    user_id: int,
    goal: str,
    start_date: date | None = None,
) -> list[ScheduleEntry]:
    """
    Generate and store a plan for a user.

    Day 1 is start_date (today by default). Raises PlanGenerationError with
    EMPTY_PLAN when the reply contains no usable task lines; nothing is
    stored in that case.
    """
    plan_text = await request_plan_text(goal)
    entries = parse_schedule_text(plan_text, start_date or date.today())

    if not entries:
        raise PlanGenerationError(
            "No tasks could be extracted from the generated plan",
            code=ErrorCodes.EMPTY_PLAN,
        )

    await asyncio.to_thread(insert_tasks, conn, user_id, entries)
    return entries
