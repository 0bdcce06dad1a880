"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Point the app at a throwaway database before core.config is imported.
# An empty API key keeps a local .env from enabling real model calls.
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="time-planner-tests-"))
os.environ["PLANNER_DB_PATH"] = str(_TEST_DB_DIR / "test.db")
os.environ["DEEPSEEK_API_KEY"] = ""

from core.config import DB_PATH  # noqa: E402
from core.database import get_connection, init_schema  # noqa: E402


SAMPLE_PLAN = """DAY1:
- Read chapter 1 @ 2
- Practice problems @ 1.5
DAY2:
- Review notes @ 1
"""


@pytest.fixture
def fresh_db():
    """Empty database with the schema applied."""
    DB_PATH.unlink(missing_ok=True)
    conn = get_connection()
    try:
        init_schema(conn)
    finally:
        conn.close()
    yield DB_PATH
    DB_PATH.unlink(missing_ok=True)


@pytest.fixture
def db_conn(fresh_db):
    # Plan writes run in a worker thread, like the per-request API connection
    conn = get_connection(check_same_thread=False)
    yield conn
    conn.close()


@pytest.fixture
def client(fresh_db):
    from fastapi.testclient import TestClient

    from api.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_plan():
    """The canonical two-day plan reply."""
    return SAMPLE_PLAN


@pytest.fixture
def stub_plan_text(monkeypatch):
    """Replace the model call with a canned reply. Returns the list of goals asked for."""
    from services import planner

    goals = []

    def install(text):
        async def fake_request_plan_text(goal):
            goals.append(goal)
            return text

        monkeypatch.setattr(planner, "request_plan_text", fake_request_plan_text)
        return goals

    return install
