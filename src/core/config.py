"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(
    os.environ.get("PLANNER_DB_PATH", str(PROJECT_ROOT / "data" / "db" / "time-planner.db"))
)

# =============================================================================
# PLAN GENERATION (DeepSeek, OpenAI-compatible chat completions)
# =============================================================================

DEEPSEEK_API_KEY = os.environ.get("DEEPSEEK_API_KEY", "")
LLM_BASE_URL = os.environ.get("LLM_BASE_URL", "https://api.deepseek.com/v1")
LLM_MODEL = os.environ.get("LLM_MODEL", "deepseek-chat")
LLM_TIMEOUT_SECONDS = float(os.environ.get("LLM_TIMEOUT_SECONDS", "60"))

PLAN_DAYS = int(os.environ.get("PLAN_DAYS", "7"))
SYSTEM_PROMPT = "You are a helpful assistant."

# =============================================================================
# ACCOUNTS
# =============================================================================

# First scheme is used for new hashes; bcrypt hashes (e.g. from bcryptjs) still verify
PASSWORD_SCHEMES = ["pbkdf2_sha256", "bcrypt"]

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("PORT", "3000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
PUBLIC_BASE_URL = os.environ.get("RENDER_EXTERNAL_URL", f"http://localhost:{API_PORT}")
API_VERSION = "1.0.0"
