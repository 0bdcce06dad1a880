"""
DeepSeek chat client setup with lazy initialization.

DeepSeek speaks the OpenAI chat-completions protocol, so the openai SDK is
pointed at its base URL.
"""

from openai import AsyncOpenAI

from core.config import DEEPSEEK_API_KEY, LLM_BASE_URL, LLM_TIMEOUT_SECONDS

_llm_client: AsyncOpenAI | None = None


def get_llm_client() -> AsyncOpenAI:
    """Get or create the chat client (lazy initialization)."""
    global _llm_client
    if not DEEPSEEK_API_KEY:
        raise RuntimeError("DEEPSEEK_API_KEY is not set")
    if _llm_client is None:
        _llm_client = AsyncOpenAI(
            api_key=DEEPSEEK_API_KEY,
            base_url=LLM_BASE_URL,
            timeout=LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )
    return _llm_client
