"""
OpenAI client with retry logic.

Provides cached sync and async client instances and a wrapper for
short LLM calls (domain detection) with automatic retries using tenacity.
Plan generation retries at the controller level instead, because a
schema-invalid plan must be retried the same way as a transport failure.
"""

import os
from typing import List, Dict, Optional

from openai import AsyncOpenAI, OpenAI
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)
from dotenv import load_dotenv
load_dotenv()

DEFAULT_MODEL = os.environ.get("JOURNALMATE_MODEL", "gpt-4.1-mini")

# Module-level caches for OpenAI clients
_client: Optional[OpenAI] = None
_async_client: Optional[AsyncOpenAI] = None


def _get_api_key() -> str:
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        raise ValueError(
            "OPENAI_API_KEY environment variable is not set. "
            "Please set it to your OpenAI API key."
        )
    return api_key


def get_cached_client() -> OpenAI:
    """
    Returns a cached instance of the OpenAI client.

    The client is created once and reused for all subsequent calls.
    """
    global _client
    if _client is None:
        _client = OpenAI(api_key=_get_api_key())
    return _client


def get_cached_async_client() -> AsyncOpenAI:
    """Returns a cached instance of the async OpenAI client."""
    global _async_client
    if _async_client is None:
        _async_client = AsyncOpenAI(api_key=_get_api_key())
    return _async_client


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type((Exception,)),
    reraise=True,
)
def call_llm(
    messages: List[Dict[str, str]],
    model: str = DEFAULT_MODEL,
    client: Optional[OpenAI] = None,
    json_mode: bool = False,
) -> str:
    """
    Call the OpenAI Chat Completion API with retry logic.

    Args:
        messages: List of message dicts with 'role' and 'content' keys
        model: Model identifier to use
        client: Optional OpenAI client instance. If not provided, uses cached client.
        json_mode: Request a JSON object response

    Returns:
        The assistant's response content as a string.

    Raises:
        Exception: If all retry attempts fail.
    """
    if client is None:
        client = get_cached_client()

    kwargs = {"model": model, "messages": messages}
    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    response = client.chat.completions.create(**kwargs)

    return (response.choices[0].message.content or "").strip()
