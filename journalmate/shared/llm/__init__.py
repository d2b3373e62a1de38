"""LLM client utilities."""

from journalmate.shared.llm.client import (
    get_cached_client,
    get_cached_async_client,
    call_llm,
)
from journalmate.shared.llm.parsing import extract_json_from_response, load_json_response

__all__ = [
    "get_cached_client",
    "get_cached_async_client",
    "call_llm",
    "extract_json_from_response",
    "load_json_response",
]
