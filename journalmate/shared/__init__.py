"""
Shared infrastructure for the planning core.

Modules:
- llm: OpenAI clients with retry logic and JSON extraction
- logging: Structured JSON logging
- contracts: Plan output contract validated before plans are surfaced
- errors: Exception hierarchy
"""

from journalmate.shared.llm.client import get_cached_client, call_llm
from journalmate.shared.logging.config import setup_logging, log_state_transition

__all__ = [
    "get_cached_client",
    "call_llm",
    "setup_logging",
    "log_state_transition",
]
