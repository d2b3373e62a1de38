"""
Configuration for the slot-filling controller.

Centralizes tuning for the turn graph and plan generation, so behavior
can change without touching the controller wiring.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class SlotFillingConfig:
    """
    Configuration for the slot-filling controller.

    Attributes:
        recursion_limit: Maximum number of graph steps per turn
        max_generation_attempts: Generator calls before a session is abandoned
        generation_timeout: Seconds allowed for one generator call
        retry_min_wait: Minimum backoff between generation attempts
        retry_max_wait: Maximum backoff between generation attempts
        model: LLM model used for generation and domain detection
    """

    # Graph execution limits
    recursion_limit: int = 10

    # Generation rules
    max_generation_attempts: int = 2
    generation_timeout: float = 60  # seconds

    # Retry configuration (tenacity backoff between attempts)
    retry_min_wait: float = 2  # seconds
    retry_max_wait: float = 10  # seconds

    # LLM configuration
    model: str = os.getenv("JOURNALMATE_MODEL", "gpt-4.1-mini")


# Default configuration instance
DEFAULT_CONFIG = SlotFillingConfig()


def get_config(
    recursion_limit: Optional[int] = None,
    max_generation_attempts: Optional[int] = None,
    generation_timeout: Optional[float] = None,
    retry_min_wait: Optional[float] = None,
    retry_max_wait: Optional[float] = None,
    model: Optional[str] = None,
) -> SlotFillingConfig:
    """
    Create a configuration with optional overrides.

    Args:
        recursion_limit: Override for recursion limit
        max_generation_attempts: Override for generation attempts
        generation_timeout: Override for per-attempt timeout
        retry_min_wait: Override for minimum backoff
        retry_max_wait: Override for maximum backoff
        model: Override for LLM model

    Returns:
        SlotFillingConfig with specified overrides applied
    """
    return SlotFillingConfig(
        recursion_limit=recursion_limit
        if recursion_limit is not None
        else DEFAULT_CONFIG.recursion_limit,
        max_generation_attempts=max_generation_attempts
        if max_generation_attempts is not None
        else DEFAULT_CONFIG.max_generation_attempts,
        generation_timeout=generation_timeout
        if generation_timeout is not None
        else DEFAULT_CONFIG.generation_timeout,
        retry_min_wait=retry_min_wait
        if retry_min_wait is not None
        else DEFAULT_CONFIG.retry_min_wait,
        retry_max_wait=retry_max_wait
        if retry_max_wait is not None
        else DEFAULT_CONFIG.retry_max_wait,
        model=model or DEFAULT_CONFIG.model,
    )
