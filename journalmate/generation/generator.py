"""
Plan generator backed by the OpenAI Chat Completion API.

The generator only produces raw output; retries, timeouts and contract
validation are handled by the slot-filling controller.
"""

import logging
import time
from typing import Any, Dict, Optional, Protocol, Union, runtime_checkable

from openai import AsyncOpenAI

from journalmate.generation.prompts import build_plan_system_prompt, build_plan_user_prompt
from journalmate.generation.schemas import GenerationRequest
from journalmate.shared.llm.client import DEFAULT_MODEL, get_cached_async_client


logger = logging.getLogger(__name__)


@runtime_checkable
class PlanGenerator(Protocol):
    """Anything that turns a generation request into raw plan output."""

    async def generate(self, request: GenerationRequest) -> Union[str, Dict[str, Any]]:
        ...


class OpenAIPlanGenerator:
    """Generates plans with a single JSON-mode chat completion."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        client: Optional[AsyncOpenAI] = None,
        temperature: float = 0.4,
    ):
        self.model = model
        self.temperature = temperature
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = get_cached_async_client()
        return self._client

    async def generate(self, request: GenerationRequest) -> str:
        """
        Request a plan for a ready session.

        Args:
            request: Domain, mode and collected answers

        Returns:
            Raw JSON text from the model
        """
        _log = f"[session={request.session_id}] [generator=openai] "

        messages = [
            {"role": "system", "content": build_plan_system_prompt()},
            {"role": "user", "content": build_plan_user_prompt(request)},
        ]

        start_time = time.perf_counter()
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            response_format={"type": "json_object"},
        )
        duration_ms = (time.perf_counter() - start_time) * 1000

        usage = response.usage
        logger.info(
            f"{_log}Completion received in {duration_ms:.0f}ms | model={self.model}, "
            f"prompt_tokens={getattr(usage, 'prompt_tokens', None)}, "
            f"completion_tokens={getattr(usage, 'completion_tokens', None)}"
        )

        return response.choices[0].message.content or ""
