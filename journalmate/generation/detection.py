"""
Domain detection for free-text planning goals.

Classification is best-effort: an unknown label, a malformed response or
an LLM failure all resolve to the default domain so a session can always
start.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from journalmate.domains.registry import resolve_domain
from journalmate.domains.schemas import DEFAULT_DOMAIN, Domain
from journalmate.generation.prompts import build_detection_system_prompt
from journalmate.generation.schemas import DomainDetection
from journalmate.shared.llm.client import DEFAULT_MODEL, call_llm
from journalmate.shared.llm.parsing import load_json_response


logger = logging.getLogger(__name__)

LLMCall = Callable[[List[Dict[str, str]]], str]


def _clamp_confidence(value: Any) -> float:
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return 0.0
    return min(max(confidence, 0.0), 1.0)


class DomainDetector:
    """
    Classifies a planning request into one of the known domains.

    Args:
        llm_call: Callable taking chat messages and returning the model's
            text. Defaults to the shared ``call_llm`` in JSON mode.
        model: Model identifier used with the default callable
    """

    def __init__(self, llm_call: Optional[LLMCall] = None, model: str = DEFAULT_MODEL):
        self.model = model
        self._llm_call = llm_call or self._default_call

    def _default_call(self, messages: List[Dict[str, str]]) -> str:
        return call_llm(messages, model=self.model, json_mode=True)

    def detect(self, text: Optional[str]) -> DomainDetection:
        """
        Classify ``text``.

        Args:
            text: User's free-text planning goal

        Returns:
            DomainDetection; ``fallback`` is True when the default domain
            was used because classification was impossible
        """
        if not text or not text.strip():
            return DomainDetection(domain=DEFAULT_DOMAIN, fallback=True)

        messages = [
            {"role": "system", "content": build_detection_system_prompt()},
            {"role": "user", "content": f"Classify this request:\n\n{text.strip()}"},
        ]

        try:
            raw = self._llm_call(messages)
            data = load_json_response(raw)
        except Exception as e:
            logger.warning(f"Domain detection failed, using {DEFAULT_DOMAIN.value}: {e}")
            return DomainDetection(domain=DEFAULT_DOMAIN, fallback=True)

        if not isinstance(data, dict):
            return DomainDetection(domain=DEFAULT_DOMAIN, fallback=True)

        label = data.get("domain")
        is_known = isinstance(label, str) and label.strip().lower() in {d.value for d in Domain}
        domain = resolve_domain(label)

        logger.info(
            f"Detected domain '{domain.value}' | label={label!r}, "
            f"confidence={data.get('confidence')}"
        )

        return DomainDetection(
            domain=domain,
            confidence=_clamp_confidence(data.get("confidence")) if is_known else 0.0,
            fallback=not is_known,
        )
