"""
Unit tests for domain detection and generation prompts.
"""

import pytest

from journalmate.domains.schemas import Domain
from journalmate.generation.detection import DomainDetector
from journalmate.generation.prompts import (
    build_detection_system_prompt,
    build_plan_system_prompt,
    build_plan_user_prompt,
)
from journalmate.generation.schemas import GenerationRequest


def _detector(response):
    def llm_call(messages):
        if isinstance(response, Exception):
            raise response
        return response

    return DomainDetector(llm_call=llm_call)


class TestDomainDetector:
    """Tests for DomainDetector.detect."""

    def test_known_domain(self):
        detection = _detector('{"domain": "event", "confidence": 0.92}').detect(
            "Help me plan my mom's 60th birthday"
        )
        assert detection.domain is Domain.EVENT
        assert detection.confidence == pytest.approx(0.92)
        assert detection.fallback is False

    def test_fenced_response(self):
        detection = _detector('```json\n{"domain": "Dining", "confidence": 0.8}\n```').detect(
            "dinner for six on Friday"
        )
        assert detection.domain is Domain.DINING

    def test_unknown_label_falls_back_to_travel(self):
        detection = _detector('{"domain": "gardening", "confidence": 0.9}').detect("plant tomatoes")
        assert detection.domain is Domain.TRAVEL
        assert detection.fallback is True
        assert detection.confidence == 0.0

    def test_llm_failure_falls_back_to_travel(self):
        detection = _detector(RuntimeError("rate limited")).detect("plan a trip")
        assert detection.domain is Domain.TRAVEL
        assert detection.fallback is True

    def test_unparseable_response_falls_back_to_travel(self):
        detection = _detector("I think this is about travel").detect("plan a trip")
        assert detection.domain is Domain.TRAVEL
        assert detection.fallback is True

    def test_empty_text_skips_llm(self):
        detection = _detector(RuntimeError("should not be called")).detect("   ")
        assert detection.domain is Domain.TRAVEL
        assert detection.fallback is True

    def test_confidence_clamped(self):
        detection = _detector('{"domain": "work", "confidence": 7}').detect("quarterly report")
        assert detection.confidence == 1.0


class TestPrompts:
    """Tests for generation prompt building."""

    def test_system_prompt_lists_contract(self):
        prompt = build_plan_system_prompt()
        assert '"timeEstimate"' in prompt
        assert '"travel"' in prompt
        assert "{categories}" not in prompt

    def test_user_prompt_includes_answers(self):
        request = GenerationRequest(
            domain="event",
            mode="quick",
            collectedFields={"eventType": "birthday", "guestCount": "50"},
            context={"honoree": "mom"},
        )
        prompt = build_plan_user_prompt(request)
        assert "Domain: event" in prompt
        assert '"guestCount": "50"' in prompt
        assert "honoree" in prompt

    def test_detection_prompt_lists_all_domains(self):
        prompt = build_detection_system_prompt()
        for domain in Domain:
            assert f"- {domain.value}" in prompt
