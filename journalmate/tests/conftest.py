"""Shared fixtures for planning tests."""

import pytest

from journalmate.domains.registry import build_default_registry
from journalmate.slot_filling.controller import SlotFillingController
from journalmate.slot_filling.graph.config import SlotFillingConfig


VALID_PLAN = {
    "activity": {
        "title": "Spain Trip: Barcelona & Madrid",
        "category": "Travel",
        "summary": "Two weeks across Barcelona and Madrid in November",
    },
    "tasks": [
        {
            "title": "Book roundtrip flights to Barcelona",
            "category": "travel",
            "priority": "high",
            "timeEstimate": "1 hour",
            "order": 1,
        },
        {
            "title": "Reserve Sagrada Familia tickets",
            "description": "Timed entry sells out; book the 10am slot",
            "category": "travel",
            "priority": "medium",
            "timeEstimate": "20 min",
            "order": 2,
        },
        {
            "title": "Check the November weather forecast for Madrid",
            "category": "travel",
            "priority": "low",
            "timeEstimate": "10 min",
            "order": 3,
        },
    ],
}


class FakeGenerator:
    """Plan generator returning canned responses, raising any that are exceptions."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    async def generate(self, request):
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def fast_config():
    return SlotFillingConfig(
        generation_timeout=0.2,
        retry_min_wait=0,
        retry_max_wait=0,
    )


@pytest.fixture
def controller(registry, fast_config):
    return SlotFillingController(registry, generator=FakeGenerator(VALID_PLAN), config=fast_config)
