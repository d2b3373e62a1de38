"""
Tests for plan generation through the session controller.

Generators are fakes; no network calls are made. Async paths are driven
with asyncio.run.
"""

import asyncio
import json

import pytest

from journalmate.shared.errors import (
    USER_FACING_GENERATION_FAILURE,
    InvalidSessionStateError,
    PlanGenerationFailedError,
)
from journalmate.slot_filling.controller import SlotFillingController
from journalmate.slot_filling.graph.config import SlotFillingConfig
from journalmate.slot_filling.schemas import PlanMode, SessionStatus

from conftest import VALID_PLAN, FakeGenerator


class SlowGenerator:
    """Generator that takes longer than the configured timeout."""

    def __init__(self, delay=5.0):
        self.delay = delay
        self.calls = 0

    async def generate(self, request):
        self.calls += 1
        await asyncio.sleep(self.delay)
        return VALID_PLAN


class FailingGenerator:
    """Generator that always raises."""

    def __init__(self):
        self.calls = 0

    async def generate(self, request):
        self.calls += 1
        raise RuntimeError("upstream 503")


def _ready_session(controller):
    session = controller.start_session(
        "event",
        PlanMode.QUICK,
        {"eventType": "birthday party", "date": "March 14", "guestCount": "50"},
    )
    assert session.status is SessionStatus.READY
    return session


def _controller(registry, config, generator):
    return SlotFillingController(registry, generator=generator, config=config)


class TestSuccessfulGeneration:
    """Valid plans complete the session."""

    def test_first_attempt_success(self, registry, fast_config):
        generator = FakeGenerator(VALID_PLAN)
        controller = _controller(registry, fast_config, generator)
        session = _ready_session(controller)

        plan = asyncio.run(controller.generate_plan(session))

        assert plan is not None
        assert session.status is SessionStatus.COMPLETE
        assert session.plan == plan
        assert session.generation_attempts == 1
        assert generator.requests[0].collected_fields == session.collected_fields

    def test_retry_then_success(self, registry, fast_config):
        generator = FakeGenerator(RuntimeError("upstream 503"), json.dumps(VALID_PLAN))
        controller = _controller(registry, fast_config, generator)
        session = _ready_session(controller)

        plan = asyncio.run(controller.generate_plan(session))

        assert len(plan.tasks) == 3
        assert session.status is SessionStatus.COMPLETE
        assert session.generation_attempts == 2

    def test_schema_invalid_response_is_retried(self, registry, fast_config):
        bad = json.loads(json.dumps(VALID_PLAN))
        bad["tasks"][2]["order"] = 4
        generator = FakeGenerator(bad, VALID_PLAN)
        controller = _controller(registry, fast_config, generator)
        session = _ready_session(controller)

        asyncio.run(controller.generate_plan(session))

        assert session.status is SessionStatus.COMPLETE
        assert session.generation_attempts == 2


class TestFailedGeneration:
    """Exhausted attempts abandon the session with a user-safe error."""

    def test_two_failures_abandon_session(self, registry, fast_config):
        generator = FakeGenerator(RuntimeError("boom"), RuntimeError("boom again"), VALID_PLAN)
        controller = _controller(registry, fast_config, generator)
        session = _ready_session(controller)

        with pytest.raises(PlanGenerationFailedError) as exc_info:
            asyncio.run(controller.generate_plan(session))

        assert exc_info.value.user_message == USER_FACING_GENERATION_FAILURE
        assert exc_info.value.attempts == 2
        assert session.status is SessionStatus.ABANDONED
        assert session.plan is None
        assert len(generator.requests) == 2

    def test_invalid_responses_count_as_failures(self, registry, fast_config):
        generator = FakeGenerator("not json at all", {"activity": {}, "tasks": []})
        controller = _controller(registry, fast_config, generator)
        session = _ready_session(controller)

        with pytest.raises(PlanGenerationFailedError):
            asyncio.run(controller.generate_plan(session))
        assert session.status is SessionStatus.ABANDONED

    def test_timeouts_count_as_failures(self, registry, fast_config):
        generator = SlowGenerator(delay=5.0)
        controller = _controller(registry, fast_config, generator)
        session = _ready_session(controller)

        with pytest.raises(PlanGenerationFailedError):
            asyncio.run(controller.generate_plan(session))

        assert generator.calls == 2
        assert session.status is SessionStatus.ABANDONED

    def test_generation_requires_ready_session(self, registry, fast_config):
        controller = _controller(registry, fast_config, FakeGenerator(VALID_PLAN))
        session = controller.start_session("event", PlanMode.QUICK)

        with pytest.raises(InvalidSessionStateError):
            asyncio.run(controller.generate_plan(session))
        assert session.status is SessionStatus.COLLECTING


class TestCancellation:
    """Cancelled generation abandons the session and discards late results."""

    def test_cancel_during_generation(self, registry, fast_config):
        controller = _controller(registry, fast_config, SlowGenerator(delay=0.1))
        session = _ready_session(controller)

        async def scenario():
            task = asyncio.create_task(controller.generate_plan(session))
            await asyncio.sleep(0.01)
            assert session.status is SessionStatus.GENERATING
            controller.cancel(session)
            return await task

        result = asyncio.run(scenario())

        assert result is None
        assert session.status is SessionStatus.ABANDONED
        assert session.plan is None

    def test_caller_cancellation_propagates(self, registry, fast_config):
        controller = _controller(registry, fast_config, SlowGenerator(delay=0.1))
        session = _ready_session(controller)

        async def scenario():
            task = asyncio.create_task(controller.generate_plan(session))
            await asyncio.sleep(0.01)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(scenario())

        assert session.status is SessionStatus.ABANDONED
        assert session.plan is None

    def test_result_after_cancel_is_discarded(self, registry, fast_config):
        session_holder = {}

        class CancellingGenerator:
            async def generate(self, request):
                controller.cancel(session_holder["session"])
                return VALID_PLAN

        controller = _controller(registry, fast_config, CancellingGenerator())
        session = _ready_session(controller)
        session_holder["session"] = session

        result = asyncio.run(controller.generate_plan(session))

        assert result is None
        assert session.status is SessionStatus.ABANDONED
        assert session.plan is None

    def test_cancel_on_complete_session_is_noop(self, registry, fast_config):
        controller = _controller(registry, fast_config, FakeGenerator(VALID_PLAN))
        session = _ready_session(controller)
        asyncio.run(controller.generate_plan(session))

        controller.cancel(session)
        assert session.status is SessionStatus.COMPLETE

    def test_cancel_during_retry_backoff_stops_generation(self, registry):
        """Cancelling between attempts skips the remaining attempts without an error."""
        config = SlotFillingConfig(generation_timeout=0.5, retry_min_wait=0.2, retry_max_wait=0.2)
        generator = FailingGenerator()
        controller = _controller(registry, config, generator)
        session = _ready_session(controller)

        async def scenario():
            task = asyncio.create_task(controller.generate_plan(session))
            await asyncio.sleep(0.1)
            assert generator.calls == 1
            controller.cancel(session)
            return await task

        result = asyncio.run(scenario())

        assert result is None
        assert generator.calls == 1
        assert session.status is SessionStatus.ABANDONED
        assert session.plan is None
