"""
Session controller for slot-filling planning.

Owns the planning session lifecycle:

    collecting → ready → generating → complete
         └──────────┴────────┴──────→ abandoned

Each user turn runs the compiled LangGraph turn graph (record answer,
select next question, check readiness). Plan generation is the only
awaiting operation; it is retried with tenacity, bounded by
``asyncio.wait_for``, and its output is validated before the session is
completed.
"""

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Set, Tuple

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from journalmate.domains.registry import DomainKey, DomainQuestionRegistry, get_default_registry, resolve_domain
from journalmate.domains.schemas import has_value
from journalmate.generation.generator import OpenAIPlanGenerator, PlanGenerator
from journalmate.generation.schemas import GenerationRequest
from journalmate.shared.contracts.plan_output import PlanOutputV1, validate_plan_output
from journalmate.shared.errors import (
    InvalidSessionStateError,
    PlanGenerationFailedError,
    RegistryIntegrityError,
)
from journalmate.shared.logging.config import log_state_transition
from journalmate.slot_filling.graph.build import create_slot_filling_graph
from journalmate.slot_filling.graph.config import DEFAULT_CONFIG, SlotFillingConfig
from journalmate.slot_filling.schemas import (
    PlanMode,
    PlanningSession,
    SessionStatus,
    SlotFillingState,
    SubmitAnswerResult,
)


logger = logging.getLogger(__name__)


class SlotFillingController:
    """
    Drives planning sessions one question at a time.

    The registry is shared and read-only; each session is owned by a
    single conversation and mutated only through this controller.

    Args:
        registry: Domain question registry. Uses the bundled catalog if omitted.
        generator: Plan generator. Defaults to OpenAIPlanGenerator on first use.
        config: Controller configuration. Uses DEFAULT_CONFIG if omitted.
    """

    def __init__(
        self,
        registry: Optional[DomainQuestionRegistry] = None,
        generator: Optional[PlanGenerator] = None,
        config: Optional[SlotFillingConfig] = None,
    ):
        self.registry = registry or get_default_registry()
        self.config = config or DEFAULT_CONFIG
        self._generator = generator
        self._graph = create_slot_filling_graph(self.registry, self.config)
        self._inflight: Dict[str, asyncio.Task] = {}
        self._cancelled: Set[str] = set()

    @property
    def generator(self) -> PlanGenerator:
        if self._generator is None:
            self._generator = OpenAIPlanGenerator(model=self.config.model)
        return self._generator

    # =========================================================================
    # Collecting
    # =========================================================================

    def start_session(
        self,
        domain_hint: DomainKey = None,
        mode: PlanMode = PlanMode.QUICK,
        initial_fields: Optional[Mapping[str, Any]] = None,
    ) -> PlanningSession:
        """Create a session; see ``open_session``."""
        session, _ = self.open_session(domain_hint, mode, initial_fields)
        return session

    def open_session(
        self,
        domain_hint: DomainKey = None,
        mode: PlanMode = PlanMode.QUICK,
        initial_fields: Optional[Mapping[str, Any]] = None,
    ) -> Tuple[PlanningSession, SubmitAnswerResult]:
        """
        Create a session and compute its first question.

        Args:
            domain_hint: Domain key; unknown or missing values fall back to travel
            mode: Quick or Smart, fixed for the life of the session
            initial_fields: Values already extracted upstream. Keys that are
                fields of the domain are collected; anything else is kept as
                context for question placeholders.

        Returns:
            The new session, already ``ready`` if nothing needs asking, and
            the result of its first turn
        """
        domain = resolve_domain(domain_hint)
        mode = PlanMode(mode)
        field_names = set(self.registry.get_field_names_for_domain(domain))

        collected: Dict[str, Any] = {}
        context: Dict[str, Any] = {}
        for key, value in (initial_fields or {}).items():
            if not has_value(value):
                continue
            if key in field_names:
                collected[key] = value
            else:
                context[key] = value

        session = PlanningSession(
            domain=domain,
            mode=mode,
            collected_fields=collected,
            context=context,
        )

        if isinstance(domain_hint, str) and domain_hint.strip().lower() != domain.value:
            logger.info(
                f"[session={session.session_id}] Unknown domain {domain_hint!r}, "
                f"using '{domain.value}'"
            )

        log_state_transition(
            "session_started",
            session,
            extra={"prefilled_fields": list(collected), "context_keys": list(context)},
            logger=logger,
        )

        return session, self._run_turn(session, answer=None)

    def current_question(self, session: PlanningSession) -> SubmitAnswerResult:
        """
        The question the session is waiting on, or ready.

        Raises:
            InvalidSessionStateError: If the session is generating or terminal
        """
        if session.status is SessionStatus.READY:
            return SubmitAnswerResult(ready=True)
        self._require_status(session, SessionStatus.COLLECTING, "read the current question")
        return self._run_turn(session, answer=None)

    def submit_answer(self, session: PlanningSession, raw_text: Optional[str]) -> SubmitAnswerResult:
        """
        Record an answer to the pending question and return what comes next.

        Answers that cannot be understood never raise: the same question is
        returned with a rephrasing hint and ``collected_fields`` is unchanged.

        Raises:
            InvalidSessionStateError: If the session is not collecting
        """
        self._require_status(session, SessionStatus.COLLECTING, "accept answers")
        return self._run_turn(session, answer=raw_text if raw_text is not None else "")

    def switch_domain(self, session: PlanningSession, new_domain: DomainKey) -> PlanningSession:
        """Abandon ``session`` and start over; see ``reopen_in_domain``."""
        new_session, _ = self.reopen_in_domain(session, new_domain)
        return new_session

    def reopen_in_domain(
        self, session: PlanningSession, new_domain: DomainKey
    ) -> Tuple[PlanningSession, SubmitAnswerResult]:
        """
        Abandon ``session`` and start over under ``new_domain`` in the same mode.

        Nothing collected in the old session is carried over.

        Returns:
            The new session and the result of its first turn
        """
        if not session.status.is_terminal:
            self.abandon(session)

        new_session, first_turn = self.open_session(new_domain, session.mode)
        log_state_transition(
            "domain_switched",
            new_session,
            extra={"previous_session_id": session.session_id, "previous_domain": session.domain.value},
            logger=logger,
        )
        return new_session, first_turn

    def abandon(self, session: PlanningSession) -> None:
        """
        Mark the session abandoned and cancel any in-flight generation.

        Abandoning an already abandoned session does nothing.

        Raises:
            InvalidSessionStateError: If the session is complete
        """
        if session.status is SessionStatus.ABANDONED:
            return
        session.transition_to(SessionStatus.ABANDONED)
        self._cancel_inflight(session)
        log_state_transition("session_abandoned", session, logger=logger)

    def cancel(self, session: PlanningSession) -> None:
        """
        Cancel the session. A generation result arriving afterwards is discarded.

        Terminal sessions are left as they are.
        """
        if session.status.is_terminal:
            return
        self.abandon(session)

    # =========================================================================
    # Generation
    # =========================================================================

    def build_generation_request(self, session: PlanningSession) -> GenerationRequest:
        """
        Package a ready session for the plan generator.

        Raises:
            InvalidSessionStateError: If the session is not ready
            RegistryIntegrityError: If an essential field is missing
        """
        self._require_status(session, SessionStatus.READY, "build a generation request")

        missing = self.registry.missing_essential_fields(session.domain, session.collected_fields)
        if missing:
            logger.error(
                f"[session={session.session_id}] Ready session is missing essential fields: {missing}"
            )
            raise RegistryIntegrityError(
                f"Session {session.session_id} is ready but missing essential fields {missing}",
                problems=missing,
            )

        return GenerationRequest(
            session_id=session.session_id,
            domain=session.domain,
            mode=session.mode.value,
            collected_fields=dict(session.collected_fields),
            context=dict(session.context),
        )

    async def generate_plan(self, session: PlanningSession) -> Optional[PlanOutputV1]:
        """
        Generate, validate and attach a plan for a ready session.

        Each attempt is bounded by ``generation_timeout``; timeouts, generator
        errors and contract violations are all retried until
        ``max_generation_attempts`` is reached.

        Returns:
            The validated plan, or None if the session was cancelled through
            ``cancel``/``abandon`` while generating

        Raises:
            InvalidSessionStateError: If the session is not ready
            RegistryIntegrityError: If an essential field is missing
            PlanGenerationFailedError: If every attempt failed; the session
                is abandoned
            asyncio.CancelledError: If the calling task was cancelled; the
                session is abandoned
        """
        request = self.build_generation_request(session)
        _log = f"[session={session.session_id}] [controller=generate_plan] "

        session.transition_to(SessionStatus.GENERATING)
        log_state_transition("generation_started", session, logger=logger)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.max_generation_attempts),
            wait=wait_exponential(
                multiplier=1,
                min=self.config.retry_min_wait,
                max=self.config.retry_max_wait,
            ),
            retry=retry_if_exception_type(Exception),
            reraise=True,
        )

        plan: Optional[PlanOutputV1] = None
        try:
            async for attempt in retrying:
                with attempt:
                    plan = await self._attempt_generation(session, request)
        except asyncio.CancelledError:
            if session.session_id in self._cancelled:
                self._cancelled.discard(session.session_id)
                logger.info(f"{_log}Generation cancelled for abandoned session")
                return None
            if not session.status.is_terminal:
                session.transition_to(SessionStatus.ABANDONED)
                log_state_transition("generation_cancelled", session, logger=logger)
            raise
        except Exception as e:
            if session.status is SessionStatus.ABANDONED:
                self._cancelled.discard(session.session_id)
                logger.info(f"{_log}Generation stopped; session was abandoned ({type(e).__name__})")
                return None
            logger.warning(
                f"{_log}Generation failed after {session.generation_attempts} attempt(s): "
                f"{type(e).__name__}: {e}"
            )
            if session.status is SessionStatus.GENERATING:
                session.transition_to(SessionStatus.ABANDONED)
                log_state_transition(
                    "generation_failed",
                    session,
                    extra={"error": type(e).__name__},
                    logger=logger,
                )
            raise PlanGenerationFailedError(
                f"Plan generation failed for session {session.session_id}: {e}",
                attempts=session.generation_attempts,
            ) from e

        if plan is None or session.status is not SessionStatus.GENERATING:
            logger.info(f"{_log}Discarding generation result; session is {session.status.value}")
            self._cancelled.discard(session.session_id)
            return None

        session.plan = plan
        session.transition_to(SessionStatus.COMPLETE)
        log_state_transition(
            "plan_generated",
            session,
            extra={"tasks": len(plan.tasks), "attempts": session.generation_attempts},
            logger=logger,
        )
        return plan

    async def _attempt_generation(
        self, session: PlanningSession, request: GenerationRequest
    ) -> Optional[PlanOutputV1]:
        if session.status is not SessionStatus.GENERATING:
            return None

        session.generation_attempts += 1
        _log = (
            f"[session={session.session_id}] [controller=generate_plan] "
            f"[attempt={session.generation_attempts}] "
        )
        logger.info(f"{_log}Calling plan generator")

        task = asyncio.ensure_future(self.generator.generate(request))
        self._inflight[session.session_id] = task
        try:
            raw = await asyncio.wait_for(task, timeout=self.config.generation_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"{_log}Generator timed out after {self.config.generation_timeout}s")
            raise
        finally:
            self._inflight.pop(session.session_id, None)

        if session.status is not SessionStatus.GENERATING:
            return None

        return validate_plan_output(raw)

    def _cancel_inflight(self, session: PlanningSession) -> None:
        task = self._inflight.get(session.session_id)
        if task is not None and not task.done():
            self._cancelled.add(session.session_id)
            task.cancel()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require_status(
        self, session: PlanningSession, expected: SessionStatus, action: str
    ) -> None:
        if session.status is not expected:
            raise InvalidSessionStateError(
                f"Cannot {action}: session {session.session_id} is "
                f"'{session.status.value}', expected '{expected.value}'"
            )

    def _run_turn(self, session: PlanningSession, answer: Optional[str]) -> SubmitAnswerResult:
        state: SlotFillingState = {
            "session_id": session.session_id,
            "domain": session.domain.value,
            "mode": session.mode.value,
            "collected_fields": dict(session.collected_fields),
            "skipped_fields": list(session.skipped_fields),
            "context": dict(session.context),
            "pending_question_index": session.pending_question_index,
            "answer": answer,
            "reask": False,
            "ready": False,
        }

        result = self._graph.invoke(
            state, {"recursion_limit": self.config.recursion_limit}
        )

        session.collected_fields = result.get("collected_fields", session.collected_fields)
        session.skipped_fields = result.get("skipped_fields", session.skipped_fields)
        session.pending_question_index = max(
            session.pending_question_index, result.get("pending_question_index", 0)
        )
        session.touch()

        if result.get("ready"):
            session.transition_to(SessionStatus.READY)
            log_state_transition("session_ready", session, logger=logger)
            return SubmitAnswerResult(ready=True)

        return SubmitAnswerResult(
            ready=False,
            next_question=result.get("next_question"),
            field=result.get("next_field"),
            hint=result.get("hint"),
            reasked=bool(result.get("reask")),
        )
