"""
FastAPI endpoints for slot-filling planning.

Provides REST API for starting planning sessions, answering questions
one at a time, generating the plan, and managing session state.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.concurrency import run_in_threadpool

from journalmate.domains.registry import resolve_domain
from journalmate.generation.detection import DomainDetector
from journalmate.shared.errors import (
    InvalidSessionStateError,
    PlanGenerationFailedError,
    RegistryIntegrityError,
)
from journalmate.slot_filling.controller import SlotFillingController
from journalmate.slot_filling.schemas import (
    AnswerRequest,
    GenerateRequest,
    GenerateResponse,
    PlanMode,
    PlanningSession,
    SessionStatusResponse,
    StartSessionRequest,
    SubmitAnswerResult,
    SwitchDomainRequest,
    TurnResponse,
)


logger = logging.getLogger(__name__)

# Create router for planning route
router = APIRouter(prefix="/api/planning", tags=["planning"])

# In-memory session storage (replace with Redis/DB in production)
_sessions: Dict[str, PlanningSession] = {}

# Shared instances (the registry inside the controller is read-only)
_controller = None
_detector = None


def get_controller() -> SlotFillingController:
    """Get or create the shared controller instance."""
    global _controller
    if _controller is None:
        _controller = SlotFillingController()
    return _controller


def get_detector() -> DomainDetector:
    """Get or create the shared domain detector."""
    global _detector
    if _detector is None:
        _detector = DomainDetector()
    return _detector


def _get_session(session_id: str) -> PlanningSession:
    if session_id not in _sessions:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )
    return _sessions[session_id]


def _turn_response(session: PlanningSession, result: SubmitAnswerResult) -> TurnResponse:
    return TurnResponse(
        session_id=session.session_id,
        domain=session.domain,
        mode=session.mode,
        status=session.status,
        ready=result.ready,
        next_question=result.next_question,
        field=result.field,
        hint=result.hint,
        reasked=result.reasked,
        collected_fields=session.collected_fields,
    )


@router.post("/start", response_model=TurnResponse)
async def start_session(
    request: StartSessionRequest,
    controller: SlotFillingController = Depends(get_controller),
    detector: DomainDetector = Depends(get_detector),
) -> TurnResponse:
    """
    Start a new planning session.

    Uses the domain hint when given, otherwise classifies the free-text
    message. Returns the first question, or ready if the initial fields
    already cover everything.

    Args:
        request: Session start request

    Returns:
        Session ID and the first question
    """
    domain_hint = request.domain
    if domain_hint is None and request.message:
        detection = await run_in_threadpool(detector.detect, request.message)
        domain_hint = detection.domain

    try:
        session, first_turn = controller.open_session(
            domain_hint, request.mode, initial_fields=request.initial_fields
        )
    except RegistryIntegrityError as e:
        logger.error(f"Failed to start session: {e} | problems={e.problems}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to start session",
        )

    _sessions[session.session_id] = session
    return _turn_response(session, first_turn)


@router.post("/answer", response_model=TurnResponse)
async def submit_answer(
    request: AnswerRequest,
    controller: SlotFillingController = Depends(get_controller),
) -> TurnResponse:
    """
    Submit an answer to the pending question.

    Args:
        request: Session ID and free-text answer

    Returns:
        The next question (or the same one with a hint), or ready
    """
    session = _get_session(request.session_id)

    try:
        result = controller.submit_answer(session, request.answer)
    except InvalidSessionStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except RegistryIntegrityError as e:
        logger.error(f"[session={session.session_id}] {e} | problems={e.problems}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process answer",
        )

    return _turn_response(session, result)


@router.post("/generate", response_model=GenerateResponse)
async def generate_plan(
    request: GenerateRequest,
    controller: SlotFillingController = Depends(get_controller),
) -> GenerateResponse:
    """
    Generate the plan for a ready session.

    Generation failures are reported with a user-safe message only.

    Args:
        request: Session ID

    Returns:
        Final status and the validated plan
    """
    session = _get_session(request.session_id)

    try:
        plan = await controller.generate_plan(session)
    except InvalidSessionStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except PlanGenerationFailedError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.user_message)
    except RegistryIntegrityError as e:
        logger.error(f"[session={session.session_id}] {e} | problems={e.problems}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate plan",
        )

    return GenerateResponse(
        session_id=session.session_id,
        status=session.status,
        plan=plan.model_dump(by_alias=True, exclude_none=True) if plan else None,
    )


@router.post("/switch-domain", response_model=TurnResponse)
async def switch_domain(
    request: SwitchDomainRequest,
    controller: SlotFillingController = Depends(get_controller),
) -> TurnResponse:
    """
    Abandon the session and start again under another domain.

    The old session is removed; the response carries the new session ID.
    """
    session = _get_session(request.session_id)

    try:
        new_session, first_turn = controller.reopen_in_domain(session, request.domain)
    except InvalidSessionStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    del _sessions[session.session_id]
    _sessions[new_session.session_id] = new_session
    return _turn_response(new_session, first_turn)


@router.get("/session/{session_id}", response_model=SessionStatusResponse)
async def get_session_status(session_id: str) -> SessionStatusResponse:
    """
    Get the status of a planning session.

    Args:
        session_id: Session identifier

    Returns:
        Session status information
    """
    if session_id not in _sessions:
        return SessionStatusResponse(
            session_id=session_id,
            exists=False,
        )

    session = _sessions[session_id]

    return SessionStatusResponse(
        session_id=session_id,
        exists=True,
        domain=session.domain,
        mode=session.mode,
        status=session.status,
        collected_fields=session.collected_fields,
        pending_question_index=session.pending_question_index,
    )


@router.delete("/session/{session_id}")
async def delete_session(
    session_id: str,
    controller: SlotFillingController = Depends(get_controller),
) -> Dict[str, str]:
    """
    Delete a planning session, cancelling any generation in progress.

    Args:
        session_id: Session identifier

    Returns:
        Confirmation message
    """
    session = _get_session(session_id)
    controller.cancel(session)
    del _sessions[session_id]

    return {"message": f"Session {session_id} deleted"}


@router.get("/domains/{domain}/questions")
async def list_domain_questions(
    domain: str,
    mode: PlanMode = Query(default=PlanMode.SMART),
    controller: SlotFillingController = Depends(get_controller),
) -> Dict[str, Any]:
    """
    List the questions asked for a domain in the given mode.

    Unknown domains resolve to travel.
    """
    resolved = resolve_domain(domain)
    questions: List[Dict[str, Any]] = [
        q.model_dump()
        for q in controller.registry.get_questions_for_domain(resolved, mode.max_priority)
    ]
    return {
        "domain": resolved.value,
        "mode": mode.value,
        "essential_fields": controller.registry.get_essential_fields(resolved),
        "questions": questions,
    }


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": "slot-filling-planner",
    }
