"""
Schemas for the slot-filling session controller.

Defines the planning session model, its status machine, the LangGraph
state schema for a single question/answer turn, and API request/response
models.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict

from pydantic import BaseModel, Field

from journalmate.domains.schemas import Domain
from journalmate.shared.contracts.plan_output import PlanOutputV1
from journalmate.shared.errors import InvalidSessionStateError


# =============================================================================
# Session Model
# =============================================================================


class PlanMode(str, Enum):
    """Quick asks only critical questions; Smart asks all three tiers."""

    QUICK = "quick"
    SMART = "smart"

    @property
    def max_priority(self) -> int:
        return 1 if self is PlanMode.QUICK else 3


class SessionStatus(str, Enum):
    """Lifecycle of a planning session."""

    COLLECTING = "collecting"
    READY = "ready"
    GENERATING = "generating"
    COMPLETE = "complete"
    ABANDONED = "abandoned"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStatus.COMPLETE, SessionStatus.ABANDONED)


ALLOWED_TRANSITIONS: Dict[SessionStatus, frozenset] = {
    SessionStatus.COLLECTING: frozenset({SessionStatus.READY, SessionStatus.ABANDONED}),
    SessionStatus.READY: frozenset({SessionStatus.GENERATING, SessionStatus.ABANDONED}),
    SessionStatus.GENERATING: frozenset({SessionStatus.COMPLETE, SessionStatus.ABANDONED}),
    SessionStatus.COMPLETE: frozenset(),
    SessionStatus.ABANDONED: frozenset(),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PlanningSession(BaseModel):
    """
    State of one planning conversation.

    Owned by exactly one conversation; never shared between callers.
    ``collected_fields`` keeps the order in which the user supplied values.
    ``pending_question_index`` only moves forward, but the first
    unanswered question in list order is always the source of truth.
    Domain and mode are fixed at creation.
    """

    session_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        frozen=True,
        description="Unique session identifier",
    )
    domain: Domain = Field(frozen=True, description="Resolved planning domain")
    mode: PlanMode = Field(frozen=True, description="Quick or Smart mode")
    status: SessionStatus = Field(default=SessionStatus.COLLECTING)
    collected_fields: Dict[str, Any] = Field(
        default_factory=dict, description="Field name -> normalized value"
    )
    skipped_fields: List[str] = Field(
        default_factory=list, description="Optional questions the user chose to skip"
    )
    context: Dict[str, Any] = Field(
        default_factory=dict,
        description="Upstream context used for question placeholders (e.g., destination)",
    )
    pending_question_index: int = Field(default=0, ge=0)
    generation_attempts: int = Field(default=0, ge=0)
    plan: Optional[PlanOutputV1] = Field(default=None, description="Validated plan once complete")
    created_at: datetime = Field(default_factory=_utcnow, frozen=True)
    updated_at: datetime = Field(default_factory=_utcnow)

    def touch(self) -> None:
        self.updated_at = _utcnow()

    def transition_to(self, status: SessionStatus) -> None:
        """
        Move the session to a new status.

        Raises:
            InvalidSessionStateError: If the transition is not allowed
        """
        if status not in ALLOWED_TRANSITIONS[self.status]:
            raise InvalidSessionStateError(
                f"Session {self.session_id} cannot move from "
                f"'{self.status.value}' to '{status.value}'"
            )
        self.status = status
        self.touch()


# =============================================================================
# LangGraph State Schema
# =============================================================================


class SlotFillingState(TypedDict, total=False):
    """
    State schema for a single slot-filling turn.

    The controller seeds this from the session, the graph records the
    pending answer and selects the next question, and the controller
    copies the result back onto the session.
    """

    # Session snapshot
    session_id: str
    domain: str
    mode: str
    collected_fields: Dict[str, Any]
    skipped_fields: List[str]
    context: Dict[str, Any]
    pending_question_index: int

    # Turn input
    answer: Optional[str]

    # Turn output
    answered_field: Optional[str]
    reask: bool
    next_question: Optional[str]
    next_field: Optional[str]
    hint: Optional[str]
    ready: bool


# =============================================================================
# Controller Results
# =============================================================================


class SubmitAnswerResult(BaseModel):
    """Outcome of a turn: either the next single question, or ready."""

    ready: bool = Field(default=False, description="Enough is known to generate a plan")
    next_question: Optional[str] = Field(
        default=None, description="The one question to ask next"
    )
    field: Optional[str] = Field(default=None, description="Field the next question fills")
    hint: Optional[str] = Field(
        default=None, description="Rephrasing hint when the previous answer was not understood"
    )
    reasked: bool = Field(
        default=False, description="True when the same question is asked again"
    )


# =============================================================================
# API Request/Response Models
# =============================================================================


class StartSessionRequest(BaseModel):
    """Request to start a new planning session."""

    domain: Optional[str] = Field(
        default=None, description="Domain hint; unknown values fall back to travel"
    )
    message: Optional[str] = Field(
        default=None, description="Free-text goal used for domain detection if no hint"
    )
    mode: PlanMode = Field(default=PlanMode.QUICK, description="Quick or Smart mode")
    initial_fields: Dict[str, Any] = Field(
        default_factory=dict,
        description="Values already extracted from the opening message",
    )


class AnswerRequest(BaseModel):
    """Request to submit an answer to the pending question."""

    session_id: str = Field(description="Session identifier")
    answer: str = Field(description="User's free-text answer")


class SwitchDomainRequest(BaseModel):
    """Request to restart planning under a different domain."""

    session_id: str = Field(description="Session identifier")
    domain: str = Field(description="New domain key")


class GenerateRequest(BaseModel):
    """Request to generate the plan for a ready session."""

    session_id: str = Field(description="Session identifier")


class TurnResponse(BaseModel):
    """Response for start/answer/switch: the next question or ready."""

    session_id: str
    domain: Domain
    mode: PlanMode
    status: SessionStatus
    ready: bool
    next_question: Optional[str] = None
    field: Optional[str] = None
    hint: Optional[str] = None
    reasked: bool = False
    collected_fields: Dict[str, Any] = Field(default_factory=dict)


class GenerateResponse(BaseModel):
    """Response after plan generation."""

    session_id: str
    status: SessionStatus
    plan: Optional[Dict[str, Any]] = None


class SessionStatusResponse(BaseModel):
    """Response for session status query."""

    session_id: str
    exists: bool
    domain: Optional[Domain] = None
    mode: Optional[PlanMode] = None
    status: Optional[SessionStatus] = None
    collected_fields: Optional[Dict[str, Any]] = None
    pending_question_index: Optional[int] = None
