"""
Exception hierarchy for the planning core.

Answer-parsing problems are never raised; they are absorbed by the
slot-filling turn and answered with a re-ask. Only generation failures,
invalid state transitions and registry data defects escalate.
"""

from typing import List, Optional


USER_FACING_GENERATION_FAILURE = (
    "We could not create a plan right now. Please try again in a moment."
)


class PlanningError(Exception):
    """Base class for all planning core errors."""

    pass


class RegistryIntegrityError(PlanningError):
    """Raised when the domain question catalog violates its invariants.

    This is an operator-facing defect, never shown to end users.
    """

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        super().__init__(message)
        self.problems = problems or []


class InvalidSessionStateError(PlanningError):
    """Raised when an operation is not allowed in the session's current status."""

    pass


class PlanValidationError(PlanningError):
    """Raised when a generated plan does not satisfy the output contract."""

    pass


class PlanGenerationFailedError(PlanningError):
    """Raised when plan generation is exhausted without a valid plan."""

    def __init__(
        self,
        message: str,
        attempts: int = 0,
        user_message: str = USER_FACING_GENERATION_FAILURE,
    ):
        super().__init__(message)
        self.attempts = attempts
        self.user_message = user_message
