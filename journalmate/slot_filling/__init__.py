"""
Slot-filling session controller.

Asks one domain question at a time until every active question is
answered or skipped, then hands the session off for plan generation.
"""

from journalmate.slot_filling.controller import SlotFillingController
from journalmate.slot_filling.schemas import (
    PlanMode,
    PlanningSession,
    SessionStatus,
    SubmitAnswerResult,
)

__all__ = [
    "SlotFillingController",
    "PlanMode",
    "PlanningSession",
    "SessionStatus",
    "SubmitAnswerResult",
]
