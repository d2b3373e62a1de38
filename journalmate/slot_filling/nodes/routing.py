"""
Routing logic for the slot-filling LangGraph workflow.

Determines the next node to execute based on current state.
"""

import logging
from typing import Literal

from journalmate.slot_filling.schemas import SlotFillingState


logger = logging.getLogger(__name__)


def route_after_selection(state: SlotFillingState) -> Literal["ask", "ready"]:
    """
    Decide whether the turn ends with a question or with readiness.

    Args:
        state: Current turn state

    Returns:
        "ready" if no question remains, "ask" otherwise
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=slot_filling] [router=route_after_selection] "

    if state.get("ready", False):
        logger.info(f"{_log}Routing to 'ready' | field_count={len(state.get('collected_fields') or {})}")
        return "ready"

    logger.info(f"{_log}Routing to 'ask' | field={state.get('next_field')} -> awaiting answer")
    return "ask"
