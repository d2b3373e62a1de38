"""
Ready node for the slot-filling LangGraph workflow.

Final node of a turn once every active question is answered or skipped.
Verifies essential-field coverage before the session may move to ready.
"""

import json
import logging
from typing import Any, Dict

from journalmate.domains.registry import DomainQuestionRegistry
from journalmate.shared.errors import RegistryIntegrityError
from journalmate.slot_filling.schemas import SlotFillingState


logger = logging.getLogger(__name__)


def mark_ready_node(
    state: SlotFillingState, registry: DomainQuestionRegistry
) -> Dict[str, Any]:
    """
    Check that every essential field is satisfied.

    Args:
        state: Current turn state
        registry: Domain question registry

    Returns:
        Empty dict (no state changes needed at this point)

    Raises:
        RegistryIntegrityError: If the question list was exhausted while an
            essential field is still missing
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=slot_filling] [node=mark_ready] "

    collected = state.get("collected_fields") or {}
    missing = registry.missing_essential_fields(state["domain"], collected)

    if missing:
        logger.error(
            f"{_log}Question list exhausted with essential fields missing: {missing}"
        )
        raise RegistryIntegrityError(
            f"Essential fields missing after all questions for domain "
            f"'{state['domain']}': {missing}",
            problems=missing,
        )

    logger.info(f"{_log}Essential fields satisfied | collected={list(collected)}")
    logger.debug(
        f"{_log}Full data: {json.dumps(collected, ensure_ascii=True, default=str)}"
    )
    return {}
