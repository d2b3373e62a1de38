"""
Answer node for the slot-filling LangGraph workflow.

Records the user's answer to the pending question. The pending question
is recomputed from the collected data (first unanswered in list order)
rather than trusted from the cursor.
"""

import logging
from typing import Any, Dict

from journalmate.domains.registry import DomainQuestionRegistry
from journalmate.slot_filling.answer_parser import (
    AnswerStatus,
    first_unanswered,
    interpret_answer,
    merge_collected_data,
)
from journalmate.slot_filling.schemas import PlanMode, SlotFillingState


logger = logging.getLogger(__name__)


def record_answer_node(
    state: SlotFillingState, registry: DomainQuestionRegistry
) -> Dict[str, Any]:
    """
    Interpret the pending answer and merge it into collected fields.

    An unparseable answer, or a skip on a critical question, leaves
    ``collected_fields`` untouched and flags the question for a re-ask.

    Args:
        state: Current turn state
        registry: Domain question registry

    Returns:
        Dictionary with state updates to apply
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=slot_filling] [node=record_answer] "

    answer = state.get("answer")
    if answer is None:
        logger.debug(f"{_log}No pending answer, nothing to record")
        return {"reask": False, "answered_field": None}

    domain = state["domain"]
    mode = PlanMode(state["mode"])
    collected = state.get("collected_fields") or {}
    skipped = list(state.get("skipped_fields") or [])

    active = registry.get_questions_for_domain(domain, mode.max_priority)
    _, question = first_unanswered(active, collected, skipped)
    if question is None:
        logger.info(f"{_log}Answer received but no question is pending; ignoring")
        return {"answer": None, "reask": False, "answered_field": None}

    all_questions = registry.get_questions_for_domain(domain, 3)
    interpretation = interpret_answer(question, answer, all_questions, collected)

    if interpretation.status is AnswerStatus.SKIPPED and question.priority > 1:
        logger.info(f"{_log}Skipped optional field '{question.field}'")
        return {
            "answer": None,
            "reask": False,
            "answered_field": question.field,
            "skipped_fields": skipped + [question.field],
        }

    if interpretation.status is not AnswerStatus.ANSWERED:
        logger.info(
            f"{_log}Could not use answer for '{question.field}' "
            f"(status={interpretation.status.value}); will re-ask"
        )
        return {"answer": None, "reask": True, "answered_field": None}

    merged = merge_collected_data(collected, interpretation.values)
    incidental = [k for k in interpretation.values if k != question.field]
    logger.info(
        f"{_log}Recorded '{question.field}' | incidental={incidental}, "
        f"fields_collected={len(merged)}"
    )

    return {
        "answer": None,
        "reask": False,
        "answered_field": question.field,
        "collected_fields": merged,
    }
