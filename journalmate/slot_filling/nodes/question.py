"""
Question selection node for the slot-filling LangGraph workflow.

Chooses the single next question to ask. The full collected map is
rescanned every turn, so a question whose canonical or alternate field
was supplied incidentally is skipped.
"""

import logging
from typing import Any, Dict

from journalmate.domains.registry import DomainQuestionRegistry
from journalmate.slot_filling.answer_parser import first_unanswered
from journalmate.slot_filling.prompts import render_hint, render_question
from journalmate.slot_filling.schemas import PlanMode, SlotFillingState


logger = logging.getLogger(__name__)


def select_question_node(
    state: SlotFillingState, registry: DomainQuestionRegistry
) -> Dict[str, Any]:
    """
    Select the first unanswered question in the active list.

    Args:
        state: Current turn state
        registry: Domain question registry

    Returns:
        Dictionary with state updates: the rendered question, or ready=True
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=slot_filling] [node=select_question] "

    mode = PlanMode(state["mode"])
    collected = state.get("collected_fields") or {}
    skipped = state.get("skipped_fields") or []
    questions = registry.get_questions_for_domain(state["domain"], mode.max_priority)

    index, question = first_unanswered(questions, collected, skipped)
    cursor = max(state.get("pending_question_index", 0), index)

    if question is None:
        logger.info(
            f"{_log}All {len(questions)} questions answered or skipped | mode={mode.value}"
        )
        return {
            "pending_question_index": cursor,
            "next_question": None,
            "next_field": None,
            "hint": None,
            "ready": True,
        }

    known = {**(state.get("context") or {}), **collected}
    reask = state.get("reask", False)
    logger.info(
        f"{_log}Next question {index + 1}/{len(questions)} | field={question.field}, "
        f"priority={question.priority}, reask={reask}"
    )

    return {
        "pending_question_index": cursor,
        "next_question": render_question(question, known),
        "next_field": question.field,
        "hint": render_hint(question) if reask else None,
        "ready": False,
    }
