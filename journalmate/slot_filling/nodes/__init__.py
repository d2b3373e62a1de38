"""Graph nodes for the slot-filling turn."""

from journalmate.slot_filling.nodes.answer import record_answer_node
from journalmate.slot_filling.nodes.question import select_question_node
from journalmate.slot_filling.nodes.ready import mark_ready_node
from journalmate.slot_filling.nodes.routing import route_after_selection

__all__ = [
    "record_answer_node",
    "select_question_node",
    "mark_ready_node",
    "route_after_selection",
]
