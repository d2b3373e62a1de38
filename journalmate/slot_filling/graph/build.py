"""
Graph construction for the slot-filling turn.

Builds and compiles the LangGraph workflow that processes one
question/answer exchange.
"""

from functools import partial
from typing import Optional

from langgraph.graph import END, StateGraph

from journalmate.domains.registry import DomainQuestionRegistry
from journalmate.slot_filling.graph.config import DEFAULT_CONFIG, SlotFillingConfig
from journalmate.slot_filling.nodes.answer import record_answer_node
from journalmate.slot_filling.nodes.question import select_question_node
from journalmate.slot_filling.nodes.ready import mark_ready_node
from journalmate.slot_filling.nodes.routing import route_after_selection
from journalmate.slot_filling.schemas import SlotFillingState


def create_slot_filling_graph(
    registry: DomainQuestionRegistry,
    config: Optional[SlotFillingConfig] = None,
):
    """
    Create and compile the LangGraph workflow for one turn.

    The graph structure is:
        Entry → record_answer → select_question → route_after_selection()
                                                    ├→ If a question remains → END
                                                    └→ Else → mark_ready → END

    Each invocation is one turn; the controller persists the session
    between turns, so no checkpointer is attached.

    Args:
        registry: Registry the nodes read questions from
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    if config is None:
        config = DEFAULT_CONFIG

    graph = StateGraph(SlotFillingState)

    graph.add_node("record_answer", partial(record_answer_node, registry=registry))
    graph.add_node("select_question", partial(select_question_node, registry=registry))
    graph.add_node("mark_ready", partial(mark_ready_node, registry=registry))

    graph.set_entry_point("record_answer")
    graph.add_edge("record_answer", "select_question")

    graph.add_conditional_edges(
        "select_question",
        route_after_selection,
        {
            "ask": END,  # Wait for the user's next answer
            "ready": "mark_ready",
        },
    )

    graph.add_edge("mark_ready", END)

    return graph.compile()
