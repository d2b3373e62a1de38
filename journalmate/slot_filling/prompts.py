"""
Question rendering for the slot-filling controller.

Question templates may reference already-known values with
``{placeholder}`` tokens (e.g., ``{destination}``). Rendering is
deterministic so a re-asked question is byte-identical to the original.
"""

from string import Formatter
from typing import Any, Mapping, Optional

from journalmate.domains.schemas import DomainQuestion, has_value


_formatter = Formatter()


def _display(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def render_question(question: DomainQuestion, known: Mapping[str, Any]) -> str:
    """
    Substitute placeholders in a question template.

    Args:
        question: Question whose template is rendered
        known: Context and collected values keyed by field name

    Returns:
        Rendered question text. Placeholders without a known value render
        as "your <placeholder>".
    """
    parts = []
    for literal, name, _spec, _conversion in _formatter.parse(question.question):
        parts.append(literal)
        if name is None:
            continue
        value = known.get(name)
        parts.append(_display(value) if has_value(value) else f"your {name}")
    return "".join(parts)


def render_hint(question: DomainQuestion) -> Optional[str]:
    """Rephrasing hint shown when an answer could not be understood."""
    if question.priority == 1:
        prefix = "I need this one to build your plan."
    else:
        prefix = "Sorry, I didn't catch that. You can also say 'skip'."
    if question.examples:
        return f"{prefix} For example: {question.examples.removeprefix('e.g., ')}"
    return prefix
