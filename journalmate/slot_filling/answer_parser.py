"""
Answer parser for the slot-filling controller.

Turns one free-text answer into field values. The answered question's
own field always receives the normalized text. Lightweight recognizers
also pick up values that incidentally answer a later question (a
headcount, a duration, an amount of money, a calendar date) so the
controller can skip asking for them.

Nothing here raises on bad input: an answer that cannot be understood is
reported as ``unparseable`` and the question is asked again.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from journalmate.domains.schemas import DomainQuestion, has_value


logger = logging.getLogger(__name__)


class AnswerStatus(str, Enum):
    ANSWERED = "answered"
    SKIPPED = "skipped"
    UNPARSEABLE = "unparseable"


SKIP_PHRASES = frozenset(
    {
        "skip",
        "pass",
        "next",
        "no preference",
        "not sure",
        "don't know",
        "dont know",
        "idk",
        "n/a",
        "na",
        "none",
        "no idea",
        "-",
    }
)

_WHITESPACE = re.compile(r"\s+")
_HAS_WORD_CHAR = re.compile(r"[^\W_]", re.UNICODE)
_SURROUNDING_QUOTES = "\"'`“”‘’"
_TRAILING_PUNCTUATION = ".!?;,"


@dataclass(frozen=True)
class Recognizer:
    """
    Pattern that extracts a value for one of several candidate fields.

    Candidates are canonical question fields in preference order; the
    first one the domain actually asks about receives the value.
    """

    name: str
    pattern: "re.Pattern[str]"
    candidates: Tuple[str, ...]
    group: int = 0

    def find(self, text: str) -> Optional[str]:
        match = self.pattern.search(text)
        if not match:
            return None
        return match.group(self.group).strip()


_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|"
    r"aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)

RECOGNIZERS: Tuple[Recognizer, ...] = (
    Recognizer(
        name="headcount",
        pattern=re.compile(
            r"\b(\d{1,4})\s*-?\s*(?:person|people|persons|guests?|attendees|pax|adults)\b",
            re.IGNORECASE,
        ),
        candidates=("guestCount", "groupSize"),
        group=1,
    ),
    Recognizer(
        name="duration",
        pattern=re.compile(
            r"\b\d{1,3}\s*(?:days?|nights?|weeks?|months?)\b",
            re.IGNORECASE,
        ),
        candidates=("duration", "timeline"),
    ),
    Recognizer(
        name="money",
        pattern=re.compile(
            r"(?:[$€£]\s?\d[\d,]*(?:\.\d+)?\s?[kK]?\b"
            r"|\b\d[\d,]*(?:\.\d+)?\s?(?:usd|eur|gbp|dollars|euros)\b)",
            re.IGNORECASE,
        ),
        candidates=("budget",),
    ),
    Recognizer(
        name="date",
        pattern=re.compile(
            r"\b(?:" + _MONTH + r"\.?\s+\d{1,2}(?:st|nd|rd|th)?"
            r"(?:\s*[-–]\s*\d{1,2}(?:st|nd|rd|th)?)?(?:,?\s*\d{4})?"
            r"|\d{4}-\d{2}-\d{2})\b",
            re.IGNORECASE,
        ),
        candidates=("date", "dates", "deadline"),
    ),
)


@dataclass
class AnswerInterpretation:
    """Result of interpreting one answer."""

    status: AnswerStatus
    values: Dict[str, Any] = field(default_factory=dict)

    @property
    def understood(self) -> bool:
        return self.status is not AnswerStatus.UNPARSEABLE


def normalize_answer(raw_text: str) -> str:
    """Collapse whitespace and strip surrounding quotes and trailing punctuation."""
    text = _WHITESPACE.sub(" ", raw_text or "").strip()
    text = text.strip(_SURROUNDING_QUOTES).strip()
    return text.rstrip(_TRAILING_PUNCTUATION).strip()


def is_intelligible(raw_text: Optional[str]) -> bool:
    """True when the answer contains at least one letter or digit."""
    if raw_text is None:
        return False
    return bool(_HAS_WORD_CHAR.search(raw_text))


def is_skip(raw_text: str) -> bool:
    """True when the user explicitly declined to answer."""
    return normalize_answer(raw_text).lower() in SKIP_PHRASES


def recognize_incidental_values(
    text: str,
    questions: Sequence[DomainQuestion],
    collected: Mapping[str, Any],
    exclude: Iterable[str] = (),
    recognizers: Sequence[Recognizer] = RECOGNIZERS,
) -> Dict[str, Any]:
    """
    Extract values that answer other, not yet satisfied questions.

    Args:
        text: Normalized answer text
        questions: Full question list for the session's domain
        collected: Values collected so far
        exclude: Canonical fields that must not be filled (the question being answered)
        recognizers: Patterns to apply

    Returns:
        Canonical field -> value for each question the text incidentally answers
    """
    excluded = set(exclude)
    by_field = {q.field: q for q in questions}
    found: Dict[str, Any] = {}

    for recognizer in recognizers:
        target = next((c for c in recognizer.candidates if c in by_field), None)
        if target is None or target in excluded or target in found:
            continue
        if by_field[target].is_satisfied_by(collected):
            continue
        value = recognizer.find(text)
        if value:
            found[target] = value

    return found


def interpret_answer(
    question: DomainQuestion,
    raw_text: Optional[str],
    questions: Sequence[DomainQuestion],
    collected: Mapping[str, Any],
) -> AnswerInterpretation:
    """
    Interpret a free-text answer to ``question``.

    Args:
        question: The question that was asked
        raw_text: The user's answer
        questions: Full question list for the domain (for incidental values)
        collected: Values collected so far

    Returns:
        AnswerInterpretation with status and the values to merge
    """
    if not is_intelligible(raw_text):
        return AnswerInterpretation(status=AnswerStatus.UNPARSEABLE)

    if is_skip(raw_text):
        return AnswerInterpretation(status=AnswerStatus.SKIPPED)

    text = normalize_answer(raw_text)
    if not is_intelligible(text):
        return AnswerInterpretation(status=AnswerStatus.UNPARSEABLE)

    values: Dict[str, Any] = {question.field: text}
    values.update(
        recognize_incidental_values(
            text, questions, collected, exclude=question.accepted_fields
        )
    )
    return AnswerInterpretation(status=AnswerStatus.ANSWERED, values=values)


def merge_collected_data(
    existing: Mapping[str, Any],
    new_values: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Merge new values into collected data without overwriting answers.

    Insertion order is the order values were supplied.

    Args:
        existing: Previously collected data
        new_values: New values to merge

    Returns:
        Merged dictionary with all collected data
    """
    merged = dict(existing)
    for key, value in new_values.items():
        if not has_value(value):
            continue
        if has_value(merged.get(key)):
            logger.debug("Keeping existing value for '%s'", key)
            continue
        merged[key] = value
    return merged


def first_unanswered(
    questions: Sequence[DomainQuestion],
    collected: Mapping[str, Any],
    skipped: Iterable[str] = (),
) -> Tuple[int, Optional[DomainQuestion]]:
    """
    Find the first question not satisfied by canonical or alternate keys.

    Args:
        questions: Active question list, in order
        collected: Values collected so far
        skipped: Canonical fields the user skipped

    Returns:
        (index, question), or (len(questions), None) when nothing is left
    """
    skipped_set = set(skipped)
    for index, question in enumerate(questions):
        if question.field in skipped_set:
            continue
        if not question.is_satisfied_by(collected):
            return index, question
    return len(questions), None


def unrecognized_keys(values: Mapping[str, Any], field_names: Iterable[str]) -> List[str]:
    """Keys in ``values`` that are not fields of the domain."""
    known = set(field_names)
    return [key for key in values if key not in known]
