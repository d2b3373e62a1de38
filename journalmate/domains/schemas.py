"""
Schemas for the domain question registry.

Defines the closed set of planning domains and the immutable question
models each domain's catalog entry is built from.
"""

from enum import Enum
from typing import Any, FrozenSet, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, Field


PriorityTier = Literal[1, 2, 3]

ESSENTIAL_FIELD_DELIMITER = "|"


class Domain(str, Enum):
    """Closed set of planning domains."""

    TRAVEL = "travel"
    EVENT = "event"
    DINING = "dining"
    WELLNESS = "wellness"
    LEARNING = "learning"
    SOCIAL = "social"
    ENTERTAINMENT = "entertainment"
    WORK = "work"
    SHOPPING = "shopping"


DEFAULT_DOMAIN = Domain.TRAVEL


def has_value(value: Any) -> bool:
    """
    Check if a collected value is meaningful (non-null, non-empty).

    Args:
        value: Value stored under a field key

    Returns:
        True if the value counts as an answer
    """
    if value is None:
        return False

    if isinstance(value, str) and not value.strip():
        return False

    if isinstance(value, (list, tuple, dict, set)) and len(value) == 0:
        return False

    return True


class DomainQuestion(BaseModel):
    """A single clarifying question within a domain."""

    field: str = Field(min_length=1, description="Canonical key this question fills")
    alternate_fields: Tuple[str, ...] = Field(
        default=(),
        description="Synonym keys that satisfy this question without asking it",
    )
    question: str = Field(
        min_length=1,
        description="Prompt template; may contain {placeholder} tokens",
    )
    priority: PriorityTier = Field(description="1=critical, 2=important, 3=helpful")
    examples: Optional[str] = Field(default=None, description="Hint shown with the question")

    class Config:
        frozen = True

    @property
    def accepted_fields(self) -> FrozenSet[str]:
        """Canonical field plus all alternates."""
        return frozenset((self.field,) + self.alternate_fields)

    @property
    def essential_token(self) -> str:
        """Canonical field and alternates joined with the essential-field delimiter."""
        return ESSENTIAL_FIELD_DELIMITER.join((self.field,) + self.alternate_fields)

    def is_satisfied_by(self, collected: Mapping[str, Any]) -> bool:
        """True when any accepted key holds a meaningful value."""
        return any(has_value(collected.get(name)) for name in self.accepted_fields)


class DomainQuestionSet(BaseModel):
    """Ordered questions for one domain."""

    domain: Domain
    questions: Tuple[DomainQuestion, ...]

    class Config:
        frozen = True
