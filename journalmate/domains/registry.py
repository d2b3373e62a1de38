"""
Domain question registry.

Immutable catalog lookup used by the slot-filling controller to decide
what to ask and when enough is known. The registry is built once at
startup, validated, and injected into the controller; it is read-only
afterwards and safe to share across any number of sessions.

Unknown domain keys resolve to the default domain (travel) rather than
failing. That fallback lives in ``resolve_domain`` so it is an explicit,
testable branch.
"""

import logging
from collections import Counter
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from journalmate.domains.catalog import DOMAIN_QUESTIONS
from journalmate.domains.schemas import (
    DEFAULT_DOMAIN,
    Domain,
    DomainQuestion,
    DomainQuestionSet,
)
from journalmate.shared.errors import RegistryIntegrityError


logger = logging.getLogger(__name__)


VALID_PRIORITIES = (1, 2, 3)

DomainKey = Union[Domain, str, None]


def resolve_domain(value: DomainKey) -> Domain:
    """
    Map a domain hint onto the closed Domain set.

    Args:
        value: A Domain, a string key (case and surrounding whitespace are
            ignored), or None

    Returns:
        The matching Domain, or DEFAULT_DOMAIN for anything unrecognised
    """
    if isinstance(value, Domain):
        return value

    if isinstance(value, str):
        key = value.strip().lower()
        try:
            return Domain(key)
        except ValueError:
            pass

    return DEFAULT_DOMAIN


def find_integrity_problems(question_set: DomainQuestionSet) -> List[str]:
    """
    Check one domain's questions against the registry invariants.

    Invariants:
    1. Canonical field names are unique within the domain.
    2. No alternate field equals another question's canonical field.
    3. No alternate field is shared by two questions.

    Args:
        question_set: Questions for a single domain

    Returns:
        Human-readable descriptions of every violation (empty if clean)
    """
    domain = question_set.domain.value
    problems = []

    field_counts = Counter(q.field for q in question_set.questions)
    for name, count in field_counts.items():
        if count > 1:
            problems.append(f"{domain}: field '{name}' is defined {count} times")

    canonical = set(field_counts)
    owners: Dict[str, str] = {}
    for question in question_set.questions:
        for alternate in question.alternate_fields:
            if alternate in canonical:
                problems.append(
                    f"{domain}: alternate '{alternate}' of '{question.field}' "
                    f"collides with a canonical field"
                )
            elif alternate in owners and owners[alternate] != question.field:
                problems.append(
                    f"{domain}: alternate '{alternate}' is claimed by both "
                    f"'{owners[alternate]}' and '{question.field}'"
                )
            else:
                owners[alternate] = question.field

    return problems


class DomainQuestionRegistry:
    """
    Read-only registry of domain question sets.

    Every query accepts a Domain or a raw string key; unknown keys behave
    exactly like the default domain.
    """

    def __init__(self, question_sets: Iterable[DomainQuestionSet]):
        sets = {qs.domain: qs for qs in question_sets}

        if DEFAULT_DOMAIN not in sets:
            raise RegistryIntegrityError(
                f"Registry has no question set for default domain '{DEFAULT_DOMAIN.value}'"
            )

        problems = []
        for question_set in sets.values():
            problems.extend(find_integrity_problems(question_set))
        if problems:
            logger.error("Domain question registry failed integrity check: %s", problems)
            raise RegistryIntegrityError(
                f"Domain question registry has {len(problems)} integrity problem(s)",
                problems=problems,
            )

        self._sets: Mapping[Domain, DomainQuestionSet] = MappingProxyType(sets)

    @classmethod
    def from_mapping(
        cls, questions: Mapping[Domain, Iterable[DomainQuestion]]
    ) -> "DomainQuestionRegistry":
        """Build a registry from a domain -> questions mapping."""
        return cls(
            DomainQuestionSet(domain=domain, questions=tuple(items))
            for domain, items in questions.items()
        )

    @property
    def domains(self) -> Tuple[Domain, ...]:
        """Domains with a question set, in registration order."""
        return tuple(self._sets)

    def get_question_set(self, domain: DomainKey) -> DomainQuestionSet:
        """Question set for a domain, falling back to the default domain."""
        resolved = resolve_domain(domain)
        return self._sets.get(resolved) or self._sets[DEFAULT_DOMAIN]

    def get_questions_for_domain(
        self, domain: DomainKey, max_priority: int = 3
    ) -> List[DomainQuestion]:
        """
        Questions for a domain filtered by priority level.

        Args:
            domain: Domain or string key
            max_priority: Highest priority tier to include (1, 2 or 3)

        Returns:
            Questions with priority <= max_priority, in definition order

        Raises:
            ValueError: If max_priority is not 1, 2 or 3
        """
        if isinstance(max_priority, bool) or max_priority not in VALID_PRIORITIES:
            raise ValueError(
                f"max_priority must be one of {VALID_PRIORITIES}, got {max_priority!r}"
            )
        questions = self.get_question_set(domain).questions
        return [q for q in questions if q.priority <= max_priority]

    def get_field_names_for_domain(self, domain: DomainKey) -> List[str]:
        """All field names for a domain, canonical then alternates, in question order."""
        fields: List[str] = []
        for question in self.get_question_set(domain).questions:
            fields.append(question.field)
            fields.extend(question.alternate_fields)
        return fields

    def get_essential_fields(self, domain: DomainKey) -> List[str]:
        """
        Essential (priority 1) fields for validation.

        Returns one token per priority-1 question: the canonical field
        followed by its alternates, joined with "|". Any one of the names
        in a token satisfies that requirement.
        """
        return [q.essential_token for q in self.get_questions_for_domain(domain, 1)]

    def get_essential_field_groups(self, domain: DomainKey) -> List[FrozenSet[str]]:
        """Structured form of get_essential_fields: accepted keys per priority-1 question."""
        return [q.accepted_fields for q in self.get_questions_for_domain(domain, 1)]

    def missing_essential_fields(
        self, domain: DomainKey, collected: Mapping[str, Any]
    ) -> List[str]:
        """Essential-field tokens not satisfied by any key in ``collected``."""
        return [
            q.essential_token
            for q in self.get_questions_for_domain(domain, 1)
            if not q.is_satisfied_by(collected)
        ]

    def is_recognized_field(self, domain: DomainKey, name: str) -> bool:
        """True if ``name`` is a canonical or alternate field of the domain."""
        return name in self.get_field_names_for_domain(domain)


def build_default_registry() -> DomainQuestionRegistry:
    """Build and validate the registry from the bundled catalog."""
    return DomainQuestionRegistry.from_mapping(DOMAIN_QUESTIONS)


_default_registry: Optional[DomainQuestionRegistry] = None


def get_default_registry() -> DomainQuestionRegistry:
    """Get or create the shared default registry instance."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry


def get_questions_for_domain(domain: DomainKey, max_priority: int = 3) -> List[DomainQuestion]:
    """Module-level shortcut over the default registry."""
    return get_default_registry().get_questions_for_domain(domain, max_priority)


def get_field_names_for_domain(domain: DomainKey) -> List[str]:
    """Module-level shortcut over the default registry."""
    return get_default_registry().get_field_names_for_domain(domain)


def get_essential_fields(domain: DomainKey) -> List[str]:
    """Module-level shortcut over the default registry."""
    return get_default_registry().get_essential_fields(domain)
