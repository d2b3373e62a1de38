"""
Domain question registry.

Maps each planning domain to its prioritized clarifying questions and
answers the three queries the slot-filling controller relies on: which
questions to ask, which field names a domain recognises, and which
fields are essential.
"""

from journalmate.domains.schemas import (
    DEFAULT_DOMAIN,
    Domain,
    DomainQuestion,
    DomainQuestionSet,
)
from journalmate.domains.registry import (
    DomainQuestionRegistry,
    build_default_registry,
    get_default_registry,
    get_essential_fields,
    get_field_names_for_domain,
    get_questions_for_domain,
    resolve_domain,
)

__all__ = [
    "DEFAULT_DOMAIN",
    "Domain",
    "DomainQuestion",
    "DomainQuestionSet",
    "DomainQuestionRegistry",
    "build_default_registry",
    "get_default_registry",
    "get_essential_fields",
    "get_field_names_for_domain",
    "get_questions_for_domain",
    "resolve_domain",
]
