"""
Unit tests for the domain question registry.

Tests priority filtering, field name listing, essential fields,
the unknown-domain fallback, and catalog integrity checks.
"""

import pytest

from journalmate.domains.catalog import DOMAIN_QUESTIONS
from journalmate.domains.registry import (
    DomainQuestionRegistry,
    build_default_registry,
    find_integrity_problems,
    get_essential_fields,
    get_field_names_for_domain,
    get_questions_for_domain,
    resolve_domain,
)
from journalmate.domains.schemas import Domain, DomainQuestion, DomainQuestionSet, has_value
from journalmate.shared.errors import RegistryIntegrityError


@pytest.fixture
def registry():
    return build_default_registry()


def _question(field, priority=1, alternates=()):
    return DomainQuestion(
        field=field,
        alternate_fields=alternates,
        question=f"What is your {field}?",
        priority=priority,
    )


class TestResolveDomain:
    """Tests for mapping domain hints onto the closed set."""

    def test_known_keys_resolve(self):
        """Every catalog key resolves to its own domain."""
        for domain in Domain:
            assert resolve_domain(domain.value) is domain

    def test_case_and_whitespace_ignored(self):
        assert resolve_domain("  Event ") is Domain.EVENT

    def test_unknown_key_falls_back_to_travel(self):
        """Unknown, empty and missing hints all use travel."""
        assert resolve_domain("gardening") is Domain.TRAVEL
        assert resolve_domain("") is Domain.TRAVEL
        assert resolve_domain(None) is Domain.TRAVEL


class TestGetQuestionsForDomain:
    """Tests for priority filtering."""

    def test_quick_mode_returns_only_critical(self, registry):
        """max_priority=1 returns exactly the priority-1 questions."""
        for domain in Domain:
            questions = registry.get_questions_for_domain(domain, 1)
            assert len(questions) == 3
            assert all(q.priority == 1 for q in questions)

    def test_smart_mode_returns_all_in_order(self, registry):
        """max_priority=3 returns the full list in definition order."""
        questions = registry.get_questions_for_domain("travel", 3)
        assert [q.field for q in questions] == [q.field for q in DOMAIN_QUESTIONS[Domain.TRAVEL]]
        assert len(questions) == 10

    def test_priority_two_excludes_helpful_questions(self, registry):
        questions = registry.get_questions_for_domain("event", 2)
        assert all(q.priority <= 2 for q in questions)
        assert "catering" not in [q.field for q in questions]
        assert "budget" in [q.field for q in questions]

    def test_filtering_preserves_relative_order(self, registry):
        full = [q.field for q in registry.get_questions_for_domain("dining", 3)]
        quick = [q.field for q in registry.get_questions_for_domain("dining", 1)]
        assert quick == [f for f in full if f in quick]

    def test_unknown_domain_matches_travel(self, registry):
        """An unknown domain returns exactly the travel list."""
        assert registry.get_questions_for_domain("gardening", 1) == registry.get_questions_for_domain(
            "travel", 1
        )

    @pytest.mark.parametrize("bad", [0, 4, -1, True])
    def test_out_of_range_priority_rejected(self, registry, bad):
        with pytest.raises(ValueError):
            registry.get_questions_for_domain("travel", bad)

    def test_module_level_shortcut(self):
        assert [q.field for q in get_questions_for_domain("event", 1)] == [
            "eventType",
            "date",
            "guestCount",
        ]


class TestFieldNames:
    """Tests for get_field_names_for_domain."""

    def test_includes_canonical_and_alternates(self, registry):
        names = registry.get_field_names_for_domain("travel")
        assert names[:5] == ["specificDestination", "city", "cities", "region", "regions"]
        assert "dates" in names
        assert "startDate" in names
        assert "pace" in names

    def test_alternates_recognized(self, registry):
        assert registry.is_recognized_field("event", "headcount") is True
        assert registry.is_recognized_field("event", "destination") is False

    def test_module_level_shortcut(self):
        assert get_field_names_for_domain("gardening") == get_field_names_for_domain("travel")


class TestEssentialFields:
    """Tests for essential field tokens."""

    def test_travel_tokens(self, registry):
        assert registry.get_essential_fields("travel") == [
            "specificDestination|city|cities|region|regions",
            "dates|startDate|endDate|timeframe",
            "duration|lengthOfStay|tripLength",
        ]

    def test_one_token_per_critical_question(self, registry):
        for domain in Domain:
            assert len(registry.get_essential_fields(domain)) == 3

    def test_any_alternate_satisfies_token(self, registry):
        collected = {"eventCategory": "birthday", "when": "March 14", "attendees": "50"}
        assert registry.missing_essential_fields("event", collected) == []

    def test_missing_reported_by_token(self, registry):
        missing = registry.missing_essential_fields("event", {"eventType": "wedding"})
        assert missing == ["date|eventDate|when", "guestCount|attendees|headcount|numberOfGuests"]

    def test_empty_values_do_not_satisfy(self, registry):
        collected = {"eventType": "  ", "date": None, "guestCount": []}
        assert len(registry.missing_essential_fields("event", collected)) == 3

    def test_module_level_shortcut(self):
        assert get_essential_fields("event")[0] == "eventType|occasion|eventCategory"


class TestIntegrity:
    """Tests for catalog invariants."""

    def test_bundled_catalog_is_clean(self):
        for domain, questions in DOMAIN_QUESTIONS.items():
            question_set = DomainQuestionSet(domain=domain, questions=questions)
            assert find_integrity_problems(question_set) == []

    def test_duplicate_canonical_field_rejected(self):
        with pytest.raises(RegistryIntegrityError) as exc_info:
            DomainQuestionRegistry.from_mapping(
                {Domain.TRAVEL: [_question("dates"), _question("dates", 2)]}
            )
        assert any("defined 2 times" in p for p in exc_info.value.problems)

    def test_alternate_colliding_with_canonical_rejected(self):
        with pytest.raises(RegistryIntegrityError) as exc_info:
            DomainQuestionRegistry.from_mapping(
                {Domain.TRAVEL: [_question("dates", alternates=("budget",)), _question("budget", 2)]}
            )
        assert any("collides" in p for p in exc_info.value.problems)

    def test_shared_alternate_rejected(self):
        with pytest.raises(RegistryIntegrityError) as exc_info:
            DomainQuestionRegistry.from_mapping(
                {
                    Domain.TRAVEL: [
                        _question("dates", alternates=("when",)),
                        _question("duration", alternates=("when",)),
                    ]
                }
            )
        assert any("claimed by both" in p for p in exc_info.value.problems)

    def test_missing_default_domain_rejected(self):
        with pytest.raises(RegistryIntegrityError):
            DomainQuestionRegistry.from_mapping({Domain.EVENT: [_question("eventType")]})

    def test_missing_domain_falls_back_to_default_set(self):
        registry = DomainQuestionRegistry.from_mapping({Domain.TRAVEL: [_question("dates")]})
        assert [q.field for q in registry.get_questions_for_domain("event")] == ["dates"]

    def test_questions_are_immutable(self, registry):
        question = registry.get_questions_for_domain("travel", 1)[0]
        with pytest.raises(Exception):
            question.field = "other"


class TestHasValue:
    """Tests for the has_value helper."""

    def test_empty_values(self):
        assert has_value(None) is False
        assert has_value("") is False
        assert has_value("   ") is False
        assert has_value([]) is False
        assert has_value({}) is False

    def test_meaningful_values(self):
        assert has_value("Lisbon") is True
        assert has_value(0) is True
        assert has_value(False) is True
        assert has_value(["a"]) is True
