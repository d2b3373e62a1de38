"""
Unit tests for the answer parser.

Tests normalization, skip detection, incidental value recognition,
non-overwriting merges and first-unanswered selection.
"""

import pytest

from journalmate.domains.registry import build_default_registry
from journalmate.slot_filling.answer_parser import (
    AnswerStatus,
    first_unanswered,
    interpret_answer,
    is_intelligible,
    is_skip,
    merge_collected_data,
    normalize_answer,
    recognize_incidental_values,
    unrecognized_keys,
)
from journalmate.slot_filling.prompts import render_hint, render_question


@pytest.fixture(scope="module")
def registry():
    return build_default_registry()


@pytest.fixture
def event_questions(registry):
    return registry.get_questions_for_domain("event", 3)


@pytest.fixture
def travel_questions(registry):
    return registry.get_questions_for_domain("travel", 3)


class TestNormalization:
    """Tests for answer normalization and intelligibility."""

    def test_whitespace_collapsed(self):
        assert normalize_answer("  Barcelona   and\n Madrid  ") == "Barcelona and Madrid"

    def test_quotes_and_trailing_punctuation_stripped(self):
        assert normalize_answer('"2 weeks."') == "2 weeks"
        assert normalize_answer("Lisbon!!") == "Lisbon"

    def test_unintelligible_answers(self):
        assert is_intelligible(None) is False
        assert is_intelligible("") is False
        assert is_intelligible("   ") is False
        assert is_intelligible("?!...") is False

    def test_intelligible_answers(self):
        assert is_intelligible("2") is True
        assert is_intelligible("Zürich") is True


class TestSkipDetection:
    """Tests for is_skip."""

    @pytest.mark.parametrize("text", ["skip", "Skip.", "  no preference ", "N/A", "idk"])
    def test_skip_phrases(self, text):
        assert is_skip(text) is True

    @pytest.mark.parametrize("text", ["skiing", "next week", "none of the usual hotels"])
    def test_answers_containing_skip_words(self, text):
        assert is_skip(text) is False


class TestIncidentalValues:
    """Tests for recognize_incidental_values."""

    def test_headcount_fills_guest_count(self, event_questions):
        found = recognize_incidental_values(
            "a 50-person birthday party for my mom", event_questions, {}
        )
        assert found == {"guestCount": "50"}

    def test_money_fills_budget(self, event_questions):
        found = recognize_incidental_values("a wedding, budget around $5,000", event_questions, {})
        assert found["budget"] == "$5,000"

    def test_date_fills_event_date(self, event_questions):
        found = recognize_incidental_values("birthday on March 14", event_questions, {})
        assert found == {"date": "March 14"}

    def test_duration_fills_travel_duration(self, travel_questions):
        found = recognize_incidental_values("Barcelona for 10 days", travel_questions, {})
        assert found == {"duration": "10 days"}

    def test_already_satisfied_field_not_refilled(self, event_questions):
        found = recognize_incidental_values(
            "a 50-person party", event_questions, {"attendees": "40"}
        )
        assert found == {}

    def test_excluded_field_not_filled(self, event_questions):
        found = recognize_incidental_values(
            "March 14", event_questions, {}, exclude={"date", "eventDate", "when"}
        )
        assert found == {}

    def test_weight_in_pounds_is_not_a_budget(self, registry):
        """"Pounds" alone is a weight; only a symbol or currency code marks money."""
        shopping = registry.get_questions_for_domain("shopping", 3)
        found = recognize_incidental_values("a scale to help me lose 10 pounds", shopping, {})
        assert "budget" not in found

        found = recognize_incidental_values("about 200 gbp", shopping, {})
        assert found["budget"] == "200 gbp"

    def test_only_canonical_fields_targeted(self, travel_questions):
        """groupSize is a travel alternate, so a headcount is not recorded under it."""
        found = recognize_incidental_values("a 4-person trip", travel_questions, {})
        assert "groupSize" not in found


class TestInterpretAnswer:
    """Tests for interpret_answer."""

    def test_answer_fills_own_field(self, event_questions):
        question = event_questions[0]
        result = interpret_answer(question, "a 50-person birthday party for my mom", event_questions, {})
        assert result.status is AnswerStatus.ANSWERED
        assert result.values == {
            "eventType": "a 50-person birthday party for my mom",
            "guestCount": "50",
        }

    def test_own_field_never_filled_incidentally(self, event_questions):
        date_question = event_questions[1]
        result = interpret_answer(date_question, "March 14, 2026", event_questions, {})
        assert result.values == {"date": "March 14, 2026"}

    def test_skip(self, event_questions):
        result = interpret_answer(event_questions[3], "skip", event_questions, {})
        assert result.status is AnswerStatus.SKIPPED
        assert result.values == {}

    def test_unparseable(self, event_questions):
        result = interpret_answer(event_questions[0], "???", event_questions, {})
        assert result.status is AnswerStatus.UNPARSEABLE
        assert result.understood is False


class TestMergeCollectedData:
    """Tests for merge_collected_data."""

    def test_existing_values_kept(self):
        merged = merge_collected_data({"budget": "$500"}, {"budget": "$900", "venue": "park"})
        assert merged == {"budget": "$500", "venue": "park"}

    def test_empty_values_ignored(self):
        merged = merge_collected_data({}, {"budget": "", "venue": None})
        assert merged == {}

    def test_insertion_order_preserved(self):
        merged = merge_collected_data({"a": 1}, {"c": 3, "b": 2})
        assert list(merged) == ["a", "c", "b"]

    def test_inputs_not_mutated(self):
        existing = {"a": 1}
        merge_collected_data(existing, {"b": 2})
        assert existing == {"a": 1}


class TestFirstUnanswered:
    """Tests for first_unanswered."""

    def test_first_question_when_nothing_collected(self, travel_questions):
        index, question = first_unanswered(travel_questions, {})
        assert index == 0
        assert question.field == "specificDestination"

    def test_alternate_key_satisfies_question(self, travel_questions):
        index, question = first_unanswered(travel_questions, {"city": "Lisbon"})
        assert question.field == "dates"

    def test_skipped_fields_passed_over(self, travel_questions):
        collected = {"specificDestination": "Lisbon", "dates": "May", "duration": "5 days"}
        index, question = first_unanswered(travel_questions, collected, skipped=["budget"])
        assert question.field == "travelers"
        assert index == 4

    def test_none_when_exhausted(self, registry):
        quick = registry.get_questions_for_domain("event", 1)
        collected = {"eventType": "party", "date": "May 1", "guestCount": "10"}
        assert first_unanswered(quick, collected) == (3, None)


class TestUnrecognizedKeys:
    def test_reports_unknown_keys(self, registry):
        names = registry.get_field_names_for_domain("travel")
        assert unrecognized_keys({"city": "Rome", "destination": "Italy"}, names) == ["destination"]


class TestRendering:
    """Tests for question and hint rendering."""

    def test_placeholder_filled_from_known_values(self, travel_questions):
        text = render_question(travel_questions[0], {"destination": "Spain"})
        assert text == "Which specific cities or regions in Spain are you planning to visit?"

    def test_missing_placeholder_rendered_generically(self, travel_questions):
        text = render_question(travel_questions[0], {})
        assert text == "Which specific cities or regions in your destination are you planning to visit?"

    def test_rendering_is_deterministic(self, travel_questions):
        known = {"destination": "Spain"}
        assert render_question(travel_questions[0], known) == render_question(travel_questions[0], known)

    def test_critical_hint(self, travel_questions):
        hint = render_hint(travel_questions[2])
        assert hint == "I need this one to build your plan. For example: 2 weeks, 10 days"

    def test_optional_hint_mentions_skip(self, travel_questions):
        assert "skip" in render_hint(travel_questions[3])
