"""Unit tests for RuleBasedClassifier: bucket cascade, urgency and templates.

Tests cover:
  - Each bucket: billing, technical, feature, positive, inquiry, ambiguous
  - Precedence: earlier buckets win
  - Compound clauses: cancel+account, problem vs. "no problem"
  - Template choice: injected, seeded and random choosers
"""

from __future__ import annotations

import pytest

from support_triage.config import SUPPORT_CATEGORIES, URGENCY_LEVELS
from support_triage.triage.domain import Bucket, RuleBasedClassifier, bucket_for, first_template
from support_triage.triage.domain.rules import REASONING_TEMPLATES, RESPONSE_TEMPLATES


class TestBuckets:
    """Tests for which bucket a message lands in."""

    def test_billing_keyword(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("I need a copy of my last invoice")
        assert result.category == "Billing Issue"
        assert result.urgency == "Medium"

    def test_billing_wins_over_technical(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("I want a refund, the app keeps showing an error")
        assert result.category == "Billing Issue"
        assert result.urgency == "Medium"

    def test_billing_wins_even_when_server_is_down(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("My invoice is wrong and the server is down")
        assert result.category == "Billing Issue"
        assert result.urgency == "Medium"

    def test_cancel_account_is_billing(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("Please cancel my account")
        assert result.category == "Billing Issue"

    def test_cancel_without_account_is_not_billing(self) -> None:
        assert bucket_for("I want to cancel my order") != Bucket.BILLING

    def test_problem_alone_is_technical(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("There is a problem with my dashboard")
        assert result.category == "Technical Problem"
        assert result.urgency == "Medium"

    def test_no_problem_falls_through(self, classifier: RuleBasedClassifier) -> None:
        assert bucket_for("no problem at all") == Bucket.AMBIGUOUS
        result = classifier.classify("no problem at all")
        assert result.category == "General Inquiry"
        assert result.urgency == "Low"

    def test_server_down_is_high_urgency(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("Is the server down?")
        assert result.category == "Technical Problem"
        assert result.urgency == "High"

    def test_slow_page_is_medium_urgency(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("The page keeps loading forever")
        assert result.category == "Technical Problem"
        assert result.urgency == "Medium"

    def test_thanks_but_crash_is_technical(self, classifier: RuleBasedClassifier) -> None:
        assert bucket_for("Thanks so much, but the app crashed") == Bucket.TECHNICAL
        result = classifier.classify("Thanks so much, but the app crashed")
        assert result.category == "Technical Problem"

    def test_would_be_great_is_feature(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("It would be great to have dark mode")
        assert result.category == "Feature Request"
        assert result.urgency == "Low"

    def test_please_add_is_feature(self) -> None:
        assert bucket_for("Could you please add an export button?") == Bucket.FEATURE

    def test_thank_you_is_positive(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("Thank you, your team is amazing")
        assert result.category == "General Inquiry"
        assert result.urgency == "Low"
        assert result.suggested_response == RESPONSE_TEMPLATES[Bucket.POSITIVE][0]

    def test_thanks_however_is_not_positive(self) -> None:
        assert bucket_for("Thanks, however I still cannot log in") != Bucket.POSITIVE

    def test_question_word_is_inquiry(self) -> None:
        assert bucket_for("Where can I find my settings") == Bucket.INQUIRY

    def test_question_mark_is_inquiry(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("Do you ship to Canada?")
        assert result.category == "General Inquiry"
        assert result.urgency == "Low"
        assert result.reasoning == REASONING_TEMPLATES[Bucket.INQUIRY][0]

    def test_unmatched_is_ambiguous(self, classifier: RuleBasedClassifier) -> None:
        result = classifier.classify("Hello")
        assert result.category == "General Inquiry"
        assert result.urgency == "Low"
        assert result.suggested_response == RESPONSE_TEMPLATES[Bucket.AMBIGUOUS][0]

    def test_matching_is_case_insensitive(self) -> None:
        assert bucket_for("PAYMENT FAILED") == Bucket.BILLING

    def test_empty_message_is_ambiguous(self) -> None:
        assert bucket_for("") == Bucket.AMBIGUOUS


@pytest.mark.parametrize(
    "message",
    [
        "",
        "Hello",
        "refund please",
        "Is the server down?",
        "I wish you had a calendar view",
        "thanks!",
        "what is your address",
        "no problem",
    ],
)
def test_results_stay_inside_the_taxonomy(message: str) -> None:
    result = RuleBasedClassifier().classify(message)
    assert result.category in SUPPORT_CATEGORIES
    assert result.urgency in URGENCY_LEVELS
    assert result.suggested_response
    assert result.reasoning


class TestTemplateChoice:
    """Tests for the pluggable template chooser."""

    def test_random_choice_draws_from_bucket_tables(self) -> None:
        classifier = RuleBasedClassifier()
        for _ in range(20):
            result = classifier.classify("The app crashed again")
            assert result.suggested_response in RESPONSE_TEMPLATES[Bucket.TECHNICAL]
            assert result.reasoning in REASONING_TEMPLATES[Bucket.TECHNICAL]

    def test_injected_chooser_receives_bucket_tables(self) -> None:
        seen: list = []

        def chooser(templates):
            seen.append(tuple(templates))
            return templates[-1]

        result = RuleBasedClassifier(chooser=chooser).classify("Please add a feature")
        assert seen == [RESPONSE_TEMPLATES[Bucket.FEATURE], REASONING_TEMPLATES[Bucket.FEATURE]]
        assert result.reasoning == REASONING_TEMPLATES[Bucket.FEATURE][-1]

    def test_seeded_classifier_is_reproducible(self) -> None:
        messages = ["refund", "server down", "how do I export?", "hmm"] * 3
        first = [RuleBasedClassifier.seeded(7).classify(m) for m in messages]
        second = [RuleBasedClassifier.seeded(7).classify(m) for m in messages]
        assert first == second

    def test_first_template(self) -> None:
        assert first_template(("a", "b")) == "a"


def test_every_bucket_has_templates() -> None:
    buckets = {
        Bucket.BILLING, Bucket.TECHNICAL, Bucket.FEATURE,
        Bucket.POSITIVE, Bucket.INQUIRY, Bucket.AMBIGUOUS,
    }
    assert set(RESPONSE_TEMPLATES) == buckets
    assert set(REASONING_TEMPLATES) == buckets
    assert len(RESPONSE_TEMPLATES[Bucket.POSITIVE]) == 1
    assert len(RESPONSE_TEMPLATES[Bucket.AMBIGUOUS]) == 1


def test_reply_templates_keep_their_exact_wording() -> None:
    first_technical = RESPONSE_TEMPLATES[Bucket.TECHNICAL][0]
    assert "these technical difficulties—I know how disruptive" in first_technical
    assert RESPONSE_TEMPLATES[Bucket.POSITIVE][0].startswith("Hi! reading this made my day.")
