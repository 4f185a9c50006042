"""Tests for the keyword question answerer."""

from __future__ import annotations

import pytest

from legal_simplify.qa import (
    DEFAULT_RULES,
    EMPTY_QUESTION_PROMPT,
    NO_PAYMENT_CLAUSE,
    NO_RELEVANT_ANSWER,
    NO_TERMINATION_CLAUSE,
    PAYMENT_PATTERN,
    TERMINATION_PATTERN,
    IntentRule,
    QuestionAnswerer,
    answer,
    matching_sentences,
    mentions,
)


class TestEmptyQuestion:
    @pytest.mark.parametrize("question", ["", "   ", "\n\t"])
    def test_prompt(self, question: str) -> None:
        assert answer(question, "Either party may terminate.", ["point"]) == EMPTY_QUESTION_PROMPT


class TestTermination:
    def test_finds_inflected_sentence(self) -> None:
        result = answer(
            "When can I terminate?",
            "This agreement may be terminated by either party with 30 days notice.",
            [],
        )
        assert "terminated by either party with 30 days notice." in result

    def test_question_is_case_insensitive(self) -> None:
        result = answer("TERMINATE?", "You may Terminate at will. Fees apply.", [])
        assert result == "You may Terminate at will."

    def test_at_most_three_sentences(self) -> None:
        text = "A may terminate. B may terminate. C may terminate. D may terminate."
        assert answer("terminate", text, []) == "A may terminate. B may terminate. C may terminate."

    def test_fallback(self) -> None:
        assert answer("Can I terminate?", "Payment is due monthly.", []) == NO_TERMINATION_CLAUSE

    def test_termination_noun_does_not_match(self) -> None:
        # "termination" does not contain "terminate"
        assert answer("terminate?", "Termination requires notice.", []) == NO_TERMINATION_CLAUSE

    def test_takes_precedence_over_payment(self) -> None:
        text = "A fee is due. Either party may terminate."
        assert answer("Is there a fee to terminate?", text, []) == "Either party may terminate."


class TestPayment:
    def test_payment_fee_and_price(self) -> None:
        text = "The price is $10. Fees are due monthly. Nothing else."
        assert answer("What is the payment schedule?", text, []) == (
            "The price is $10. Fees are due monthly."
        )

    def test_fee_question(self) -> None:
        assert answer("any fee?", "Payment is due on receipt.", []) == "Payment is due on receipt."

    def test_negated_mention_falls_back(self) -> None:
        result = answer("what is the fee?", "No fee is mentioned here. The weather is nice.", [])
        assert result == NO_PAYMENT_CLAUSE

    def test_fallback(self) -> None:
        assert answer("payment?", "The weather is nice.", []) == NO_PAYMENT_CLAUSE

    def test_negated_mention_with_modal_is_a_clause(self) -> None:
        text = "No payment shall be due until the goods are delivered. The weather is nice."
        assert answer("When is payment due?", text, []) == (
            "No payment shall be due until the goods are delivered."
        )


class TestFallbacks:
    def test_summary_head(self) -> None:
        assert answer("What is this?", "Some text.", ["one", "two", "three"]) == "one two"

    def test_single_summary_point(self) -> None:
        assert answer("What is this?", "Some text.", ["only"]) == "only"

    def test_no_relevant_answer(self) -> None:
        assert answer("What is this?", "Some text.", []) == NO_RELEVANT_ANSWER


class TestMentions:
    def test_plain_match(self) -> None:
        assert mentions("A fee applies.", PAYMENT_PATTERN)

    @pytest.mark.parametrize(
        "sentence",
        ["No fee applies.", "Delivered without payment.", "The service is free of fees."],
    )
    def test_negated_match(self, sentence: str) -> None:
        assert not mentions(sentence, PAYMENT_PATTERN)

    @pytest.mark.parametrize(
        "sentence",
        [
            "No payment shall be due until delivery.",
            "Services without fee must be approved in writing.",
            "No fee will be charged for renewals.",
        ],
    )
    def test_negated_match_with_modal_verb(self, sentence: str) -> None:
        assert mentions(sentence, PAYMENT_PATTERN)

    def test_any_unnegated_match_counts(self) -> None:
        assert mentions("No fee applies, but a fee for extras is due.", PAYMENT_PATTERN)

    def test_negation_must_be_a_whole_word(self) -> None:
        # "casino" ends in "no" but is not a negation
        assert mentions("The casino fee is high.", PAYMENT_PATTERN)

    def test_matching_sentences_limit(self) -> None:
        text = "We terminate. They terminate. Nobody else."
        assert matching_sentences(text, TERMINATION_PATTERN, limit=1) == ["We terminate."]


class TestQuestionAnswerer:
    def test_default_rule_order(self) -> None:
        assert [rule.name for rule in DEFAULT_RULES] == ["empty", "termination", "payment", "summary"]

    def test_custom_rule_is_tried_in_order(self) -> None:
        greeting = IntentRule(
            "greeting",
            lambda ctx: "hello" in ctx.normalized_question,
            lambda ctx: "Hi! Ask me about termination or fees.",
        )
        qa = QuestionAnswerer(rules=(greeting, *DEFAULT_RULES))
        assert qa.answer("Hello there", "Text.", []) == "Hi! Ask me about termination or fees."
        assert qa.answer("", "Text.", []) == EMPTY_QUESTION_PROMPT

    def test_custom_fallback(self) -> None:
        qa = QuestionAnswerer(rules=(), fallback="Nothing to say.")
        assert qa.answer("terminate?", "We terminate.", []) == "Nothing to say."

    def test_deterministic(self, sample_contract_text: str) -> None:
        qa = QuestionAnswerer()
        first = qa.answer("When can I terminate?", sample_contract_text, [])
        assert first == qa.answer("When can I terminate?", sample_contract_text, [])
        assert "terminate" in first.lower()
