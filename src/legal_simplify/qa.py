"""Canned question answering over a document.

A tiny rule engine: :class:`QuestionAnswerer` walks an ordered tuple of
:class:`IntentRule` entries and answers with the first one whose predicate
accepts the question. Intent answers are built by keyword-filtering the
document's sentences; nothing here understands language.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .sentences import split_sentences

logger = logging.getLogger(__name__)

EMPTY_QUESTION_PROMPT = "Please ask a question about the uploaded document."
NO_TERMINATION_CLAUSE = "No explicit termination clause found."
NO_PAYMENT_CLAUSE = "No payment clause found."
NO_RELEVANT_ANSWER = "No relevant answer found."

MAX_MATCHING_SENTENCES = 3
SUMMARY_FALLBACK_POINTS = 2

TERMINATION_PATTERN = re.compile(r"terminate", re.IGNORECASE)
PAYMENT_PATTERN = re.compile(r"payment|fee|price", re.IGNORECASE)

#: Words that, directly before a keyword, turn it into a statement of absence
#: ("no fee", "without payment").
_NEGATION = re.compile(r"\b(?:no|without|free\s+of)\s+$", re.IGNORECASE)
#: A modal verb makes a negated mention a clause again ("No payment shall be due until ...").
_MODAL = re.compile(r"\b(?:shall|must|will|may)\b", re.IGNORECASE)


@dataclass(frozen=True)
class AnswerContext:
    """Everything an intent handler may look at."""

    question: str
    original_text: str
    summary: Sequence[str]

    @property
    def normalized_question(self) -> str:
        return self.question.lower()


@dataclass(frozen=True)
class IntentRule:
    """``handler`` answers when ``predicate`` accepts the context."""

    name: str
    predicate: Callable[[AnswerContext], bool]
    handler: Callable[[AnswerContext], str]


def mentions(sentence: str, pattern: re.Pattern[str]) -> bool:
    """True if *sentence* mentions *pattern* as more than a statement of absence.

    A match directly after "no", "without" or "free of" is skipped unless the
    sentence also carries a modal verb, so "No fee is mentioned here." does
    not count but "No payment shall be due until delivery." does.
    """
    if _MODAL.search(sentence):
        return pattern.search(sentence) is not None
    for match in pattern.finditer(sentence):
        if not _NEGATION.search(sentence[: match.start()]):
            return True
    return False


def matching_sentences(
    text: str, pattern: re.Pattern[str], limit: int = MAX_MATCHING_SENTENCES
) -> list[str]:
    """The first *limit* sentences of *text* that mention *pattern*."""
    return [s for s in split_sentences(text) if mentions(s, pattern)][:limit]


def _sentences_or(pattern: re.Pattern[str], fallback: str) -> Callable[[AnswerContext], str]:
    def handler(ctx: AnswerContext) -> str:
        return " ".join(matching_sentences(ctx.original_text, pattern)) or fallback

    return handler


def _summary_head(ctx: AnswerContext) -> str:
    return " ".join(ctx.summary[:SUMMARY_FALLBACK_POINTS])


DEFAULT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        "empty",
        lambda ctx: not ctx.question.strip(),
        lambda ctx: EMPTY_QUESTION_PROMPT,
    ),
    IntentRule(
        "termination",
        lambda ctx: "terminate" in ctx.normalized_question,
        _sentences_or(TERMINATION_PATTERN, NO_TERMINATION_CLAUSE),
    ),
    IntentRule(
        "payment",
        lambda ctx: "payment" in ctx.normalized_question or "fee" in ctx.normalized_question,
        _sentences_or(PAYMENT_PATTERN, NO_PAYMENT_CLAUSE),
    ),
    IntentRule(
        "summary",
        lambda ctx: len(ctx.summary) > 0,
        _summary_head,
    ),
)


class QuestionAnswerer:
    """Answer questions about a document with ordered keyword intents.

    Example::

        qa = QuestionAnswerer()
        qa.answer("When can I terminate?", contract_text, summary_points)

    Args:
        rules: Intent rules tried in order. Defaults to :data:`DEFAULT_RULES`.
        fallback: Answer used when no rule matches.
    """

    def __init__(
        self,
        rules: Sequence[IntentRule] = DEFAULT_RULES,
        fallback: str = NO_RELEVANT_ANSWER,
    ) -> None:
        self.rules = tuple(rules)
        self.fallback = fallback

    def answer(self, question: str, original_text: str, summary: Sequence[str] = ()) -> str:
        """Answer *question* from *original_text* and the current *summary*."""
        ctx = AnswerContext(question=question, original_text=original_text, summary=summary)
        for rule in self.rules:
            if rule.predicate(ctx):
                logger.debug("Question %r matched intent %s", question, rule.name)
                return rule.handler(ctx)
        logger.debug("Question %r matched no intent", question)
        return self.fallback


_default_answerer = QuestionAnswerer()


def answer(question: str, original_text: str, summary: Sequence[str] = ()) -> str:
    """Answer *question* using the default intent rules."""
    return _default_answerer.answer(question, original_text, summary)
