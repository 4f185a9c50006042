"""Keyword-based detection of legally risky sentences."""

from __future__ import annotations

import logging

from .sentences import split_sentences

logger = logging.getLogger(__name__)

#: Stems that flag a sentence as risky ("penalt" covers penalty/penalties).
RISK_KEYWORDS: tuple[str, ...] = (
    "indemnify",
    "liability",
    "penalt",
    "breach",
    "terminate",
    "obligation",
)

MAX_RISKS = 6


def is_risky(sentence: str) -> bool:
    lowered = sentence.lower()
    return any(k in lowered for k in RISK_KEYWORDS)


def detect_risks(text: str, limit: int = MAX_RISKS) -> list[str]:
    """Return the first *limit* sentences of *text* containing a risk keyword.

    Sentences keep their document order. *limit* is capped at
    :data:`MAX_RISKS`.
    """
    limit = max(0, min(limit, MAX_RISKS))
    risks = [s for s in split_sentences(text) if is_risky(s)][:limit]
    logger.debug("Detected %d risk sentences", len(risks))
    return risks


def matched_keywords(sentence: str) -> list[str]:
    """The risk keywords present in *sentence*, in :data:`RISK_KEYWORDS` order."""
    lowered = sentence.lower()
    return [k for k in RISK_KEYWORDS if k in lowered]
