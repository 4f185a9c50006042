"""Sentence splitting for plain legal text.

Uses punctuation + capitalisation heuristics -- no NLTK required.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

#: A boundary is ``.``, ``!`` or ``?`` followed by whitespace and an uppercase
#: letter, digit, quote or parenthesis. Neither side is consumed.
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9\"'()])")


def split_sentences(text: str) -> list[str]:
    """Split *text* into trimmed, non-empty sentences in document order.

    Newlines are treated as spaces before splitting, so a sentence may span
    several lines of the source. Text without any boundary comes back as a
    single sentence; empty or whitespace-only text yields ``[]``.
    """
    if not text or not text.strip():
        return []
    flattened = text.replace("\n", " ")
    sentences = [s.strip() for s in SENTENCE_BOUNDARY.split(flattened)]
    sentences = [s for s in sentences if s]
    logger.debug("Split %d characters into %d sentences", len(text), len(sentences))
    return sentences
