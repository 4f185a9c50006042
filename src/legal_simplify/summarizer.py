"""Extractive "simplified summary" for legal documents.

Scores every sentence with a hand-tuned additive heuristic (legal keyword
hits, length and position), keeps the best ones and glosses their legal
jargon in plain language. No external ML models are required.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .glossary import annotate
from .sentences import split_sentences

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Scoring constants
# ---------------------------------------------------------------------------

#: Terms that mark a sentence as legally significant. Each one present adds
#: :data:`KEYWORD_WEIGHT` once, however often it repeats.
SUMMARY_KEYWORDS: tuple[str, ...] = (
    "obligation",
    "shall",
    "must",
    "liability",
    "termination",
    "confidential",
    "indemnify",
    "warranty",
    "payment",
    "fee",
    "notice",
    "force majeure",
    "dispute",
    "governing law",
    "breach",
)

KEYWORD_WEIGHT = 3.0
#: (length threshold in characters, bonus) pairs; all that apply are added.
LENGTH_BONUSES: tuple[tuple[int, float], ...] = ((120, 1.0), (250, 1.0))

MIN_POINTS = 1
MAX_POINTS = 10
DEFAULT_POINTS = 5


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------


@dataclass
class SentenceScore:
    """A scored sentence with its original position."""

    text: str
    position: int
    score: float


@dataclass
class SummaryResult:
    """Result of a summarization pass.

    ``points`` and ``key_sentences`` are in rank order (best first), not in
    document order.
    """

    points: list[str]
    key_sentences: list[SentenceScore]
    sentence_count: int
    word_count: int
    original_word_count: int
    top_keywords: list[str] = field(default_factory=list)

    @property
    def compression_ratio(self) -> float:
        return self.word_count / max(self.original_word_count, 1)

    def to_dict(self) -> dict:
        """Serialize to a plain dictionary."""
        return {
            "points": list(self.points),
            "scores": [
                {"position": s.position, "score": round(s.score, 3)} for s in self.key_sentences
            ],
            "sentence_count": self.sentence_count,
            "compression_ratio": round(self.compression_ratio, 3),
            "word_count": self.word_count,
            "original_word_count": self.original_word_count,
            "top_keywords": list(self.top_keywords),
        }


# ---------------------------------------------------------------------------
# Scoring helpers
# ---------------------------------------------------------------------------


def validate_max_points(max_points: int) -> int:
    """Return *max_points* as an int, or raise if it is outside 1..10."""
    value = int(max_points)
    if not (MIN_POINTS <= value <= MAX_POINTS):
        raise ValueError(f"max_points must be between {MIN_POINTS} and {MAX_POINTS}, got {max_points}")
    return value


def _keyword_hits(sentence: str) -> list[str]:
    lowered = sentence.lower()
    return [k for k in SUMMARY_KEYWORDS if k in lowered]


def score_sentence(sentence: str, index: int, total: int) -> float:
    """Heuristic importance of the sentence at *index* out of *total*.

    Keyword hits dominate; long sentences get a small bonus; earlier
    sentences get up to one extra point, shrinking linearly toward the end.
    """
    score = KEYWORD_WEIGHT * len(_keyword_hits(sentence))
    for threshold, bonus in LENGTH_BONUSES:
        if len(sentence) > threshold:
            score += bonus
    score += max(0.0, 1.0 - index / max(1, total))
    return score


def score_sentences(sentences: list[str]) -> list[SentenceScore]:
    """Score *sentences* and return them ranked, ties kept in document order."""
    total = len(sentences)
    scored = [
        SentenceScore(text=sentence, position=i, score=score_sentence(sentence, i, total))
        for i, sentence in enumerate(sentences)
    ]
    # sorted() is stable, so equal scores keep their original order.
    return sorted(scored, key=lambda s: s.score, reverse=True)


# ---------------------------------------------------------------------------
# LegalSummarizer
# ---------------------------------------------------------------------------


class LegalSummarizer:
    """Heuristic summarizer that turns a contract into a few plain points.

    Example::

        summarizer = LegalSummarizer(max_points=3)
        for point in summarizer.summarize(contract_text):
            print("-", point)
    """

    def __init__(self, max_points: int = DEFAULT_POINTS) -> None:
        """Create a LegalSummarizer.

        Args:
            max_points: Default number of summary points, 1 to 10. Can be
                overridden per call.

        Raises:
            ValueError: If *max_points* is out of range.
        """
        self.max_points = validate_max_points(max_points)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def summarize(self, text: str, max_points: int | None = None) -> list[str]:
        """Return up to *max_points* glossed summary points in rank order."""
        return self.score(text, max_points=max_points).points

    def score(self, text: str, max_points: int | None = None) -> SummaryResult:
        """Run the full scoring pass and return a :class:`SummaryResult`.

        Args:
            text: Full document text.
            max_points: Override the instance-level :attr:`max_points`.

        Raises:
            ValueError: If *max_points* is out of range.
        """
        n = validate_max_points(max_points if max_points is not None else self.max_points)
        original_word_count = len(text.split())

        sentences = split_sentences(text)
        if not sentences:
            return SummaryResult(
                points=[],
                key_sentences=[],
                sentence_count=0,
                word_count=0,
                original_word_count=original_word_count,
            )

        ranked = score_sentences(sentences)
        top = ranked[:n]
        points = [annotate(s.text) for s in top]
        logger.debug(
            "Selected %d of %d sentences (best score %.2f)", len(top), len(sentences), top[0].score
        )

        return SummaryResult(
            points=points,
            key_sentences=top,
            sentence_count=len(sentences),
            word_count=sum(len(s.text.split()) for s in top),
            original_word_count=original_word_count,
            top_keywords=_top_keywords(sentences),
        )


def _top_keywords(sentences: list[str], n: int = 5) -> list[str]:
    """The *n* summary keywords found in the most sentences."""
    counts = {k: sum(1 for s in sentences if k in s.lower()) for k in SUMMARY_KEYWORDS}
    present = [k for k in SUMMARY_KEYWORDS if counts[k]]
    return sorted(present, key=lambda k: counts[k], reverse=True)[:n]


_default_summarizer = LegalSummarizer()


def summarize(text: str, max_points: int = DEFAULT_POINTS) -> list[str]:
    """Summarize *text* into at most *max_points* glossed points."""
    return _default_summarizer.summarize(text, max_points=max_points)
