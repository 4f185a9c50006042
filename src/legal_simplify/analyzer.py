"""One-call analysis of a plain-text legal document.

The ``DocumentSimplifier`` class loads a file, summarizes it, flags risky
sentences and lists the glossary terms it uses, returning a
``DocumentReport``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .glossary import explain_terms
from .models import DocumentReport, RiskFinding
from .parsers import read_text_document
from .qa import QuestionAnswerer
from .risks import detect_risks, matched_keywords
from .sentences import split_sentences
from .summarizer import DEFAULT_POINTS, LegalSummarizer, SummaryResult

logger = logging.getLogger(__name__)


class DocumentSimplifier:
    """High-level entry point used by the CLI.

    Example::

        simplifier = DocumentSimplifier(max_points=3)
        report = simplifier.analyze("contract.txt")
        for point in report.summary:
            print(point)

    Args:
        max_points: Default number of summary points (1-10).
        summarizer: Custom LegalSummarizer instance (optional).
        answerer: Custom QuestionAnswerer instance (optional).
    """

    def __init__(
        self,
        max_points: int = DEFAULT_POINTS,
        summarizer: LegalSummarizer | None = None,
        answerer: QuestionAnswerer | None = None,
    ) -> None:
        self._summarizer = summarizer or LegalSummarizer(max_points=max_points)
        self._answerer = answerer or QuestionAnswerer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def analyze(self, file_path: str | Path, max_points: int | None = None) -> DocumentReport:
        """Load *file_path* and build a :class:`DocumentReport`.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If *max_points* is out of range.
        """
        doc = read_text_document(file_path)
        return self.analyze_text(doc.text, filename=doc.filename, max_points=max_points)

    def analyze_text(
        self, text: str, filename: str = "<text>", max_points: int | None = None
    ) -> DocumentReport:
        """Build a :class:`DocumentReport` for already-loaded *text*."""
        summary = self._summarizer.summarize(text, max_points=max_points)
        risks = [RiskFinding(s, tuple(matched_keywords(s))) for s in detect_risks(text)]
        report = DocumentReport(
            filename=filename,
            summary=summary,
            risks=risks,
            glossary=explain_terms(text),
            sentence_count=len(split_sentences(text)),
        )
        logger.info(
            "Analyzed %s: %d points, %d risks", filename, len(report.summary), len(report.risks)
        )
        return report

    def score_file(self, file_path: str | Path, max_points: int | None = None) -> SummaryResult:
        """Summarize the document at *file_path*, keeping the scoring details."""
        doc = read_text_document(file_path)
        return self._summarizer.score(doc.text, max_points=max_points)

    def ask(self, file_path: str | Path, question: str, max_points: int | None = None) -> str:
        """Answer *question* about the document at *file_path*.

        The summary fallback uses a fresh summary of the document.
        """
        doc = read_text_document(file_path)
        summary = self._summarizer.summarize(doc.text, max_points=max_points)
        return self._answerer.answer(question, doc.text, summary)
