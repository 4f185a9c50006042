"""Mutable per-user state behind the presentation layer.

The Streamlit app keeps one :class:`SimplifySession` in
``st.session_state`` and routes every user action through it; the pure
functions in :mod:`summarizer`, :mod:`qa` and :mod:`risks` do the work.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .models import ChatExchange, SummaryPoint
from .parsers import decode_upload, read_text_document
from .qa import answer
from .risks import detect_risks
from .summarizer import DEFAULT_POINTS, summarize, validate_max_points

logger = logging.getLogger(__name__)


@dataclass
class SimplifySession:
    """Document, summary and chat history for one user session."""

    text: str = ""
    uploaded_name: str = ""
    summary_points: list[SummaryPoint] = field(default_factory=list)
    chat_log: list[ChatExchange] = field(default_factory=list)
    question: str = ""
    max_points: int = DEFAULT_POINTS

    def __post_init__(self) -> None:
        self.max_points = validate_max_points(self.max_points)

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def load_text(self, text: str) -> None:
        """Replace the document with pasted or edited text."""
        self.text = text

    def load_file(self, path: str | Path | None) -> None:
        """Load a plain-text file; ``None`` (nothing selected) is a no-op."""
        if path is None:
            return
        doc = read_text_document(path)
        self.uploaded_name = doc.filename
        self.text = doc.text

    def load_upload(self, name: str | None, data: bytes | str | None) -> None:
        """Load content handed over by a file-upload widget."""
        if not name or data is None:
            return
        self.uploaded_name = name
        self.text = decode_upload(data)
        logger.info("Loaded upload %s (%d characters)", name, len(self.text))

    @property
    def risks(self) -> list[str]:
        """Risk sentences of the current document, recomputed on each access."""
        return detect_risks(self.text)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def set_max_points(self, max_points: int) -> None:
        self.max_points = validate_max_points(max_points)

    def generate_summary(self) -> list[SummaryPoint]:
        """Recompute the summary points and start a fresh chat."""
        self.summary_points = summarize(self.text, self.max_points)
        self.chat_log = []
        return self.summary_points

    def ask(self, question: str | None = None) -> ChatExchange | None:
        """Answer *question* (or the pending :attr:`question`) and log it.

        Blank questions are ignored and return ``None``.
        """
        q = self.question if question is None else question
        if not q.strip():
            return None
        exchange = ChatExchange(question=q, answer=answer(q, self.text, self.summary_points))
        self.chat_log.append(exchange)
        self.question = ""
        return exchange

    def to_dict(self) -> dict:
        return {
            "uploaded_name": self.uploaded_name,
            "max_points": self.max_points,
            "summary_points": list(self.summary_points),
            "chat_log": [c.to_dict() for c in self.chat_log],
            "risks": self.risks,
        }
