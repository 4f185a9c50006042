"""Data models shared by the session, CLI and app."""

from __future__ import annotations

from dataclasses import dataclass, field

#: A summary sentence, possibly carrying inline glosses.
SummaryPoint = str


@dataclass(frozen=True)
class ChatExchange:
    """One question asked about the document and the answer given."""

    question: str
    answer: str

    def to_dict(self) -> dict:
        return {"question": self.question, "answer": self.answer}


@dataclass(frozen=True)
class RiskFinding:
    """A risky sentence and the risk keywords that flagged it."""

    sentence: str
    keywords: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {"sentence": self.sentence, "keywords": list(self.keywords)}


@dataclass
class DocumentReport:
    """Everything the CLI ``analyze`` command prints about one document."""

    filename: str
    summary: list[SummaryPoint] = field(default_factory=list)
    risks: list[RiskFinding] = field(default_factory=list)
    glossary: list[tuple[str, str]] = field(default_factory=list)
    sentence_count: int = 0

    @property
    def has_risks(self) -> bool:
        return bool(self.risks)

    def to_dict(self) -> dict:
        return {
            "filename": self.filename,
            "sentence_count": self.sentence_count,
            "summary": list(self.summary),
            "risks": [r.to_dict() for r in self.risks],
            "glossary": [{"term": term, "explanation": text} for term, text in self.glossary],
        }
