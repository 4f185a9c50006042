"""LegalSimplify -- plain-language summaries, Q&A and risk flags for legal text."""

__version__ = "0.1.0"

from .analyzer import DocumentSimplifier
from .glossary import LEGAL_GLOSSARY, GlossaryRule, annotate, explain_terms
from .models import ChatExchange, DocumentReport, RiskFinding, SummaryPoint
from .qa import IntentRule, QuestionAnswerer, answer
from .risks import RISK_KEYWORDS, detect_risks
from .sentences import split_sentences
from .session import SimplifySession
from .summarizer import LegalSummarizer, SentenceScore, SummaryResult, summarize

__all__ = [
    # Core
    "DocumentSimplifier",
    "split_sentences",
    # Summarization
    "LegalSummarizer",
    "SentenceScore",
    "SummaryResult",
    "summarize",
    # Glossary
    "GlossaryRule",
    "LEGAL_GLOSSARY",
    "annotate",
    "explain_terms",
    # Questions
    "IntentRule",
    "QuestionAnswerer",
    "answer",
    # Risks
    "RISK_KEYWORDS",
    "detect_risks",
    # Session & models
    "SimplifySession",
    "ChatExchange",
    "DocumentReport",
    "RiskFinding",
    "SummaryPoint",
]
