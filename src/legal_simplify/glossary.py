"""Plain-language glosses for common legal jargon.

Each :class:`GlossaryRule` pairs a case-insensitive pattern with a short
explanation. :func:`annotate` appends the explanation in parentheses right
after the first occurrence of every matching term.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class GlossaryRule:
    """A legal term, the pattern that finds it, and its plain-language meaning."""

    term: str
    pattern: re.Pattern[str]
    explanation: str

    def apply(self, text: str) -> str:
        """Annotate the first match of this rule in *text*."""
        match = self.pattern.search(text)
        if match is None:
            return text
        end = match.end()
        return f"{text[:end]} ({self.explanation}){text[end:]}"


def _rule(term: str, pattern: str, explanation: str) -> GlossaryRule:
    return GlossaryRule(term=term, pattern=re.compile(pattern, re.IGNORECASE), explanation=explanation)


#: Applied in this order; later rules see the glosses added by earlier ones.
LEGAL_GLOSSARY: tuple[GlossaryRule, ...] = (
    _rule("force majeure", r"force\s+majeure", "unavoidable events (e.g., natural disaster)"),
    _rule("indemnify", r"indemnif(?:y|ies|ication)", "compensation if someone sues you"),
    _rule("waiver", r"waiver", "giving up a right intentionally"),
    # "onal" before "on", so "jurisdictional" is glossed after the whole word.
    _rule("jurisdiction", r"jurisdicti(?:onal|on)", "which court's rules apply"),
    _rule("notwithstanding", r"notwithstanding", "despite the above"),
    _rule("liability", r"liabilit(?:y|ies)", "legal responsibility for harm"),
    _rule("confidentiality", r"confidential(?:ity)?", "kept private"),
    _rule("termination", r"termination", "ending the agreement"),
)


def annotate(sentence: str, rules: tuple[GlossaryRule, ...] = LEGAL_GLOSSARY) -> str:
    """Return *sentence* with an inline gloss after the first match of each rule."""
    for rule in rules:
        sentence = rule.apply(sentence)
    return sentence


def explain_terms(
    text: str, rules: tuple[GlossaryRule, ...] = LEGAL_GLOSSARY
) -> list[tuple[str, str]]:
    """List ``(term, explanation)`` for every glossary term present in *text*."""
    return [(rule.term, rule.explanation) for rule in rules if rule.pattern.search(text)]
