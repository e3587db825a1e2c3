"""
Detection of rhetorical debate elements.

Every sentence is scanned for each category's indicator phrases using plain
case-insensitive substring containment, so "argue" also fires inside
"argued" and "arguing".
"""

import logging
from typing import Dict, List, Optional

from .lexicons import DEFAULT_LEXICONS, Lexicons
from .models import DebateElement, DebateElementsResult, DebateElementType
from .text import split_sentences

logger = logging.getLogger(__name__)

ELEMENT_POINTS = {
    DebateElementType.CLAIM: 10,
    DebateElementType.EVIDENCE: 15,
    DebateElementType.REASONING: 10,
    DebateElementType.COUNTERARGUMENT: 15,
    DebateElementType.CONCESSION: 10,
}


def assess_balance(counts: Dict[str, int]) -> str:
    """Rate how well a response covers both sides of the argument."""
    has_core = all(
        counts.get(c.value, 0) > 0
        for c in (DebateElementType.CLAIM, DebateElementType.EVIDENCE, DebateElementType.REASONING)
    )
    has_counter = counts.get(DebateElementType.COUNTERARGUMENT.value, 0) > 0
    has_concession = counts.get(DebateElementType.CONCESSION.value, 0) > 0

    if has_core and has_counter and has_concession:
        return "excellent"
    if has_core and (has_counter or has_concession):
        return "good"
    if has_core:
        return "adequate"
    return "needs improvement"


class DebateElementExtractor:
    """Finds claims, evidence, reasoning, counterarguments and concessions."""

    def __init__(self, lexicons: Optional[Lexicons] = None):
        self.lexicons = lexicons or DEFAULT_LEXICONS
        self.indicators = {
            DebateElementType(category): tuple(p.lower() for p in phrases)
            for category, phrases in self.lexicons.debate_indicators.items()
        }

    def extract(self, text: str) -> DebateElementsResult:
        elements: List[DebateElement] = []

        for sentence in split_sentences(text):
            lowered = sentence.text.lower()
            for category, phrases in self.indicators.items():
                for phrase in phrases:
                    if phrase in lowered:
                        elements.append(
                            DebateElement(
                                category=category,
                                indicator=phrase,
                                sentence=sentence.text,
                                char_start=sentence.start,
                                char_end=sentence.end,
                            )
                        )

        result = DebateElementsResult(elements=elements)
        counts = result.counts
        raw_score = sum(
            counts[category.value] * points for category, points in ELEMENT_POINTS.items()
        )
        result.debate_quality_score = min(100, raw_score)
        result.balance = assess_balance(counts)

        logger.debug(f"Debate elements: {counts} -> balance {result.balance}")
        return result
