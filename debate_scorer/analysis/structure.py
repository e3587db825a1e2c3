"""
Structural analysis: introduction, conclusion, transitions and sentence variety
"""

import logging
import math
import re
from typing import Dict, Optional

from .lexicons import DEFAULT_LEXICONS, Lexicons
from .models import StructureResult
from .text import phrase_pattern, split_paragraphs, split_sentences

logger = logging.getLogger(__name__)


def classify_variety(deviation: float) -> str:
    if deviation > 5:
        return "high"
    if deviation > 2:
        return "medium"
    return "low"


VARIETY_POINTS = {"high": 25, "medium": 15, "low": 5}


class StructuralAnalyzer:
    """Detects organisational signals in a response."""

    def __init__(self, lexicons: Optional[Lexicons] = None):
        self.lexicons = lexicons or DEFAULT_LEXICONS
        openers = "|".join(re.escape(p) for p in self.lexicons.introduction_openers)
        closers = "|".join(re.escape(p) for p in self.lexicons.conclusion_markers)
        self._intro_re = re.compile(rf"^(?:{openers})", re.IGNORECASE)
        self._conclusion_re = re.compile(rf"(?:{closers})", re.IGNORECASE)
        self._transition_patterns = {
            kind: [phrase_pattern(p) for p in phrases]
            for kind, phrases in self.lexicons.transitions.items()
        }

    def count_transitions(self, text: str) -> Dict[str, int]:
        """Whole-word occurrences of each transition category."""
        return {
            kind: sum(len(p.findall(text)) for p in patterns)
            for kind, patterns in self._transition_patterns.items()
        }

    def analyze(self, text: str) -> StructureResult:
        stripped = text.strip()
        has_introduction = bool(self._intro_re.match(stripped))
        has_conclusion = bool(self._conclusion_re.search(text))

        transitions = self.count_transitions(text)
        transition_count = sum(transitions.values())

        lengths = [len(s.text.split()) for s in split_sentences(text)]
        deviation = 0.0
        if lengths:
            mean = sum(lengths) / len(lengths)
            variance = sum((n - mean) ** 2 for n in lengths) / len(lengths)
            deviation = math.sqrt(variance)
        variety = classify_variety(deviation)

        structure_score = (
            (25 if has_introduction else 0)
            + (25 if has_conclusion else 0)
            + min(transition_count * 5, 25)
            + VARIETY_POINTS[variety]
        )

        return StructureResult(
            has_introduction=has_introduction,
            has_conclusion=has_conclusion,
            paragraph_count=len(split_paragraphs(text)),
            transition_count=transition_count,
            transitions_by_type=transitions,
            sentence_length_deviation=deviation,
            sentence_variety=variety,
            structure_score=structure_score,
        )
