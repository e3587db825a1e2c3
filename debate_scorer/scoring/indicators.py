"""
Indicator evaluation.

Each indicator kind has one evaluator registered with ``@evaluator``. Count
kinds award ``points`` per occurrence up to ``points * 2``; flag and threshold
kinds award ``points`` once when their condition holds.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from ..analysis.models import DebateElementType, LinguisticProfile
from ..analysis.text import Segment, split_paragraphs, split_sentences
from .rubric import Indicator, IndicatorKind

Evaluator = Callable[[Indicator, "IndicatorContext"], float]

# Global registry: indicator kind -> evaluator
_EVALUATORS: Dict[str, Evaluator] = {}

_ROADMAP_RE = re.compile(
    r"\b(?:I will (?:first )?(?:discuss|outline|address|cover|examine|explain|show)"
    r"|this (?:response|essay|speech|argument) will)\b",
    re.IGNORECASE,
)
_ORDINAL_RE = re.compile(r"\b(?:first(?:ly)?|second(?:ly)?|third(?:ly)?|next|then|finally)\b", re.IGNORECASE)
_SUMMARY_RE = re.compile(
    r"\b(?:in summary|to summarize|to summarise|to sum up|in short|in sum|overall|all in all)\b",
    re.IGNORECASE,
)
_CALL_TO_ACTION_RE = re.compile(
    r"\b(?:we must|we should|we need to|let us|let's|i urge|it is time to)\b",
    re.IGNORECASE,
)

FORMALITY_THRESHOLD = 95.0
TOPIC_SENTENCE_MIN_WORDS = 5
PROGRESSION_MIN_CATEGORIES = 3


@dataclass(frozen=True)
class IndicatorContext:
    """Per-call facts an indicator may consult."""

    text: str
    profile: LinguisticProfile
    sentences: Tuple[Segment, ...]
    paragraphs: Tuple[str, ...]

    @classmethod
    def build(cls, text: str, profile: LinguisticProfile) -> "IndicatorContext":
        return cls(
            text=text,
            profile=profile,
            sentences=tuple(split_sentences(text)),
            paragraphs=tuple(split_paragraphs(text)),
        )


def evaluator(kind: IndicatorKind) -> Callable[[Evaluator], Evaluator]:
    """Decorator registering the evaluator for an indicator kind."""

    def decorator(func: Evaluator) -> Evaluator:
        _EVALUATORS[kind.value] = func
        return func

    return decorator


def registered_kinds() -> frozenset:
    return frozenset(_EVALUATORS)


def evaluate_indicator(indicator: Indicator, context: IndicatorContext) -> float:
    """Points earned by one indicator; kinds without an evaluator earn 0."""
    func = _EVALUATORS.get(indicator.kind)
    if func is None:
        return 0.0
    return func(indicator, context)


def capped(count: int, points: float) -> float:
    return min(count * points, points * 2)


def flag(condition: bool, points: float) -> float:
    return points if condition else 0.0


@evaluator(IndicatorKind.KEYWORD)
def _keyword(indicator: Indicator, context: IndicatorContext) -> float:
    pattern = rf"\b{re.escape(indicator.word)}\b"
    return capped(len(re.findall(pattern, context.text, re.IGNORECASE)), indicator.points)


@evaluator(IndicatorKind.PATTERN)
def _pattern(indicator: Indicator, context: IndicatorContext) -> float:
    count = sum(1 for _ in re.finditer(indicator.regex, context.text.strip(), indicator.flags))
    return capped(count, indicator.points)


@evaluator(IndicatorKind.MIN_WORDS)
def _min_words(indicator: Indicator, context: IndicatorContext) -> float:
    return flag(context.profile.metrics.word_count >= indicator.threshold, indicator.points)


@evaluator(IndicatorKind.MIN_SENTENCES)
def _min_sentences(indicator: Indicator, context: IndicatorContext) -> float:
    return flag(context.profile.metrics.sentence_count >= indicator.threshold, indicator.points)


@evaluator(IndicatorKind.AVG_WORD_LENGTH)
def _avg_word_length(indicator: Indicator, context: IndicatorContext) -> float:
    metrics = context.profile.metrics
    in_range = indicator.minimum <= metrics.average_word_length <= indicator.maximum
    return flag(metrics.word_count > 0 and in_range, indicator.points)


@evaluator(IndicatorKind.SENTENCE_VARIETY)
def _sentence_variety(indicator: Indicator, context: IndicatorContext) -> float:
    return flag(context.profile.structure.sentence_variety != "low", indicator.points)


@evaluator(IndicatorKind.RHETORICAL_QUESTIONS)
def _rhetorical_questions(indicator: Indicator, context: IndicatorContext) -> float:
    return capped(sum(1 for s in context.sentences if s.is_question), indicator.points)


@evaluator(IndicatorKind.FORMALITY)
def _formality(indicator: Indicator, context: IndicatorContext) -> float:
    return flag(context.profile.language_quality.formality_score >= FORMALITY_THRESHOLD, indicator.points)


@evaluator(IndicatorKind.TRANSITION_WORDS)
def _transition_words(indicator: Indicator, context: IndicatorContext) -> float:
    return flag(context.profile.structure.transition_count >= indicator.threshold, indicator.points)


@evaluator(IndicatorKind.PARAGRAPH_COUNT)
def _paragraph_count(indicator: Indicator, context: IndicatorContext) -> float:
    return flag(context.profile.metrics.paragraph_count >= indicator.threshold, indicator.points)


@evaluator(IndicatorKind.BOTH_SIDES)
def _both_sides(indicator: Indicator, context: IndicatorContext) -> float:
    counts = context.profile.debate_elements.counts
    supports = counts[DebateElementType.CLAIM.value] > 0
    opposes = (
        counts[DebateElementType.COUNTERARGUMENT.value] > 0
        or counts[DebateElementType.CONCESSION.value] > 0
    )
    return flag(supports and opposes, indicator.points)


@evaluator(IndicatorKind.THESIS_IN_FIRST)
def _thesis_in_first(indicator: Indicator, context: IndicatorContext) -> float:
    if not context.sentences:
        return 0.0
    first_start = context.sentences[0].start
    claims = context.profile.debate_elements.by_category(DebateElementType.CLAIM)
    return flag(any(c.char_start == first_start for c in claims), indicator.points)


@evaluator(IndicatorKind.ROADMAP)
def _roadmap(indicator: Indicator, context: IndicatorContext) -> float:
    if not context.paragraphs:
        return 0.0
    opening = context.paragraphs[0]
    announced = bool(_ROADMAP_RE.search(opening))
    return flag(announced or len(_ORDINAL_RE.findall(opening)) >= 2, indicator.points)


@evaluator(IndicatorKind.TOPIC_SENTENCES)
def _topic_sentences(indicator: Indicator, context: IndicatorContext) -> float:
    if len(context.paragraphs) < 2:
        return 0.0
    for paragraph in context.paragraphs:
        sentences = split_sentences(paragraph)
        if not sentences or len(sentences[0].text.split()) < TOPIC_SENTENCE_MIN_WORDS:
            return 0.0
    return indicator.points


@evaluator(IndicatorKind.LOGICAL_PROGRESSION)
def _logical_progression(indicator: Indicator, context: IndicatorContext) -> float:
    transitions = context.profile.structure.transitions_by_type
    used = sum(1 for count in transitions.values() if count > 0)
    ordered = transitions.get("sequence", 0) >= 2
    return flag(ordered or used >= PROGRESSION_MIN_CATEGORIES, indicator.points)


@evaluator(IndicatorKind.SUMMARY_PRESENT)
def _summary_present(indicator: Indicator, context: IndicatorContext) -> float:
    return flag(bool(_SUMMARY_RE.search(context.text)), indicator.points)


@evaluator(IndicatorKind.CALL_TO_ACTION)
def _call_to_action(indicator: Indicator, context: IndicatorContext) -> float:
    return flag(bool(_CALL_TO_ACTION_RE.search(context.text)), indicator.points)
