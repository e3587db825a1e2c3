"""
Rubric scoring engine.

Scores a response against a RubricDefinition:

    subcriterion = sum(indicator points) / (indicators * 5) * 100 * weight
    category     = clamp(sum(subcriteria), 0, 100)
    overall      = round(clamp(sum(category * weight) + bonus + penalty, 0, 100))

Bonuses are capped at ``rubric.bonus_cap`` and penalties floored at
``rubric.penalty_floor``. The engine holds no per-call state, so one instance
may be shared between threads.
"""

import logging
import math
import re
from collections import Counter
from typing import Iterable, List, Optional, Tuple, Union

from ..analysis.models import LinguisticProfile, ResponseText
from ..analysis.profile import LinguisticAnalyzer, coerce_response
from .indicators import IndicatorContext, evaluate_indicator
from .models import (
    Adjustment,
    AdjustmentKind,
    CategoryScore,
    ScoreReport,
    SubcriterionScore,
    performance_level,
)
from .rubric import CategoryDefinition, RubricDefinition, default_rubric

logger = logging.getLogger(__name__)

# Each indicator is normalised against this many points
POINTS_PER_INDICATOR = 5


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def weighted_overall(category_scores: Iterable[CategoryScore],
                     bonus_total: float = 0.0,
                     penalty_total: float = 0.0) -> int:
    """Combine category scores, bonus and penalty into the 0-100 overall score."""
    weighted = sum(score.normalized_score * score.weight for score in category_scores)
    return round_half_up(clamp(weighted + bonus_total + penalty_total))


class RubricEngine:
    """Applies a rubric's categories, bonuses and penalties to a response."""

    def __init__(self,
                 rubric: Optional[RubricDefinition] = None,
                 analyzer: Optional[LinguisticAnalyzer] = None):
        self.rubric = rubric or default_rubric()
        self.analyzer = analyzer or LinguisticAnalyzer()

    def score(self,
              response: Union[str, ResponseText],
              profile: Optional[LinguisticProfile] = None,
              rubric: Optional[RubricDefinition] = None) -> ScoreReport:
        """
        Score a response.

        Args:
            response: Raw text or ResponseText
            profile: Profile of the same text, computed here when omitted
            rubric: Overrides the engine's rubric for this call

        Returns:
            ScoreReport with category scores, adjustments and overall score

        Raises:
            EmptyResponseError: If the text is empty or whitespace-only
        """
        response = coerce_response(response)
        rubric = rubric or self.rubric
        text = response.text
        if profile is None:
            profile = self.analyzer.analyze(response)

        context = IndicatorContext.build(text, profile)
        category_scores = [
            self.score_category(name, category, context)
            for name, category in rubric.categories.items()
        ]

        word_count = profile.metrics.word_count
        bonus_total, bonuses = self.calculate_bonuses(text, rubric)
        penalty_total, penalties = self.calculate_penalties(text, word_count, rubric)
        overall = weighted_overall(category_scores, bonus_total, penalty_total)

        logger.debug(
            f"Scored response: categories={[round(c.normalized_score, 1) for c in category_scores]} "
            f"bonus={bonus_total} penalty={penalty_total} overall={overall}"
        )

        return ScoreReport(
            overall=overall,
            category_scores=category_scores,
            bonus_total=bonus_total,
            penalty_total=penalty_total,
            adjustments=bonuses + penalties,
            performance_level=performance_level(overall),
            word_count=word_count,
            rubric_version=rubric.version,
        )

    def score_category(self, name: str, category: CategoryDefinition,
                       context: IndicatorContext) -> CategoryScore:
        """Score every subcriterion of one category."""
        subcriteria = []
        for sub_name, sub in category.subcriteria.items():
            raw = sum(evaluate_indicator(indicator, context) for indicator in sub.indicators)
            normalised = raw / (len(sub.indicators) * POINTS_PER_INDICATOR) * 100 * sub.weight
            subcriteria.append(
                SubcriterionScore(
                    name=sub_name,
                    weight=sub.weight,
                    indicator_count=len(sub.indicators),
                    raw_score=raw,
                    weighted_score=normalised,
                )
            )

        normalized_score = clamp(sum(s.weighted_score for s in subcriteria))
        return CategoryScore(
            category=name,
            raw_indicator_score=sum(s.raw_score for s in subcriteria),
            normalized_score=normalized_score,
            weight=category.weight,
            description=category.description,
            performance_level=performance_level(normalized_score),
            subcriteria=subcriteria,
        )

    def calculate_bonuses(self, text: str,
                          rubric: Optional[RubricDefinition] = None) -> Tuple[float, List[Adjustment]]:
        """Each matching bonus rule adds its points once; the total is capped."""
        rubric = rubric or self.rubric
        applied = [
            Adjustment(name=rule.name, kind=AdjustmentKind.BONUS, points=rule.points)
            for rule in rubric.bonuses
            if re.search(rule.regex, text, rule.flags)
        ]
        total = min(sum(a.points for a in applied), rubric.bonus_cap)
        return total, applied

    def calculate_penalties(self, text: str, word_count: int,
                            rubric: Optional[RubricDefinition] = None) -> Tuple[float, List[Adjustment]]:
        """Length penalties plus one repetition unit per overused word type; the total is floored."""
        rubric = rubric or self.rubric
        rules = rubric.penalties
        applied = []

        if word_count < rules.too_short_words:
            applied.append(Adjustment(name="too_short", kind=AdjustmentKind.PENALTY,
                                      points=rules.too_short_points))
        if word_count > rules.too_long_words:
            applied.append(Adjustment(name="too_long", kind=AdjustmentKind.PENALTY,
                                      points=rules.too_long_points))

        frequencies = Counter(
            word for word in text.lower().split()
            if len(word) >= rules.repetition_min_length
        )
        for word, count in sorted(frequencies.items()):
            if count > rules.repetition_max_occurrences:
                applied.append(Adjustment(name=f"repetition:{word}", kind=AdjustmentKind.PENALTY,
                                          points=rules.repetition_points))

        total = max(sum(a.points for a in applied), rubric.penalty_floor)
        return total, applied
