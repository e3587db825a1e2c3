"""
Feedback selection.

Maps a ScoreReport to strengths, improvements and an encouragement summary.
Choosing a phrase from a pool is the only random step in the whole engine;
pass a seeded ``random.Random`` to make it reproducible.
"""

import logging
import random
from typing import Dict, Optional, Sequence

from ..scoring.models import ScoreReport
from .models import AspectFeedback, FeedbackBundle
from .templates import DEFAULT_TEMPLATES, FeedbackTemplates

logger = logging.getLogger(__name__)


class FeedbackSelector:
    """Chooses templated feedback for a score report."""

    def __init__(self,
                 templates: Optional[FeedbackTemplates] = None,
                 random_source: Optional[random.Random] = None,
                 strength_threshold: float = 75,
                 improvement_threshold: float = 70,
                 excellent_threshold: float = 85,
                 good_threshold: float = 70,
                 short_response_words: int = 100):
        self.templates = templates or DEFAULT_TEMPLATES
        self.random_source = random_source or random.Random()
        self.strength_threshold = strength_threshold
        self.improvement_threshold = improvement_threshold
        self.excellent_threshold = excellent_threshold
        self.good_threshold = good_threshold
        self.short_response_words = short_response_words

    def tier(self, overall: float) -> str:
        if overall >= self.excellent_threshold:
            return "excellent"
        if overall >= self.good_threshold:
            return "good"
        return "developing"

    def select(self,
               report: ScoreReport,
               word_count: int,
               random_source: Optional[random.Random] = None,
               detailed: bool = False) -> FeedbackBundle:
        """
        Build a FeedbackBundle.

        Args:
            report: Score report to describe
            word_count: Word count of the scored response
            random_source: Overrides the selector's random source for this call
            detailed: Also produce per-category detailed feedback

        Returns:
            FeedbackBundle with strengths, improvements and summary
        """
        rng = random_source or self.random_source
        strengths: Dict[str, str] = {}
        improvements: Dict[str, str] = {}

        for score in report.category_scores:
            if score.normalized_score >= self.strength_threshold:
                choice = self._pick(rng, self.templates.strengths.get(score.category, ()))
                if choice:
                    strengths[score.category] = choice
            if score.normalized_score < self.improvement_threshold:
                choice = self._pick(rng, self.templates.improvements.get(score.category, ()))
                if choice:
                    improvements[score.category] = choice

        tier = self.tier(report.overall)
        bundle = FeedbackBundle(
            strengths=list(strengths.values()),
            improvements=list(improvements.values()),
            summary=self._pick(rng, self.templates.encouragement.get(tier, ())) or "",
            tier=tier,
        )

        if word_count < self.short_response_words:
            bundle.improvements.append(self.templates.short_response)

        if detailed:
            bundle.detailed_by_aspect = self._detail(report, strengths, improvements)

        logger.debug(
            f"Selected feedback: tier={tier}, {len(bundle.strengths)} strengths, "
            f"{len(bundle.improvements)} improvements"
        )
        return bundle

    def _detail(self, report: ScoreReport,
                strengths: Dict[str, str],
                improvements: Dict[str, str]) -> Dict[str, AspectFeedback]:
        detailed = {}
        for score in report.category_scores:
            level = score.performance_level
            detailed[score.category] = AspectFeedback(
                overview=f"Your {score.category} performance shows {level.lower()} proficiency.",
                performance_level=level,
                score=score.normalized_score,
                strengths=[strengths[score.category]] if score.category in strengths else [],
                improvements=[improvements[score.category]] if score.category in improvements else [],
                exercises=list(self.templates.exercises.get(score.category, ())),
            )
        return detailed

    @staticmethod
    def _pick(rng: random.Random, pool: Sequence[str]) -> Optional[str]:
        if not pool:
            return None
        return rng.choice(list(pool))
