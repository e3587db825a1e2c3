"""
End-to-end evaluation of a debate response.

Wires the linguistic analyzers, the rubric engine and the feedback selector
behind one object, plus module-level helpers for one-off calls.
"""

import logging
import random
import time
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

from .analysis import LinguisticAnalyzer, LinguisticProfile, ResponseText, coerce_response
from .exceptions import ResponseTooLongError
from .feedback import FeedbackBundle, FeedbackSelector
from .scoring import RubricDefinition, RubricEngine, ScoreReport, default_rubric, load_rubric
from .utils.config import ConfigManager

logger = logging.getLogger(__name__)


class EvaluationResult(BaseModel):
    """Profile, score and feedback for one response"""
    profile: LinguisticProfile
    score: ScoreReport
    feedback: FeedbackBundle
    processing_time_seconds: Optional[float] = None

    def to_response(self, include_profile: bool = True) -> Dict[str, Any]:
        """Flatten into the shape a service endpoint returns."""
        data = {
            "category_scores": [c.model_dump(mode="json") for c in self.score.category_scores],
            "overall": self.score.overall,
            "bonus": self.score.bonus_total,
            "penalty": self.score.penalty_total,
            "adjustments": [a.model_dump(mode="json") for a in self.score.adjustments],
            "performance_level": self.score.performance_level,
            "feedback": self.feedback.model_dump(mode="json", exclude_none=True),
        }
        if include_profile:
            data = {"profile": self.profile.model_dump(mode="json"), **data}
        return data


class DebateResponseEngine:
    """Main entry point for analyzing, scoring and giving feedback on responses."""

    def __init__(self,
                 rubric: Optional[RubricDefinition] = None,
                 config: Optional[ConfigManager] = None,
                 random_source: Optional[random.Random] = None):
        """
        Initialize the engine.

        Args:
            rubric: Rubric to score against; falls back to the configured path, then the bundled default
            config: Engine settings
            random_source: Random source for feedback phrase selection
        """
        self.config = config or ConfigManager()

        if rubric is None:
            rubric_path = self.config.get("scoring.rubric_path")
            if rubric_path:
                rubric = load_rubric(rubric_path, strict=self.config.get("scoring.strict_rubric", False))
            else:
                rubric = default_rubric()
        self.rubric = rubric

        self.analyzer = LinguisticAnalyzer()
        self.scorer = RubricEngine(self.rubric, self.analyzer)
        self.feedback = FeedbackSelector(
            random_source=random_source,
            strength_threshold=self.config.get("feedback.strength_threshold", 75),
            improvement_threshold=self.config.get("feedback.improvement_threshold", 70),
            excellent_threshold=self.config.get("feedback.excellent_threshold", 85),
            good_threshold=self.config.get("feedback.good_threshold", 70),
            short_response_words=self.config.get("feedback.short_response_words", 100),
        )
        self.max_characters = self.config.get("input.max_characters")

        logger.info(f"Debate response engine initialized with rubric {self.rubric.version}")

    def _prepare(self, response: Union[str, ResponseText]) -> ResponseText:
        response = coerce_response(response)
        if self.max_characters and len(response.text) > self.max_characters:
            raise ResponseTooLongError(len(response.text), self.max_characters)
        return response

    def analyze(self, response: Union[str, ResponseText]) -> LinguisticProfile:
        """Descriptive linguistic profile of a response."""
        return self.analyzer.analyze(self._prepare(response))

    def score(self,
              response: Union[str, ResponseText],
              rubric: Optional[RubricDefinition] = None,
              profile: Optional[LinguisticProfile] = None) -> ScoreReport:
        """Weighted rubric score of a response."""
        return self.scorer.score(self._prepare(response), profile=profile, rubric=rubric)

    def select_feedback(self,
                        report: ScoreReport,
                        word_count: int,
                        random_source: Optional[random.Random] = None,
                        detailed: bool = False) -> FeedbackBundle:
        """Templated feedback for a score report."""
        return self.feedback.select(report, word_count, random_source=random_source, detailed=detailed)

    def evaluate(self,
                 response: Union[str, ResponseText],
                 detailed: Optional[bool] = None,
                 random_source: Optional[random.Random] = None) -> EvaluationResult:
        """
        Profile, score and give feedback on a response in one pass.

        Raises:
            EmptyResponseError: If the text is empty or whitespace-only
            ResponseTooLongError: If the text exceeds ``input.max_characters``
        """
        start_time = time.time()
        if detailed is None:
            detailed = self.config.get("feedback.detailed", False)

        response = self._prepare(response)
        profile = self.analyzer.analyze(response)
        report = self.scorer.score(response, profile=profile)
        feedback = self.feedback.select(
            report, profile.metrics.word_count, random_source=random_source, detailed=detailed
        )

        processing_time = time.time() - start_time
        logger.info(f"Evaluated response in {processing_time:.3f}s: overall {report.overall} ({report.performance_level})")

        return EvaluationResult(
            profile=profile,
            score=report,
            feedback=feedback,
            processing_time_seconds=processing_time,
        )


def analyze(text: Union[str, ResponseText]) -> LinguisticProfile:
    """Linguistic profile of a response."""
    return LinguisticAnalyzer().analyze(text)


def score(text: Union[str, ResponseText], rubric: Optional[RubricDefinition] = None) -> ScoreReport:
    """Score a response against a rubric (the bundled default when omitted)."""
    return RubricEngine(rubric or default_rubric()).score(text)


def select_feedback(report: ScoreReport,
                    word_count: int,
                    random_source: Optional[random.Random] = None) -> FeedbackBundle:
    """Feedback for a score report."""
    return FeedbackSelector(random_source=random_source).select(report, word_count)
