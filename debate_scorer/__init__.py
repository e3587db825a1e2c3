"""Debate response scoring and analysis engine."""

__version__ = "1.0.0"
__author__ = "debate-check"

from .analysis import LinguisticProfile, ResponseText
from .exceptions import ConfigurationError, DebateScorerError, EmptyResponseError, ResponseTooLongError
from .feedback import FeedbackBundle
from .pipeline import DebateResponseEngine, EvaluationResult, analyze, score, select_feedback
from .scoring import RubricDefinition, ScoreReport, default_rubric, load_rubric

__all__ = [
    "ConfigurationError",
    "DebateResponseEngine",
    "DebateScorerError",
    "EmptyResponseError",
    "EvaluationResult",
    "FeedbackBundle",
    "LinguisticProfile",
    "ResponseText",
    "ResponseTooLongError",
    "RubricDefinition",
    "ScoreReport",
    "analyze",
    "default_rubric",
    "load_rubric",
    "score",
    "select_feedback",
]
