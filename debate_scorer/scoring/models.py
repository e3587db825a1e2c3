"""
Data models for rubric scoring results.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class AdjustmentKind(str, Enum):
    """Whether an adjustment raised or lowered the score."""
    BONUS = "bonus"
    PENALTY = "penalty"


class Adjustment(BaseModel):
    """A single bonus or penalty applied outside the category structure."""
    name: str
    kind: AdjustmentKind
    points: float


class SubcriterionScore(BaseModel):
    """Score for one subcriterion within a category."""
    name: str
    weight: float
    indicator_count: int
    raw_score: float = 0.0  # Sum of capped indicator contributions
    weighted_score: float = 0.0  # Normalised to 100 and scaled by weight


class CategoryScore(BaseModel):
    """Score for one rubric category."""
    category: str
    raw_indicator_score: float = 0.0
    normalized_score: float = Field(default=0.0, ge=0.0, le=100.0)
    weight: float
    description: str = ""
    performance_level: str = ""
    subcriteria: List[SubcriterionScore] = Field(default_factory=list)


class ScoreReport(BaseModel):
    """Complete evaluative result for a response."""
    overall: int = Field(ge=0, le=100)
    category_scores: List[CategoryScore]
    bonus_total: float = 0.0
    penalty_total: float = 0.0
    adjustments: List[Adjustment] = Field(default_factory=list)
    performance_level: str = ""
    word_count: int = 0
    rubric_version: Optional[str] = None

    def category(self, name: str) -> Optional[CategoryScore]:
        for score in self.category_scores:
            if score.category == name:
                return score
        return None

    @property
    def scores_by_category(self) -> Dict[str, float]:
        return {score.category: score.normalized_score for score in self.category_scores}


# (minimum score, label), checked top-down
PERFORMANCE_LEVELS = (
    (90, "Excellent"),
    (80, "Good"),
    (70, "Satisfactory"),
    (60, "Needs Improvement"),
)


def performance_level(score: float) -> str:
    """Convert a 0-100 score to a human-readable performance level."""
    for threshold, label in PERFORMANCE_LEVELS:
        if score >= threshold:
            return label
    return "Poor"
