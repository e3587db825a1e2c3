"""
Weighted rubric scoring of debate responses.

This module provides:
- Rubric: validated, immutable category/subcriterion/indicator configuration
- Indicators: evaluators for every indicator kind a rubric may declare
- Engine: category scores, bonuses, penalties and the overall 0-100 score
"""

from .models import (
    Adjustment,
    AdjustmentKind,
    CategoryScore,
    ScoreReport,
    SubcriterionScore,
    performance_level,
)

from .rubric import (
    BonusRule,
    CategoryDefinition,
    Indicator,
    IndicatorKind,
    PenaltyRules,
    RubricDefinition,
    SubcriterionDefinition,
    build_rubric,
    default_rubric,
    load_rubric,
)

from .engine import RubricEngine, weighted_overall

__all__ = [
    # Models
    'Adjustment',
    'AdjustmentKind',
    'CategoryScore',
    'ScoreReport',
    'SubcriterionScore',
    'performance_level',

    # Rubric
    'BonusRule',
    'CategoryDefinition',
    'Indicator',
    'IndicatorKind',
    'PenaltyRules',
    'RubricDefinition',
    'SubcriterionDefinition',
    'build_rubric',
    'default_rubric',
    'load_rubric',

    # Engine
    'RubricEngine',
    'weighted_overall',
]
