"""
Rubric definition: categories, subcriteria, indicators, bonuses and penalties.

A rubric is loaded from YAML, validated once, and then shared read-only by
every scoring call.
"""

import logging
import math
import re
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_RUBRIC_PATH = Path(__file__).parent / "default_rubric.yaml"
WEIGHT_TOLERANCE = 1e-6


class IndicatorKind(str, Enum):
    """Indicator kinds the engine knows how to evaluate."""
    KEYWORD = "keyword"
    PATTERN = "pattern"
    MIN_WORDS = "min_words"
    MIN_SENTENCES = "min_sentences"
    AVG_WORD_LENGTH = "avg_word_length"
    SENTENCE_VARIETY = "sentence_variety"
    RHETORICAL_QUESTIONS = "rhetorical_questions"
    FORMALITY = "formality"
    TRANSITION_WORDS = "transition_words"
    PARAGRAPH_COUNT = "paragraph_count"
    BOTH_SIDES = "both_sides"
    THESIS_IN_FIRST = "thesis_in_first"
    ROADMAP = "roadmap"
    TOPIC_SENTENCES = "topic_sentences"
    LOGICAL_PROGRESSION = "logical_progression"
    SUMMARY_PRESENT = "summary_present"
    CALL_TO_ACTION = "call_to_action"


SUPPORTED_KINDS = frozenset(kind.value for kind in IndicatorKind)

THRESHOLD_KINDS = frozenset({
    IndicatorKind.MIN_WORDS.value,
    IndicatorKind.MIN_SENTENCES.value,
    IndicatorKind.TRANSITION_WORDS.value,
    IndicatorKind.PARAGRAPH_COUNT.value,
})


def _check_regex(regex: str) -> str:
    try:
        re.compile(regex)
    except re.error as e:
        raise ValueError(f"invalid regular expression {regex!r}: {e}") from e
    return regex


class Indicator(BaseModel):
    """A single scoring rule inside a subcriterion."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: str
    points: float = Field(ge=0)
    word: Optional[str] = None
    regex: Optional[str] = None
    ignore_case: bool = False
    threshold: Optional[int] = Field(default=None, ge=0)
    minimum: Optional[float] = Field(default=None, alias="min")
    maximum: Optional[float] = Field(default=None, alias="max")

    @model_validator(mode="after")
    def check_kind_fields(self) -> "Indicator":
        if self.kind == IndicatorKind.KEYWORD.value and not self.word:
            raise ValueError("keyword indicator requires 'word'")
        if self.kind == IndicatorKind.PATTERN.value:
            if not self.regex:
                raise ValueError("pattern indicator requires 'regex'")
            _check_regex(self.regex)
        if self.kind in THRESHOLD_KINDS and self.threshold is None:
            raise ValueError(f"{self.kind} indicator requires 'threshold'")
        if self.kind == IndicatorKind.AVG_WORD_LENGTH.value:
            if self.minimum is None or self.maximum is None:
                raise ValueError("avg_word_length indicator requires 'min' and 'max'")
            if self.minimum > self.maximum:
                raise ValueError("avg_word_length 'min' exceeds 'max'")
        return self

    @property
    def supported(self) -> bool:
        return self.kind in SUPPORTED_KINDS

    @property
    def flags(self) -> int:
        return re.IGNORECASE if self.ignore_case else 0


class SubcriterionDefinition(BaseModel):
    """A weighted group of indicators."""
    model_config = ConfigDict(frozen=True)

    weight: float = Field(gt=0, le=1)
    indicators: Tuple[Indicator, ...] = Field(min_length=1)


class CategoryDefinition(BaseModel):
    """A top-level scoring dimension."""
    model_config = ConfigDict(frozen=True)

    weight: float = Field(gt=0, le=1)
    description: str = ""
    # Read-only after validation
    subcriteria: Mapping[str, SubcriterionDefinition]

    @field_validator("subcriteria")
    @classmethod
    def check_subcriteria(cls, value: Mapping[str, SubcriterionDefinition]) -> Mapping[str, SubcriterionDefinition]:
        if not value:
            raise ValueError("category must define at least one subcriterion")
        total = sum(sub.weight for sub in value.values())
        if not math.isclose(total, 1.0, abs_tol=WEIGHT_TOLERANCE):
            raise ValueError(f"subcriterion weights sum to {total:.4f}, expected 1.0")
        return MappingProxyType(dict(value))


class BonusRule(BaseModel):
    """Flat bonus awarded once when the pattern appears anywhere."""
    model_config = ConfigDict(frozen=True)

    name: str
    regex: str
    ignore_case: bool = False
    points: float = Field(ge=0)

    @field_validator("regex")
    @classmethod
    def check_regex(cls, value: str) -> str:
        return _check_regex(value)

    @property
    def flags(self) -> int:
        return re.IGNORECASE if self.ignore_case else 0


class PenaltyRules(BaseModel):
    """Length and repetition penalties. Points are zero or negative."""
    model_config = ConfigDict(frozen=True)

    too_short_words: int = Field(default=100, ge=0)
    too_short_points: float = Field(default=-10, le=0)
    too_long_words: int = Field(default=1000, ge=0)
    too_long_points: float = Field(default=-5, le=0)
    # Words at least this long are checked for overuse
    repetition_min_length: int = Field(default=5, ge=1)
    repetition_max_occurrences: int = Field(default=3, ge=1)
    repetition_points: float = Field(default=-2, le=0)


class RubricDefinition(BaseModel):
    """The full, immutable scoring configuration."""
    model_config = ConfigDict(frozen=True)

    version: str = "1.0"
    # Read-only after validation
    categories: Mapping[str, CategoryDefinition]
    bonuses: Tuple[BonusRule, ...] = ()
    bonus_cap: float = Field(default=15, ge=0)
    penalties: PenaltyRules = Field(default_factory=PenaltyRules)
    penalty_floor: float = Field(default=-20, le=0)

    @field_validator("categories")
    @classmethod
    def check_categories(cls, value: Mapping[str, CategoryDefinition]) -> Mapping[str, CategoryDefinition]:
        if not value:
            raise ValueError("rubric must define at least one category")
        total = sum(category.weight for category in value.values())
        if not math.isclose(total, 1.0, abs_tol=WEIGHT_TOLERANCE):
            raise ValueError(f"category weights sum to {total:.4f}, expected 1.0")
        return MappingProxyType(dict(value))

    @property
    def max_bonus(self) -> float:
        """Largest bonus the rules can award before the cap."""
        return sum(rule.points for rule in self.bonuses)

    def unsupported_indicators(self) -> List[Tuple[str, str, Indicator]]:
        """(category, subcriterion, indicator) for every kind the engine does not evaluate."""
        return [
            (category_name, sub_name, indicator)
            for category_name, category in self.categories.items()
            for sub_name, sub in category.subcriteria.items()
            for indicator in sub.indicators
            if not indicator.supported
        ]


def build_rubric(data: Any, strict: bool = False, source: str = "<memory>") -> RubricDefinition:
    """
    Validate raw rubric data.

    Args:
        data: Parsed YAML/JSON mapping
        strict: Raise instead of warning when an indicator kind is not evaluated
        source: Where the data came from, for messages

    Raises:
        ConfigurationError: If the data does not describe a valid rubric
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Rubric {source} must be a mapping")

    try:
        rubric = RubricDefinition.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid rubric {source}: {e}") from e

    unsupported = rubric.unsupported_indicators()
    for category_name, sub_name, indicator in unsupported:
        logger.warning(
            f"Rubric {source}: indicator kind '{indicator.kind}' in "
            f"{category_name}.{sub_name} is not evaluated and scores 0"
        )
    if unsupported and strict:
        kinds = sorted({indicator.kind for _, _, indicator in unsupported})
        raise ConfigurationError(f"Rubric {source} uses unsupported indicator kinds: {', '.join(kinds)}")

    if rubric.bonuses and rubric.max_bonus < rubric.bonus_cap:
        logger.warning(
            f"Rubric {source}: bonus cap {rubric.bonus_cap} is unreachable "
            f"(rules award at most {rubric.max_bonus})"
        )

    logger.info(f"Loaded rubric {rubric.version} from {source} with {len(rubric.categories)} categories")
    return rubric


def load_rubric(path: Optional[Union[str, Path]] = None, strict: bool = False) -> RubricDefinition:
    """Load and validate a rubric YAML file (the bundled default when path is None)."""
    path = Path(path) if path is not None else DEFAULT_RUBRIC_PATH

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read rubric {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Rubric {path} is not valid YAML: {e}") from e

    return build_rubric(data, strict=strict, source=str(path))


@lru_cache(maxsize=1)
def default_rubric() -> RubricDefinition:
    """The bundled rubric, loaded once per process."""
    return load_rubric()
