"""
Data models for the linguistic profile of a debate response
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


INSUFFICIENT_TEXT = "Insufficient text"


class ResponseText(BaseModel):
    """A debate response as submitted by the caller"""
    model_config = ConfigDict(frozen=True)

    text: str
    # Informational only; every heuristic is English-bound
    language: Optional[str] = None


class DebateElementType(str, Enum):
    """Rhetorical roles a sentence can play"""
    CLAIM = "claim"
    EVIDENCE = "evidence"
    REASONING = "reasoning"
    COUNTERARGUMENT = "counterargument"
    CONCESSION = "concession"


class TextMetrics(BaseModel):
    """Basic counts and ratios"""
    character_count: int = 0
    word_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    average_word_length: float = 0.0
    average_sentence_length: float = 0.0
    unique_words: int = 0
    vocabulary_diversity: float = 0.0
    insufficient_text: bool = False


class ReadabilityResult(BaseModel):
    """Flesch readability measures"""
    syllable_count: int = 0
    flesch_reading_ease: float = 0.0
    flesch_kincaid_grade: float = 0.0
    interpretation: str = INSUFFICIENT_TEXT


class SentimentResult(BaseModel):
    """Lexicon tally of positive, negative and neutral words"""
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    overall: str = "neutral"
    confidence: float = 0.0


class StructureResult(BaseModel):
    """Organisational signals"""
    has_introduction: bool = False
    has_conclusion: bool = False
    paragraph_count: int = 0
    transition_count: int = 0
    transitions_by_type: Dict[str, int] = Field(default_factory=dict)
    sentence_length_deviation: float = 0.0
    sentence_variety: str = "low"
    structure_score: int = 0


class DebateElement(BaseModel):
    """One rhetorical indicator found in a sentence"""
    category: DebateElementType
    indicator: str
    sentence: str
    char_start: int
    char_end: int


class DebateElementsResult(BaseModel):
    """All debate elements found in a response"""
    elements: List[DebateElement] = Field(default_factory=list)
    debate_quality_score: int = 0
    balance: str = "needs improvement"

    def by_category(self, category: DebateElementType) -> List[DebateElement]:
        return [e for e in self.elements if e.category == category]

    @property
    def counts(self) -> Dict[str, int]:
        counts = {category.value: 0 for category in DebateElementType}
        for element in self.elements:
            counts[element.category.value] += 1
        return counts


class LanguageErrors(BaseModel):
    """Mechanical error counts"""
    double_spaces: int = 0
    missing_capitalization: int = 0
    unclosed_quotes: int = 0
    repeated_words: int = 0


class LanguageQualityResult(BaseModel):
    """Mechanical quality of the writing"""
    errors: LanguageErrors = Field(default_factory=LanguageErrors)
    error_penalty: int = 0
    quality_score: int = 100
    formality_score: float = 100.0
    suggestions: List[str] = Field(default_factory=list)


class LinguisticProfile(BaseModel):
    """Descriptive, non-evaluative analysis of a single response"""
    language: Optional[str] = None
    metrics: TextMetrics
    readability: ReadabilityResult
    sentiment: SentimentResult
    structure: StructureResult
    debate_elements: DebateElementsResult
    language_quality: LanguageQualityResult
