"""
Descriptive linguistic analysis of debate responses.

- Text metrics: counts and ratios
- Readability: Flesch Reading Ease and Flesch-Kincaid grade
- Sentiment: lexicon polarity tally
- Structure: introduction, conclusion, transitions, sentence variety
- Debate elements: claims, evidence, reasoning, counterarguments, concessions
- Language quality: mechanical error detection
"""

from .elements import DebateElementExtractor, assess_balance
from .language import LanguageQualityChecker
from .lexicons import DEFAULT_LEXICONS, Lexicons
from .metrics import TextMetricsAnalyzer
from .models import (
    DebateElement,
    DebateElementsResult,
    DebateElementType,
    LanguageErrors,
    LanguageQualityResult,
    LinguisticProfile,
    ReadabilityResult,
    ResponseText,
    SentimentResult,
    StructureResult,
    TextMetrics,
)
from .profile import LinguisticAnalyzer, coerce_response
from .readability import ReadabilityScorer, count_syllables, interpret_readability
from .sentiment import SentimentAnalyzer
from .structure import StructuralAnalyzer

__all__ = [
    # Models
    'DebateElement',
    'DebateElementsResult',
    'DebateElementType',
    'LanguageErrors',
    'LanguageQualityResult',
    'LinguisticProfile',
    'ReadabilityResult',
    'ResponseText',
    'SentimentResult',
    'StructureResult',
    'TextMetrics',

    # Analyzers
    'DebateElementExtractor',
    'LanguageQualityChecker',
    'LinguisticAnalyzer',
    'ReadabilityScorer',
    'SentimentAnalyzer',
    'StructuralAnalyzer',
    'TextMetricsAnalyzer',

    # Helpers
    'DEFAULT_LEXICONS',
    'Lexicons',
    'assess_balance',
    'coerce_response',
    'count_syllables',
    'interpret_readability',
]
