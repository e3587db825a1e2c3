"""
Linguistic profile assembly.

Runs every descriptive analyzer over a response and bundles the results.
"""

import logging
from typing import Optional, Union

from ..exceptions import EmptyResponseError
from .elements import DebateElementExtractor
from .language import LanguageQualityChecker
from .lexicons import DEFAULT_LEXICONS, Lexicons
from .metrics import TextMetricsAnalyzer
from .models import LinguisticProfile, ResponseText
from .readability import ReadabilityScorer
from .sentiment import SentimentAnalyzer
from .structure import StructuralAnalyzer

logger = logging.getLogger(__name__)


def coerce_response(response: Union[str, ResponseText]) -> ResponseText:
    """Accept raw strings or ResponseText and reject empty input."""
    if isinstance(response, str):
        response = ResponseText(text=response)
    if not response.text.strip():
        raise EmptyResponseError("Response text is empty")
    return response


class LinguisticAnalyzer:
    """Produces a LinguisticProfile from a single response."""

    def __init__(self, lexicons: Optional[Lexicons] = None):
        self.lexicons = lexicons or DEFAULT_LEXICONS
        self.metrics = TextMetricsAnalyzer()
        self.readability = ReadabilityScorer()
        self.sentiment = SentimentAnalyzer(self.lexicons)
        self.structure = StructuralAnalyzer(self.lexicons)
        self.elements = DebateElementExtractor(self.lexicons)
        self.language = LanguageQualityChecker(self.lexicons)

    def analyze(self, response: Union[str, ResponseText]) -> LinguisticProfile:
        """
        Analyze a response.

        Args:
            response: Raw text or a ResponseText with an optional language tag

        Returns:
            LinguisticProfile with metrics, readability, sentiment, structure,
            debate elements and language quality

        Raises:
            EmptyResponseError: If the text is empty or whitespace-only
        """
        response = coerce_response(response)
        text = response.text

        if response.language and not response.language.lower().startswith("en"):
            logger.info(f"Analyzing '{response.language}' response with English heuristics")

        profile = LinguisticProfile(
            language=response.language,
            metrics=self.metrics.analyze(text),
            readability=self.readability.score(text),
            sentiment=self.sentiment.analyze(text),
            structure=self.structure.analyze(text),
            debate_elements=self.elements.extract(text),
            language_quality=self.language.check(text),
        )

        logger.debug(
            f"Profiled response: {profile.metrics.word_count} words, "
            f"{profile.metrics.sentence_count} sentences"
        )
        return profile
