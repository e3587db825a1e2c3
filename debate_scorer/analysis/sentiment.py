"""Lexicon-based sentiment tally."""

from typing import Optional

from .lexicons import DEFAULT_LEXICONS, Lexicons
from .models import SentimentResult


class SentimentAnalyzer:
    """
    Counts exact lowercase token matches against the sentiment lexicons.

    Tokens keep their punctuation, so "great," does not match "great".
    Scores produced by earlier versions depend on that, so it is kept.
    """

    def __init__(self, lexicons: Optional[Lexicons] = None):
        self.lexicons = lexicons or DEFAULT_LEXICONS

    def analyze(self, text: str) -> SentimentResult:
        tokens = text.lower().split()
        positive = set(self.lexicons.sentiment.get("positive", ()))
        negative = set(self.lexicons.sentiment.get("negative", ()))
        neutral = set(self.lexicons.sentiment.get("neutral", ()))

        positive_count = negative_count = neutral_count = 0
        for token in tokens:
            if token in positive:
                positive_count += 1
            elif token in negative:
                negative_count += 1
            elif token in neutral:
                neutral_count += 1

        if positive_count > negative_count:
            overall = "positive"
        elif negative_count > positive_count:
            overall = "negative"
        else:
            overall = "neutral"

        total = positive_count + negative_count + neutral_count
        return SentimentResult(
            positive=positive_count,
            negative=negative_count,
            neutral=neutral_count,
            overall=overall,
            confidence=total / len(tokens) if tokens else 0.0,
        )
