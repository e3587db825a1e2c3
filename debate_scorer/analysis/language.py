"""Mechanical language quality checks."""

import re
from typing import List, Optional

from .lexicons import DEFAULT_LEXICONS, Lexicons
from .models import LanguageErrors, LanguageQualityResult
from .text import split_sentences, split_words

_DOUBLE_SPACE_RE = re.compile(r"  +")
_CONTRACTION_RE = re.compile(r"\b[a-z]+['’](?:t|re|ve|ll|d|m)\b", re.IGNORECASE)

ERROR_WEIGHTS = {
    "double_spaces": 2,
    "missing_capitalization": 5,
    "unclosed_quotes": 10,
    "repeated_words": 3,
}

SUGGESTIONS = {
    "double_spaces": "Remove extra spaces between words",
    "missing_capitalization": "Capitalize the first letter of each sentence",
    "unclosed_quotes": "Check for unclosed quotation marks",
    "repeated_words": "Avoid repeating the same word consecutively",
}


def count_repeated_words(words: List[str]) -> int:
    """Adjacent case-insensitive duplicates longer than two characters."""
    return sum(
        1
        for current, following in zip(words, words[1:])
        if len(current) > 2 and current.lower() == following.lower()
    )


class LanguageQualityChecker:
    """Counts mechanical errors and scores the writing out of 100."""

    def __init__(self, lexicons: Optional[Lexicons] = None):
        self.lexicons = lexicons or DEFAULT_LEXICONS
        markers = "|".join(re.escape(m) for m in self.lexicons.informal_markers)
        self._informal_re = re.compile(rf"\b(?:{markers})\b", re.IGNORECASE)

    def formality_score(self, text: str, word_count: int) -> float:
        """Percentage of words that are neither contractions nor informal markers."""
        if word_count == 0:
            return 0.0
        informal = len(_CONTRACTION_RE.findall(text)) + len(self._informal_re.findall(text))
        return max(0.0, 100.0 * (1 - informal / word_count))

    def check(self, text: str) -> LanguageQualityResult:
        words = split_words(text)
        sentences = split_sentences(text)

        errors = LanguageErrors(
            double_spaces=len(_DOUBLE_SPACE_RE.findall(text)),
            missing_capitalization=sum(1 for s in sentences if not s.text[0].isupper()),
            unclosed_quotes=text.count('"') % 2,
            repeated_words=count_repeated_words(words),
        )

        error_counts = errors.model_dump()
        error_penalty = sum(error_counts[name] * weight for name, weight in ERROR_WEIGHTS.items())
        suggestions = [SUGGESTIONS[name] for name in ERROR_WEIGHTS if error_counts[name] > 0]

        return LanguageQualityResult(
            errors=errors,
            error_penalty=error_penalty,
            quality_score=max(0, 100 - error_penalty),
            formality_score=self.formality_score(text, len(words)),
            suggestions=suggestions,
        )
