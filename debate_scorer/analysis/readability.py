"""
Readability scoring using the Flesch formulas
"""

import logging

from .models import INSUFFICIENT_TEXT, ReadabilityResult
from .text import split_sentences, split_words

logger = logging.getLogger(__name__)

VOWELS = "aeiouy"

# (minimum score, label), checked top-down
READABILITY_BANDS = (
    (90, "Very Easy"),
    (80, "Easy"),
    (70, "Fairly Easy"),
    (60, "Standard"),
    (50, "Fairly Difficult"),
    (30, "Difficult"),
)


def count_syllables(word: str) -> int:
    """Estimate syllables by counting vowel groups, minus a silent final e."""
    word = word.lower()
    count = 0
    previous_was_vowel = False

    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if word.endswith("e"):
        count -= 1

    return max(1, count)


def interpret_readability(score: float) -> str:
    """Map a Flesch Reading Ease score to its descriptive band."""
    for threshold, label in READABILITY_BANDS:
        if score >= threshold:
            return label
    return "Very Difficult"


class ReadabilityScorer:
    """Computes Flesch Reading Ease and Flesch-Kincaid Grade Level."""

    def score(self, text: str) -> ReadabilityResult:
        words = split_words(text)
        sentences = split_sentences(text)

        if not words or not sentences:
            return ReadabilityResult(interpretation=INSUFFICIENT_TEXT)

        syllables = sum(count_syllables(w) for w in words)
        words_per_sentence = len(words) / len(sentences)
        syllables_per_word = syllables / len(words)

        reading_ease = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
        grade = 0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59
        reading_ease = max(0.0, min(100.0, reading_ease))

        return ReadabilityResult(
            syllable_count=syllables,
            flesch_reading_ease=reading_ease,
            flesch_kincaid_grade=max(0.0, grade),
            interpretation=interpret_readability(reading_ease),
        )
