"""Basic text metrics."""

import logging

from .models import TextMetrics
from .text import split_paragraphs, split_sentences, split_words

logger = logging.getLogger(__name__)


class TextMetricsAnalyzer:
    """Counts characters, words, sentences and paragraphs and derives ratios."""

    def analyze(self, text: str) -> TextMetrics:
        words = split_words(text)
        sentences = split_sentences(text)
        paragraphs = split_paragraphs(text)

        if not words:
            logger.debug("No words found; returning empty metrics")
            return TextMetrics(
                character_count=len(text),
                sentence_count=len(sentences),
                paragraph_count=len(paragraphs),
                insufficient_text=True,
            )

        unique_words = len({w.lower() for w in words})

        return TextMetrics(
            character_count=len(text),
            word_count=len(words),
            sentence_count=len(sentences),
            paragraph_count=len(paragraphs),
            average_word_length=sum(len(w) for w in words) / len(words),
            average_sentence_length=len(words) / len(sentences) if sentences else 0.0,
            unique_words=unique_words,
            vocabulary_diversity=unique_words / len(words),
            insufficient_text=not sentences,
        )
