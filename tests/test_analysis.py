"""
Unit tests for the descriptive analyzers: metrics, readability, sentiment and structure.
"""

import math

import pytest

from debate_scorer.analysis import (
    LinguisticAnalyzer,
    ReadabilityScorer,
    ResponseText,
    SentimentAnalyzer,
    StructuralAnalyzer,
    TextMetricsAnalyzer,
    count_syllables,
    interpret_readability,
)
from debate_scorer.analysis.text import split_paragraphs, split_sentences
from debate_scorer.exceptions import EmptyResponseError


class TestSegmentation:
    """Sentence and paragraph splitting."""

    def test_sentence_spans_point_into_text(self):
        """Sentence spans index back into the original text."""
        text = "  First point.  Second point!? Third"
        sentences = split_sentences(text)

        assert [s.text for s in sentences] == ["First point", "Second point", "Third"]
        for sentence in sentences:
            assert text[sentence.start:sentence.end] == sentence.text

    def test_terminators_recorded(self):
        """Question marks are kept as sentence terminators."""
        sentences = split_sentences("Is it? Yes. Maybe")
        assert [s.is_question for s in sentences] == [True, False, False]

    def test_paragraphs_split_on_blank_lines(self):
        """Blank lines separate paragraphs."""
        text = "First para.\n\nSecond para.\n\n\nThird.\n"
        assert split_paragraphs(text) == ["First para.", "Second para.", "Third."]


class TestTextMetrics:
    """Counts and ratios."""

    @pytest.fixture
    def analyzer(self):
        return TextMetricsAnalyzer()

    def test_basic_counts(self, analyzer):
        """Word, sentence and vocabulary counts for simple text."""
        text = "The cat sat on the mat. The dog ran!"
        metrics = analyzer.analyze(text)

        assert metrics.character_count == len(text)
        assert metrics.word_count == 9
        assert metrics.sentence_count == 2
        assert metrics.paragraph_count == 1
        assert metrics.average_sentence_length == 4.5
        # the, cat, sat, on, mat., dog, ran!
        assert metrics.unique_words == 7
        assert metrics.vocabulary_diversity == pytest.approx(7 / 9)
        assert metrics.insufficient_text is False

    def test_average_word_length(self, analyzer):
        """Average word length includes attached punctuation."""
        metrics = analyzer.analyze("ab abcd.")
        # "ab" and "abcd." keep their punctuation
        assert metrics.average_word_length == pytest.approx((2 + 5) / 2)

    def test_no_sentences_is_insufficient(self, analyzer):
        """Text without sentences is flagged as insufficient."""
        metrics = analyzer.analyze("...")

        assert metrics.word_count == 1
        assert metrics.sentence_count == 0
        assert metrics.average_sentence_length == 0.0
        assert metrics.insufficient_text is True

    def test_no_words_returns_zeros(self, analyzer):
        """Whitespace-only text yields zero ratios, not NaN."""
        metrics = analyzer.analyze("   ")

        assert metrics.word_count == 0
        assert metrics.average_word_length == 0.0
        assert metrics.vocabulary_diversity == 0.0
        assert metrics.insufficient_text is True


class TestReadability:
    """Syllable counting and Flesch formulas."""

    @pytest.mark.parametrize("word,expected", [
        ("cat", 1),
        ("the", 1),
        ("beautiful", 3),
        ("rhythm", 1),
        ("reading", 2),
        ("", 1),
    ])
    def test_count_syllables(self, word, expected):
        """Vowel-group syllable counting."""
        assert count_syllables(word) == expected

    def test_simple_sentence_is_easy(self):
        """A short plain sentence reads as easy."""
        result = ReadabilityScorer().score("The cat sat on the mat.")

        assert result.flesch_reading_ease > 80
        assert result.interpretation in ("Easy", "Very Easy")
        assert result.syllable_count == 6

    def test_scores_are_clamped(self):
        """Reading ease is capped at 100 and grade floored at 0."""
        result = ReadabilityScorer().score("The cat sat on the mat.")

        assert result.flesch_reading_ease == 100.0
        # 0.39 * 6 + 11.8 * 1 - 15.59 is negative
        assert result.flesch_kincaid_grade == 0.0

    def test_complex_text_is_harder(self):
        """Long words lower reading ease and raise grade level."""
        easy = ReadabilityScorer().score("The cat sat on the mat.")
        hard = ReadabilityScorer().score(
            "Institutional accountability necessitates comprehensive evaluation "
            "of administrative responsibilities and organizational capabilities."
        )
        assert hard.flesch_reading_ease < easy.flesch_reading_ease
        assert hard.flesch_kincaid_grade > easy.flesch_kincaid_grade

    def test_no_sentences_returns_neutral_values(self):
        """Degenerate text gets neutral readability values."""
        result = ReadabilityScorer().score("...")

        assert result.flesch_reading_ease == 0.0
        assert result.flesch_kincaid_grade == 0.0
        assert result.interpretation == "Insufficient text"
        assert not math.isnan(result.flesch_reading_ease)

    @pytest.mark.parametrize("score,label", [
        (95, "Very Easy"),
        (90, "Very Easy"),
        (85, "Easy"),
        (75, "Fairly Easy"),
        (65, "Standard"),
        (55, "Fairly Difficult"),
        (40, "Difficult"),
        (10, "Very Difficult"),
    ])
    def test_interpretation_bands(self, score, label):
        """Reading ease maps to the expected band label."""
        assert interpret_readability(score) == label


class TestSentiment:
    """Lexicon polarity tally."""

    @pytest.fixture
    def analyzer(self):
        return SentimentAnalyzer()

    def test_positive_majority(self, analyzer):
        """More positive words gives positive sentiment."""
        result = analyzer.analyze("This is a great and excellent plan but the execution was poor")

        assert result.positive == 2
        assert result.negative == 1
        assert result.overall == "positive"
        assert result.confidence == pytest.approx(3 / 12)

    def test_negative_majority(self, analyzer):
        """More negative words gives negative sentiment."""
        result = analyzer.analyze("a weak and flawed case")
        assert result.overall == "negative"

    def test_tie_is_neutral(self, analyzer):
        """Equal positive and negative counts are neutral."""
        result = analyzer.analyze("great idea with bad timing and a fair budget")

        assert result.positive == 1
        assert result.negative == 1
        assert result.neutral == 1
        assert result.overall == "neutral"

    def test_punctuation_adjacent_tokens_do_not_match(self, analyzer):
        """Tokens with punctuation attached are not lexicon hits."""
        result = analyzer.analyze("great, great.")

        assert result.positive == 0
        assert result.confidence == 0.0


class TestStructure:
    """Introduction, conclusion, transitions and variety."""

    @pytest.fixture
    def analyzer(self):
        return StructuralAnalyzer()

    def test_introduction_is_anchored(self, analyzer):
        """Introduction openers only count at the start."""
        assert analyzer.analyze("In this debate I will show costs.").has_introduction
        assert analyzer.analyze("  Today we discuss costs.").has_introduction
        assert not analyzer.analyze("We discuss costs today.").has_introduction

    def test_conclusion_anywhere(self, analyzer):
        """Conclusion markers count anywhere in the text."""
        result = analyzer.analyze("Costs rise. In conclusion, we should act.")
        assert result.has_conclusion

    def test_transitions_counted_per_category(self, analyzer):
        """Transitions are tallied per category."""
        result = analyzer.analyze("However, this matters. Moreover, however we look at it, because of costs.")

        assert result.transitions_by_type["contrast"] == 2
        assert result.transitions_by_type["addition"] == 1
        assert result.transitions_by_type["cause"] == 1
        assert result.transition_count == 4

    def test_transitions_need_whole_words(self, analyzer):
        """Transition words inside other words are ignored."""
        result = analyzer.analyze("Yesterday the alsoran finished.")
        assert result.transition_count == 0

    def test_structure_score(self, analyzer):
        """Structure score adds intro, conclusion and variety points."""
        result = analyzer.analyze("In this debate we start. In conclusion it ends.")

        assert result.has_introduction and result.has_conclusion
        assert result.transition_count == 0
        assert result.sentence_length_deviation == pytest.approx(0.5)
        assert result.sentence_variety == "low"
        assert result.structure_score == 55

    def test_high_variety(self, analyzer):
        """Very uneven sentence lengths rate as high variety."""
        text = "Stop. " + " ".join(["word"] * 20) + "."
        result = analyzer.analyze(text)

        assert result.sentence_variety == "high"

    def test_transition_points_capped(self, analyzer):
        """Transition points stop at 25."""
        text = " ".join(["However, moreover, thus."] * 5)
        result = analyzer.analyze(text)

        assert result.transition_count == 15
        # 0 intro + 0 conclusion + capped 25 + low variety 5
        assert result.structure_score == 30


class TestLinguisticAnalyzer:
    """Profile assembly."""

    def test_empty_text_rejected(self):
        """Empty text raises EmptyResponseError."""
        with pytest.raises(EmptyResponseError):
            LinguisticAnalyzer().analyze("")

    def test_whitespace_text_rejected(self):
        """Whitespace-only text raises EmptyResponseError."""
        with pytest.raises(EmptyResponseError):
            LinguisticAnalyzer().analyze(" \n\t ")

    def test_degenerate_text_has_defined_values(self):
        """A lone emoji still produces finite values."""
        profile = LinguisticAnalyzer().analyze("🙂")

        assert profile.metrics.word_count == 1
        assert profile.readability.flesch_reading_ease >= 0
        assert profile.sentiment.confidence == 0.0

    def test_language_tag_is_echoed(self):
        """The language tag is carried onto the profile."""
        profile = LinguisticAnalyzer().analyze(ResponseText(text="Hola a todos.", language="es"))
        assert profile.language == "es"

    def test_analysis_is_pure(self):
        """Analyzing the same text twice gives identical profiles."""
        text = "I argue that taxes matter. However, critics argue otherwise."
        analyzer = LinguisticAnalyzer()

        assert analyzer.analyze(text).model_dump() == analyzer.analyze(text).model_dump()
