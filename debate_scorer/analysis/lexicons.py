"""
Word lists used by the linguistic analyzers.

The lists are bundled into an immutable ``Lexicons`` object that each analyzer
receives at construction, so a caller can swap in a variant without touching
module state.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

SENTIMENT_WORDS = MappingProxyType({
    "positive": (
        "excellent", "great", "wonderful", "fantastic", "amazing",
        "brilliant", "outstanding", "exceptional", "superb", "remarkable",
    ),
    "negative": (
        "terrible", "awful", "horrible", "poor", "bad",
        "disappointing", "inadequate", "unsatisfactory", "weak", "flawed",
    ),
    "neutral": (
        "adequate", "acceptable", "moderate", "average", "fair",
        "reasonable", "satisfactory", "decent", "okay", "standard",
    ),
})

TRANSITION_WORDS = MappingProxyType({
    "addition": ("furthermore", "moreover", "additionally", "also", "besides"),
    "contrast": ("however", "nevertheless", "although", "despite", "yet"),
    "cause": ("because", "since", "as", "due to", "owing to"),
    "effect": ("therefore", "thus", "consequently", "hence", "accordingly"),
    "sequence": ("firstly", "secondly", "finally", "subsequently", "next"),
    "example": ("for example", "for instance", "such as", "namely", "specifically"),
})

# Keys match DebateElementType values
DEBATE_INDICATORS = MappingProxyType({
    "claim": ("argue", "believe", "contend", "assert", "maintain"),
    "evidence": ("research shows", "studies indicate", "data suggests", "according to"),
    "reasoning": (
        "because", "therefore", "since", "as a result", "consequently",
        "leads to", "results in", "improves", "reduces",
    ),
    "counterargument": ("however", "on the other hand", "critics argue", "opponents claim"),
    "concession": ("admittedly", "granted", "true", "acknowledge", "recognize"),
})

INTRODUCTION_OPENERS = ("in this debate", "i will argue", "the topic", "today")
CONCLUSION_MARKERS = ("in conclusion", "to conclude", "finally", "in summary")

INFORMAL_MARKERS = (
    "gonna", "wanna", "gotta", "kinda", "sorta", "yeah", "yep", "nope",
    "lol", "stuff", "guys", "totally", "ok", "okay",
)


@dataclass(frozen=True)
class Lexicons:
    """Immutable bundle of every word list the analyzers consult."""

    sentiment: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: SENTIMENT_WORDS)
    transitions: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: TRANSITION_WORDS)
    debate_indicators: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: DEBATE_INDICATORS)
    introduction_openers: Tuple[str, ...] = INTRODUCTION_OPENERS
    conclusion_markers: Tuple[str, ...] = CONCLUSION_MARKERS
    informal_markers: Tuple[str, ...] = INFORMAL_MARKERS


DEFAULT_LEXICONS = Lexicons()
