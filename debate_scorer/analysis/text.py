"""Tokenization and segmentation shared by the analyzers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

_SENTENCE_RE = re.compile(r"[^.!?]+")
_TERMINATOR_RE = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class Segment:
    """A trimmed sentence with its character span in the source text."""

    text: str
    start: int
    end: int
    terminator: str = ""

    @property
    def is_question(self) -> bool:
        return "?" in self.terminator


def split_words(text: str) -> List[str]:
    """Whitespace tokenization; empty tokens never appear."""
    return text.split()


def split_sentences(text: str) -> List[Segment]:
    """
    Split text on runs of sentence terminators.

    Offsets come from the segmentation itself, so repeated sentences keep
    their own positions.
    """
    segments: List[Segment] = []
    for match in _SENTENCE_RE.finditer(text):
        raw = match.group()
        stripped = raw.strip()
        if not stripped:
            continue
        start = match.start() + (len(raw) - len(raw.lstrip()))
        terminator = _TERMINATOR_RE.match(text, match.end())
        segments.append(
            Segment(
                text=stripped,
                start=start,
                end=start + len(stripped),
                terminator=terminator.group() if terminator else "",
            )
        )
    return segments


def split_paragraphs(text: str) -> List[str]:
    """Split on blank lines, dropping empty paragraphs."""
    return [p.strip() for p in _PARAGRAPH_BREAK_RE.split(text) if p.strip()]


def phrase_pattern(phrase: str) -> re.Pattern:
    """Whole-word, case-insensitive pattern for a literal word or phrase."""
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)
