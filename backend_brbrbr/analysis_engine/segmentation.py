"""
Text segmentation: sentences, words, paragraphs.

Converts raw text into an immutable Segmentation view consumed by every
signal extractor. No scoring logic; never raises on any str input. Empty or
whitespace-only text yields empty sequences.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Terminator run followed by whitespace or end of text; matched only from the
# first character of a run so each run is scanned once
_SENTENCE_SPLIT_RE = re.compile(r"(?<![.!?])[.!?]+(?=\s|$)")
# Word token; contractions ("don't") stay one token
_WORD_RE = re.compile(r"\w+(?:'\w+)*")
# One or more blank lines
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")

_APOSTROPHES = str.maketrans({"‘": "'", "’": "'"})


@dataclass(frozen=True)
class Sentence:
    text: str
    word_count: int


@dataclass(frozen=True)
class Paragraph:
    text: str
    word_count: int


@dataclass(frozen=True)
class Segmentation:
    """
    Derived view over one analysis input.

    Words are case-folded and punctuation-stripped. Sentence and paragraph
    order follows the source text.
    """

    text: str
    """Source text with typographic apostrophes normalized."""
    sentences: tuple[Sentence, ...]
    words: tuple[str, ...]
    paragraphs: tuple[Paragraph, ...]

    @property
    def is_empty(self) -> bool:
        return not self.words


def normalize_text(text: str) -> str:
    """Map curly apostrophes to ASCII so contractions and catalogue phrases match."""
    return text.translate(_APOSTROPHES)


def tokenize_words(text: str) -> list[str]:
    """Case-folded word tokens of text."""
    return _WORD_RE.findall(text.casefold())


def split_sentences(text: str) -> list[str]:
    """Split on ., ! or ? followed by whitespace or end of text; drop empty pieces."""
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def split_paragraphs(text: str) -> list[str]:
    """Split on blank lines; drop empty pieces."""
    return [p.strip() for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def segment(text: str) -> Segmentation:
    """
    Build the Segmentation for text.

    Args:
        text: Raw input text (any length the engine accepted).

    Returns:
        Segmentation with sentences, words, and paragraphs; all empty for blank text.
    """
    normalized = normalize_text(text)
    sentences = tuple(
        Sentence(text=s, word_count=len(tokenize_words(s)))
        for s in split_sentences(normalized)
    )
    paragraphs = tuple(
        Paragraph(text=p, word_count=len(tokenize_words(p)))
        for p in split_paragraphs(normalized)
    )
    return Segmentation(
        text=normalized,
        sentences=sentences,
        words=tuple(tokenize_words(normalized)),
        paragraphs=paragraphs,
    )
