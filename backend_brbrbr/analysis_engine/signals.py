"""
Signal extraction: AI-likelihood per dimension of the text.

Five independent, pure extractors. Each reads only the Segmentation and
returns a SignalScore in [0, 1] where 1.0 is maximally AI-like. When a
signal has nothing to measure (too few sentences, no words, no paragraphs)
it returns NEUTRAL_SCORE instead of dividing by zero.

Curves (band endpoints fixed, linear between, clamped outside):
- uniformity: words-per-sentence variance <= 10 -> 0.8, >= 50 -> 0.2
- diversity: unique-word ratio <= 0.5 -> 0.8, >= 0.7 -> 0.2
- phrases: distinct catalogue matches 0/1/2/3+ -> 0.30/0.55/0.70/0.85
- punctuation: 0.2 + 0.6 * (0.6 * calm + 0.4 * formal)
- structure: mean words per paragraph in [50, 150] -> 0.6, else 0.4
"""

from __future__ import annotations

import re
import statistics
from typing import Callable

from backend_brbrbr.analysis_engine.models import SignalName, SignalScore
from backend_brbrbr.analysis_engine.segmentation import Segmentation

NEUTRAL_SCORE = 0.5

# Uniformity: variance of words per sentence (words^2)
UNIFORM_VARIANCE_MAX = 10.0
VARIED_VARIANCE_MIN = 50.0
UNIFORM_SCORE = 0.8
VARIED_SCORE = 0.2

# Diversity: distinct words / total words
AI_LIKE_RATIO_MAX = 0.5
HUMAN_LIKE_RATIO_MIN = 0.7
LOW_DIVERSITY_SCORE = 0.8
HIGH_DIVERSITY_SCORE = 0.2

# Phrases: score by number of distinct catalogue phrases found
PHRASE_STEP_SCORES = {0: 0.30, 1: 0.55, 2: 0.70}
PHRASE_SATURATED_SCORE = 0.85

AI_PHRASES: tuple[str, ...] = (
    "as an ai",
    "i don't have personal",
    "i cannot",
    "i'm sorry, but",
    "it's important to note",
    "it is worth noting",
    "furthermore",
    "in conclusion",
    "to summarize",
    "delve into",
    "multifaceted",
    "paradigm shift",
    "cutting-edge",
    "state-of-the-art",
    "best practices",
    "leverage",
    "utilize",
    "facilitate",
    "comprehensive understanding",
)

# Phrases must start on a word boundary ("leverage" matches "leveraging", not "deleverage")
_PHRASE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (phrase, re.compile(r"\b" + re.escape(phrase))) for phrase in AI_PHRASES
)

# Punctuation: densities are percentages of the character count
CALM_EXCLAMATION_MAX_PCT = 0.5
EXCLAMATION_FALLOFF_PCT = 1.0
FORMAL_COMMA_MIN_PCT = 2.0
FORMAL_COMMA_MAX_PCT = 4.0
COMMA_FALLOFF_PCT = 2.0
CALM_WEIGHT = 0.6
FORMAL_WEIGHT = 0.4
PUNCTUATION_FLOOR = 0.2
PUNCTUATION_RANGE = 0.6

# Structure: mean words per paragraph
TIDY_PARAGRAPH_MIN_WORDS = 50.0
TIDY_PARAGRAPH_MAX_WORDS = 150.0
TIDY_STRUCTURE_SCORE = 0.6
LOOSE_STRUCTURE_SCORE = 0.4


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _interpolate(x: float, x_low: float, x_high: float, y_low: float, y_high: float) -> float:
    """Linear map of x from [x_low, x_high] onto [y_low, y_high], clamped at both ends."""
    if x <= x_low:
        return y_low
    if x >= x_high:
        return y_high
    return y_low + (y_high - y_low) * (x - x_low) / (x_high - x_low)


def sentence_length_variance(seg: Segmentation) -> float | None:
    """Population variance of words per sentence; None with fewer than two sentences."""
    if len(seg.sentences) < 2:
        return None
    return statistics.pvariance([s.word_count for s in seg.sentences])


def uniformity_score(seg: Segmentation) -> SignalScore:
    """Uniform sentence lengths read as AI-like; natural variation as human."""
    variance = sentence_length_variance(seg)
    if variance is None:
        return SignalScore(SignalName.UNIFORMITY, NEUTRAL_SCORE)
    value = _interpolate(
        variance, UNIFORM_VARIANCE_MAX, VARIED_VARIANCE_MIN, UNIFORM_SCORE, VARIED_SCORE
    )
    return SignalScore(SignalName.UNIFORMITY, value)


def unique_word_ratio(seg: Segmentation) -> float | None:
    if not seg.words:
        return None
    return len(set(seg.words)) / len(seg.words)


def diversity_score(seg: Segmentation) -> SignalScore:
    """Higher unique-word ratio = more human-like."""
    ratio = unique_word_ratio(seg)
    if ratio is None:
        return SignalScore(SignalName.DIVERSITY, NEUTRAL_SCORE)
    value = _interpolate(
        ratio, AI_LIKE_RATIO_MAX, HUMAN_LIKE_RATIO_MIN, LOW_DIVERSITY_SCORE, HIGH_DIVERSITY_SCORE
    )
    return SignalScore(SignalName.DIVERSITY, value)


def find_ai_phrases(text: str) -> list[str]:
    """Distinct catalogue phrases present in text (case-insensitive), in catalogue order."""
    lowered = text.casefold()
    return [phrase for phrase, pattern in _PHRASE_PATTERNS if pattern.search(lowered)]


def phrases_score(seg: Segmentation) -> SignalScore:
    """
    Step function over distinct catalogue matches.

    Absence of stock phrases is weak evidence of a human author, so zero
    matches maps to a low baseline rather than zero.
    """
    if seg.is_empty:
        return SignalScore(SignalName.PHRASES, NEUTRAL_SCORE)
    matches = len(find_ai_phrases(seg.text))
    value = PHRASE_STEP_SCORES.get(matches, PHRASE_SATURATED_SCORE)
    return SignalScore(SignalName.PHRASES, value)


def punctuation_score(seg: Segmentation) -> SignalScore:
    """Few exclamation marks and commas in the formal 2-4% band read as AI-like."""
    if seg.is_empty:
        return SignalScore(SignalName.PUNCTUATION, NEUTRAL_SCORE)
    body = seg.text.strip()
    total_chars = len(body)
    exclamation_pct = body.count("!") / total_chars * 100.0
    comma_pct = body.count(",") / total_chars * 100.0

    if exclamation_pct < CALM_EXCLAMATION_MAX_PCT:
        calm = 1.0
    else:
        calm = _clamp(1.0 - (exclamation_pct - CALM_EXCLAMATION_MAX_PCT) / EXCLAMATION_FALLOFF_PCT)

    if comma_pct < FORMAL_COMMA_MIN_PCT:
        distance = FORMAL_COMMA_MIN_PCT - comma_pct
    elif comma_pct > FORMAL_COMMA_MAX_PCT:
        distance = comma_pct - FORMAL_COMMA_MAX_PCT
    else:
        distance = 0.0
    formal = _clamp(1.0 - distance / COMMA_FALLOFF_PCT)

    value = PUNCTUATION_FLOOR + PUNCTUATION_RANGE * (CALM_WEIGHT * calm + FORMAL_WEIGHT * formal)
    return SignalScore(SignalName.PUNCTUATION, _clamp(value))


def mean_paragraph_words(seg: Segmentation) -> float | None:
    if not seg.paragraphs:
        return None
    return sum(p.word_count for p in seg.paragraphs) / len(seg.paragraphs)


def structure_score(seg: Segmentation) -> SignalScore:
    """AI text tends toward tidy paragraph sizing."""
    mean_words = mean_paragraph_words(seg)
    if mean_words is None:
        return SignalScore(SignalName.STRUCTURE, NEUTRAL_SCORE)
    if TIDY_PARAGRAPH_MIN_WORDS <= mean_words <= TIDY_PARAGRAPH_MAX_WORDS:
        return SignalScore(SignalName.STRUCTURE, TIDY_STRUCTURE_SCORE)
    return SignalScore(SignalName.STRUCTURE, LOOSE_STRUCTURE_SCORE)


SIGNAL_EXTRACTORS: dict[SignalName, Callable[[Segmentation], SignalScore]] = {
    SignalName.UNIFORMITY: uniformity_score,
    SignalName.DIVERSITY: diversity_score,
    SignalName.PHRASES: phrases_score,
    SignalName.PUNCTUATION: punctuation_score,
    SignalName.STRUCTURE: structure_score,
}


def extract_signals(seg: Segmentation) -> tuple[SignalScore, ...]:
    """Run every extractor on seg; one SignalScore per SignalName."""
    return tuple(extractor(seg) for extractor in SIGNAL_EXTRACTORS.values())
