"""
Tests for the five signal extractors: neutral defaults, band endpoints,
monotonic interpolation, and bounds.
"""

from __future__ import annotations

import pytest

from backend_brbrbr.analysis_engine.models import SignalName, SignalScore
from backend_brbrbr.analysis_engine.segmentation import segment
from backend_brbrbr.analysis_engine.signals import (
    AI_PHRASES,
    NEUTRAL_SCORE,
    diversity_score,
    extract_signals,
    find_ai_phrases,
    phrases_score,
    punctuation_score,
    structure_score,
    uniformity_score,
)
from samples import CASUAL_TEXT, FORMAL_AI_TEXT, MEETING_TEXT, TWO_PHRASE_TEXT


def _words(n: int, prefix: str = "w") -> str:
    return " ".join(f"{prefix}{i}" for i in range(n))


# -----------------------------------------------------------------------------
# Neutral defaults
# -----------------------------------------------------------------------------

def test_empty_text_all_signals_neutral():
    """Empty input: every signal sits at its neutral default."""
    signals = extract_signals(segment(""))
    assert {s.name for s in signals} == set(SignalName)
    assert all(s.value == NEUTRAL_SCORE for s in signals)


def test_uniformity_neutral_with_single_sentence():
    assert uniformity_score(segment(MEETING_TEXT)).value == NEUTRAL_SCORE


# -----------------------------------------------------------------------------
# Uniformity
# -----------------------------------------------------------------------------

def test_uniformity_identical_sentence_lengths_is_ai_like():
    text = "One two three four. Five six seven eight. Nine ten eleven twelve."
    assert uniformity_score(segment(text)).value == pytest.approx(0.8)


def test_uniformity_bursty_sentence_lengths_is_human_like():
    # Word counts 1 and 21: variance 100
    text = f"Yes. {_words(21)}."
    assert uniformity_score(segment(text)).value == pytest.approx(0.2)


def test_uniformity_is_monotonic_in_variance():
    # Word counts (a, b) with growing spread
    values = []
    for spread in (0, 4, 8, 12, 16):
        text = f"{_words(10)}. {_words(10 + spread, 'x')}."
        values.append(uniformity_score(segment(text)).value)
    assert values == sorted(values, reverse=True)
    assert values[0] == pytest.approx(0.8)
    assert values[-1] == pytest.approx(0.2)
    # spread 8: variance 16 -> 0.8 - 0.6 * 6 / 40
    assert values[2] == pytest.approx(0.71)


# -----------------------------------------------------------------------------
# Diversity
# -----------------------------------------------------------------------------

def test_diversity_all_unique_words_is_human_like():
    assert diversity_score(segment(_words(20))).value == pytest.approx(0.2)


def test_diversity_repetitive_words_is_ai_like():
    assert diversity_score(segment("the the the the cat cat dog dog")).value == pytest.approx(0.8)


def test_diversity_interpolates_between_bands():
    # 6 unique of 10 -> ratio 0.6 -> midpoint 0.5
    text = "a b c d e f a b c d"
    assert diversity_score(segment(text)).value == pytest.approx(0.5)


def test_diversity_counts_case_insensitively():
    assert diversity_score(segment("Data data DATA data")).value == pytest.approx(0.8)


# -----------------------------------------------------------------------------
# Phrases
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("We went to the park and fed the ducks.", 0.30),
        ("Let us delve into the numbers.", 0.55),
        (TWO_PHRASE_TEXT, 0.70),
        ("Furthermore, we leverage cutting-edge tools.", 0.85),
        (FORMAL_AI_TEXT, 0.85),
    ],
)
def test_phrases_step_function(text, expected):
    assert phrases_score(segment(text)).value == pytest.approx(expected)


def test_phrases_count_distinct_not_occurrences():
    text = "Leverage this. Leverage that. LEVERAGE everything."
    assert find_ai_phrases(text) == ["leverage"]
    assert phrases_score(segment(text)).value == pytest.approx(0.55)


def test_phrases_match_case_insensitive_and_curly_apostrophes():
    text = "As an AI, I can’t say. It’s important to note the limits."
    assert find_ai_phrases(segment(text).text) == ["as an ai", "it's important to note"]


def test_phrases_require_word_start():
    """A catalogue phrase inside a longer word does not count."""
    assert find_ai_phrases("They deleverage and say ai cannot help.") == []
    assert find_ai_phrases("They are leveraging data.") == ["leverage"]


def test_phrase_catalogue_is_lowercase():
    assert all(p == p.lower() for p in AI_PHRASES)


# -----------------------------------------------------------------------------
# Punctuation
# -----------------------------------------------------------------------------

def test_punctuation_calm_formal_text_scores_high():
    # 100 chars with 3 commas (3%), no exclamation marks
    body = "abcd, efgh, ijkl, " + "x" * 82
    assert len(body) == 100
    assert punctuation_score(segment(body)).value == pytest.approx(0.8)


def test_punctuation_no_commas_no_exclamations():
    # calm = 1, formal = 0 -> 0.2 + 0.6 * 0.6
    assert punctuation_score(segment("just some plain words here")).value == pytest.approx(0.56)


def test_punctuation_many_exclamations_scores_low():
    # 10 '!' in 20 chars -> exclamation density 50%, calm = 0; no commas
    assert punctuation_score(segment("wow!!!!! yes!!!!! ok")).value == pytest.approx(0.2)


def test_punctuation_exclamations_lower_score():
    calm = punctuation_score(segment("Nice work on this project today")).value
    excited = punctuation_score(segment("Nice work on this project today!")).value
    assert excited < calm


# -----------------------------------------------------------------------------
# Structure
# -----------------------------------------------------------------------------

def test_structure_tidy_paragraphs_ai_like():
    text = f"{_words(80)}\n\n{_words(100, 'p')}"
    assert structure_score(segment(text)).value == pytest.approx(0.6)


def test_structure_short_paragraphs_human_like():
    assert structure_score(segment(MEETING_TEXT)).value == pytest.approx(0.4)


def test_structure_band_edges_inclusive():
    assert structure_score(segment(_words(50))).value == pytest.approx(0.6)
    assert structure_score(segment(_words(150))).value == pytest.approx(0.6)
    assert structure_score(segment(_words(151))).value == pytest.approx(0.4)


# -----------------------------------------------------------------------------
# Bounds
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text",
    ["", "!", ",,,,", "a", CASUAL_TEXT, FORMAL_AI_TEXT, MEETING_TEXT, "?!. " * 50, "word " * 5000],
)
def test_every_signal_bounded(text):
    for signal in extract_signals(segment(text)):
        assert 0.0 <= signal.value <= 1.0


def test_signal_score_rejects_out_of_range():
    with pytest.raises(ValueError):
        SignalScore(SignalName.PHRASES, 1.5)
