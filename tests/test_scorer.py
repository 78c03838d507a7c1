"""
Tests for the score combiner: weight invariant, weighted sum, percentage
split, and verdict thresholds.
"""

from __future__ import annotations

import math

import pytest

from backend_brbrbr.analysis_engine.models import ResultSource, SignalName, SignalScore, Verdict
from backend_brbrbr.analysis_engine.scorer import (
    SIGNAL_WEIGHTS,
    build_result,
    combine,
    to_percentages,
    verdict_for,
)


def _signals(**values: float) -> list[SignalScore]:
    return [SignalScore(SignalName(name), value) for name, value in values.items()]


def test_weights_sum_to_one_exactly():
    assert math.fsum(SIGNAL_WEIGHTS.values()) == 1.0
    assert set(SIGNAL_WEIGHTS) == set(SignalName)


def test_weights_match_published_values():
    assert SIGNAL_WEIGHTS == {
        SignalName.UNIFORMITY: 0.25,
        SignalName.DIVERSITY: 0.20,
        SignalName.PHRASES: 0.30,
        SignalName.PUNCTUATION: 0.15,
        SignalName.STRUCTURE: 0.10,
    }


def test_combine_weighted_sum():
    signals = _signals(uniformity=0.8, diversity=0.2, phrases=0.85, punctuation=0.56, structure=0.6)
    expected = 0.25 * 0.8 + 0.20 * 0.2 + 0.30 * 0.85 + 0.15 * 0.56 + 0.10 * 0.6
    assert combine(signals) == pytest.approx(expected)


def test_combine_is_keyed_by_name_not_position():
    signals = _signals(uniformity=0.1, diversity=0.2, phrases=0.3, punctuation=0.4, structure=0.5)
    assert combine(signals) == pytest.approx(combine(list(reversed(signals))))


def test_combine_all_neutral_is_half():
    signals = _signals(uniformity=0.5, diversity=0.5, phrases=0.5, punctuation=0.5, structure=0.5)
    assert combine(signals) == pytest.approx(0.5)


def test_combine_rejects_missing_or_duplicate_signal():
    with pytest.raises(ValueError, match="Missing"):
        combine(_signals(uniformity=0.5, diversity=0.5))
    full = _signals(uniformity=0.5, diversity=0.5, phrases=0.5, punctuation=0.5, structure=0.5)
    with pytest.raises(ValueError, match="Duplicate"):
        combine(full + [SignalScore(SignalName.PHRASES, 0.3)])


@pytest.mark.parametrize(
    "probability, ai, human",
    [
        (0.0, 0.0, 100.0),
        (1.0, 100.0, 0.0),
        (0.5, 50.0, 50.0),
        (0.123456, 12.3, 87.7),
        (0.6789, 67.9, 32.1),
        (1.7, 100.0, 0.0),
        (-0.2, 0.0, 100.0),
    ],
)
def test_to_percentages(probability, ai, human):
    ai_pct, human_pct = to_percentages(probability)
    assert ai_pct == pytest.approx(ai)
    assert human_pct == pytest.approx(human)
    assert ai_pct + human_pct == pytest.approx(100.0, abs=0.1)


@pytest.mark.parametrize(
    "ai_percentage, verdict",
    [
        (0.0, Verdict.HUMAN_WRITTEN),
        (40.0, Verdict.HUMAN_WRITTEN),
        (40.1, Verdict.UNCERTAIN),
        (50.0, Verdict.UNCERTAIN),
        (59.9, Verdict.UNCERTAIN),
        (60.0, Verdict.AI_GENERATED),
        (100.0, Verdict.AI_GENERATED),
    ],
)
def test_verdict_thresholds(ai_percentage, verdict):
    assert verdict_for(ai_percentage) == verdict


def test_build_result_consistent():
    result = build_result(0.72, ResultSource.CLASSIFIER)
    assert result.ai_percentage == pytest.approx(72.0)
    assert result.human_percentage == pytest.approx(28.0)
    assert result.verdict == Verdict.AI_GENERATED
    assert result.signals == ()
    assert result.to_dict() == {
        "human_percentage": result.human_percentage,
        "ai_percentage": result.ai_percentage,
        "verdict": "AI Generated",
    }
