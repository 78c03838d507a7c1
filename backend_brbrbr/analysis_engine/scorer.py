"""
AI score computation: weights, percentages, and verdict.

Responsibilities:
- Combine the five signal scores with fixed weights into one AI probability.
- Convert a probability (local or remote) into an AI/human percentage split.
- Map the AI percentage to a verdict: >= 60 AI Generated, <= 40 Human Written, else Uncertain.
"""

from __future__ import annotations

import math
from typing import Iterable

from backend_brbrbr.analysis_engine.models import (
    AnalysisResult,
    ResultSource,
    SignalName,
    SignalScore,
    Verdict,
)

SIGNAL_WEIGHTS: dict[SignalName, float] = {
    SignalName.UNIFORMITY: 0.25,
    SignalName.DIVERSITY: 0.20,
    SignalName.PHRASES: 0.30,
    SignalName.PUNCTUATION: 0.15,
    SignalName.STRUCTURE: 0.10,
}

AI_VERDICT_MIN_PCT = 60.0
HUMAN_VERDICT_MAX_PCT = 40.0


def _check_weights() -> None:
    """Weights must cover every signal and sum to 1.0."""
    missing = set(SignalName) - set(SIGNAL_WEIGHTS)
    if missing:
        raise RuntimeError(f"Missing signal weights: {sorted(m.value for m in missing)}")
    total = sum(SIGNAL_WEIGHTS.values())
    if not math.isclose(total, 1.0, abs_tol=1e-12):
        raise RuntimeError(f"Signal weights must sum to 1.0, got {total}")


_check_weights()


def combine(signals: Iterable[SignalScore]) -> float:
    """
    Weighted sum of signal scores, keyed by signal name.

    Args:
        signals: One score per SignalName, any order.

    Returns:
        AI probability in [0, 1].

    Raises:
        ValueError: a signal is missing or given twice.
    """
    by_name: dict[SignalName, float] = {}
    for signal in signals:
        if signal.name in by_name:
            raise ValueError(f"Duplicate signal: {signal.name.value}")
        by_name[signal.name] = signal.value
    missing = set(SIGNAL_WEIGHTS) - set(by_name)
    if missing:
        raise ValueError(f"Missing signals: {sorted(m.value for m in missing)}")
    return sum(SIGNAL_WEIGHTS[name] * value for name, value in by_name.items())


def to_percentages(probability: float) -> tuple[float, float]:
    """Return (ai_percentage, human_percentage), one decimal each, summing to 100."""
    p = max(0.0, min(1.0, probability))
    ai_percentage = round(p * 100.0, 1)
    human_percentage = round(100.0 - ai_percentage, 1)
    return ai_percentage, human_percentage


def verdict_for(ai_percentage: float) -> Verdict:
    """ai >= 60 -> AI Generated; ai <= 40 -> Human Written; otherwise Uncertain."""
    if ai_percentage >= AI_VERDICT_MIN_PCT:
        return Verdict.AI_GENERATED
    if ai_percentage <= HUMAN_VERDICT_MAX_PCT:
        return Verdict.HUMAN_WRITTEN
    return Verdict.UNCERTAIN


def build_result(
    probability: float,
    source: ResultSource,
    signals: tuple[SignalScore, ...] = (),
) -> AnalysisResult:
    """Turn an AI probability into the final AnalysisResult."""
    ai_percentage, human_percentage = to_percentages(probability)
    return AnalysisResult(
        human_percentage=human_percentage,
        ai_percentage=ai_percentage,
        verdict=verdict_for(ai_percentage),
        source=source,
        signals=signals,
    )
