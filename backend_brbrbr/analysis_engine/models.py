"""
Data models for analysis engine input and output.

Signal names, per-signal scores, verdict labels, and the final analysis
result. All values are immutable; a result is built once per call, returned,
and discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SignalName(str, Enum):
    UNIFORMITY = "uniformity"
    DIVERSITY = "diversity"
    PHRASES = "phrases"
    PUNCTUATION = "punctuation"
    STRUCTURE = "structure"


class Verdict(str, Enum):
    HUMAN_WRITTEN = "Human Written"
    AI_GENERATED = "AI Generated"
    UNCERTAIN = "Uncertain"


class ResultSource(str, Enum):
    CLASSIFIER = "classifier"
    """Probability came from the hosted text-classification model."""
    HEURISTIC = "heuristic"
    """Probability came from the five local signals."""


@dataclass(frozen=True)
class SignalScore:
    """AI-likelihood for one dimension of the text; 1.0 = maximally AI-like."""

    name: SignalName
    value: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.value <= 1.0:
            raise ValueError(f"{self.name.value} score out of range: {self.value}")

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name.value, "value": round(self.value, 4)}


@dataclass(frozen=True)
class AnalysisResult:
    """
    Human/AI split and verdict for one text.

    human_percentage + ai_percentage == 100.0 (one-decimal rounding).
    """

    human_percentage: float
    ai_percentage: float
    verdict: Verdict
    source: ResultSource
    signals: tuple[SignalScore, ...] = field(default_factory=tuple)
    """Five local signal scores on the heuristic path; empty on the classifier path."""

    def to_dict(self) -> dict[str, Any]:
        """Caller-facing shape: human_percentage, ai_percentage, verdict."""
        return {
            "human_percentage": self.human_percentage,
            "ai_percentage": self.ai_percentage,
            "verdict": self.verdict.value,
        }

    def to_debug_dict(self) -> dict[str, Any]:
        out = self.to_dict()
        out["source"] = self.source.value
        out["signals"] = [s.to_dict() for s in self.signals]
        return out
