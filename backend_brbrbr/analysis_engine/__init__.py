"""
Analysis engine package: AI vs human text scoring.

Segments text, extracts five heuristic signals, combines them with fixed
weights, and fronts the whole path with an optional hosted classifier whose
failures fall back to the heuristics.
"""

from backend_brbrbr.analysis_engine.classifier_gateway import (
    ClassifierFailure,
    ClassifierFailureKind,
    ClassifierOutcome,
    classify,
    classify_async,
    extract_ai_score,
)
from backend_brbrbr.analysis_engine.context import EngineContext, create_engine_context
from backend_brbrbr.analysis_engine.engine import (
    analyze,
    analyze_async,
    default_context,
    heuristic_result,
)
from backend_brbrbr.analysis_engine.models import (
    AnalysisResult,
    ResultSource,
    SignalName,
    SignalScore,
    Verdict,
)
from backend_brbrbr.analysis_engine.scorer import (
    SIGNAL_WEIGHTS,
    build_result,
    combine,
    to_percentages,
    verdict_for,
)
from backend_brbrbr.analysis_engine.segmentation import Segmentation, segment
from backend_brbrbr.analysis_engine.signals import NEUTRAL_SCORE, extract_signals

__all__ = [
    "ClassifierFailure",
    "ClassifierFailureKind",
    "ClassifierOutcome",
    "classify",
    "classify_async",
    "extract_ai_score",
    "EngineContext",
    "create_engine_context",
    "analyze",
    "analyze_async",
    "default_context",
    "heuristic_result",
    "AnalysisResult",
    "ResultSource",
    "SignalName",
    "SignalScore",
    "Verdict",
    "SIGNAL_WEIGHTS",
    "build_result",
    "combine",
    "to_percentages",
    "verdict_for",
    "Segmentation",
    "segment",
    "NEUTRAL_SCORE",
    "extract_signals",
]
