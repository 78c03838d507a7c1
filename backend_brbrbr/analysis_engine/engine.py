"""
Analysis entry point: remote classifier first, local heuristics on failure.

analyze() / analyze_async() check the input bound, attempt the hosted
classifier once, and fall back to the heuristic path when the attempt does
not produce a probability. The fallback is logged as a degraded-mode event
and never surfaced to the caller; only InputTooLarge crosses this boundary
once a context exists.
"""

from __future__ import annotations

import functools

from backend_brbrbr.analysis_engine.classifier_gateway import (
    ClassifierFailureKind,
    ClassifierOutcome,
    classify,
    classify_async,
)
from backend_brbrbr.analysis_engine.context import EngineContext
from backend_brbrbr.analysis_engine.models import AnalysisResult, ResultSource
from backend_brbrbr.analysis_engine.scorer import build_result, combine
from backend_brbrbr.analysis_engine.segmentation import segment
from backend_brbrbr.analysis_engine.signals import extract_signals
from backend_brbrbr.brbrbr_logging import get_logger
from backend_brbrbr.config import get_settings
from backend_brbrbr.core.exceptions import InputTooLarge

logger = get_logger(__name__)


@functools.lru_cache(maxsize=1)
def default_context() -> EngineContext:
    """
    Heuristics-only context used when analyze() is called without one.

    Built from the environment on first use and reused afterwards; call
    default_context.cache_clear() to pick up changed settings.

    Raises:
        ConfigError: the environment holds a malformed value (first call only).
    """
    return EngineContext(settings=get_settings())


def check_input(text: str, max_chars: int) -> None:
    """Raise InputTooLarge when text exceeds max_chars characters."""
    if len(text) > max_chars:
        raise InputTooLarge(len(text), max_chars)


def heuristic_result(text: str) -> AnalysisResult:
    """
    Score text with the five local signals only.

    Pure and deterministic: segment, extract signals, combine with fixed weights.
    """
    signals = extract_signals(segment(text))
    return build_result(combine(signals), ResultSource.HEURISTIC, signals)


def _resolve(text: str, outcome: ClassifierOutcome | None) -> AnalysisResult:
    if outcome is not None and outcome.probability is not None:
        return build_result(outcome.probability, ResultSource.CLASSIFIER)
    if outcome is not None and outcome.failure is not None:
        # CONFIG = remote disabled or no token; logged below warning level
        log = logger.info if outcome.failure.kind == ClassifierFailureKind.CONFIG else logger.warning
        log(
            "classifier_degraded",
            kind=outcome.failure.kind.value,
            error=outcome.failure.message,
        )
    return heuristic_result(text)


def _log_result(result: AnalysisResult, text: str) -> AnalysisResult:
    logger.info(
        "analysis_completed",
        source=result.source.value,
        chars=len(text),
        ai_percentage=result.ai_percentage,
        verdict=result.verdict.value,
    )
    return result


def analyze(text: str, context: EngineContext | None = None) -> AnalysisResult:
    """
    Classify text as human-written or AI-generated.

    Args:
        text: Raw text; any str, including empty.
        context: Engine context from create_engine_context(); default_context()
            is used when None.

    Returns:
        AnalysisResult from the hosted classifier, or from the local heuristics
        when the classifier is unavailable or fails.

    Raises:
        InputTooLarge: text is longer than settings.max_input_chars.
        ConfigError: context is None and the environment is malformed; raised
            while building default_context(), before any analysis.
    """
    ctx = context or default_context()
    check_input(text, ctx.settings.max_input_chars)
    # Blank text has nothing to classify remotely
    outcome = classify(text, ctx) if text.strip() else None
    return _log_result(_resolve(text, outcome), text)


async def analyze_async(text: str, context: EngineContext | None = None) -> AnalysisResult:
    """
    Async twin of analyze().

    Only the remote call suspends; cancelling the task cancels that call. The
    heuristic path runs to completion without awaiting.
    """
    ctx = context or default_context()
    check_input(text, ctx.settings.max_input_chars)
    outcome = await classify_async(text, ctx) if text.strip() else None
    return _log_result(_resolve(text, outcome), text)
