"""
Hosted text-classification gateway.

Sends the raw text to a Hugging Face style inference endpoint and extracts the
probability of the AI class. One attempt per analysis, bounded by the
configured timeout, no retries. Every failure (missing token, timeout,
network error, non-2xx status, malformed body) comes back as a
ClassifierOutcome with a ClassifierFailure instead of an exception, so the
engine can fall back to the local heuristics explicitly.

Expected response: [[{"label": "Human", "score": 0.1}, {"label": "ChatGPT", "score": 0.9}]]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from backend_brbrbr.analysis_engine.context import EngineContext
from backend_brbrbr.brbrbr_logging import get_logger
from backend_brbrbr.config import Settings

logger = get_logger(__name__)

# Label substrings that name the AI class, checked case-insensitively
AI_LABEL_MARKERS = ("chatgpt", "ai", "fake")
POSITIVE_CLASS_LABEL = "LABEL_1"
MAX_ERROR_BODY_CHARS = 200


class ClassifierFailureKind(str, Enum):
    CONFIG = "config"
    TIMEOUT = "timeout"
    NETWORK = "network"
    API = "api"
    PARSE = "parse"


@dataclass(frozen=True)
class ClassifierFailure:
    kind: ClassifierFailureKind
    message: str


@dataclass(frozen=True)
class ClassifierOutcome:
    """
    Result of one remote attempt: exactly one of probability / failure is set.
    """

    probability: float | None = None
    failure: ClassifierFailure | None = None

    @property
    def ok(self) -> bool:
        return self.probability is not None

    @classmethod
    def success(cls, probability: float) -> ClassifierOutcome:
        return cls(probability=probability)

    @classmethod
    def failed(cls, kind: ClassifierFailureKind, message: str) -> ClassifierOutcome:
        return cls(failure=ClassifierFailure(kind=kind, message=message))


class ResponseParseError(ValueError):
    """Response body does not carry a usable AI-class score."""


def _entry(item: Any) -> tuple[str, float]:
    if not isinstance(item, dict):
        raise ResponseParseError(f"Expected label/score object, got {type(item).__name__}")
    label = item.get("label")
    score = item.get("score")
    if not isinstance(label, str) or isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ResponseParseError("Entry missing string 'label' or numeric 'score'")
    return label, float(score)


def extract_ai_score(payload: Any) -> float:
    """
    Extract the AI-class probability from a classifier response body.

    Accepts [[{label, score}, ...]] (one input) or a flat [{label, score}, ...].
    Lookup order: label containing chatgpt/ai/fake, then LABEL_1, then the
    higher of the first two scores.

    Raises:
        ResponseParseError: body is empty, mis-shaped, or the score is outside [0, 1].
    """
    if not isinstance(payload, list) or not payload:
        raise ResponseParseError("Empty response from API")
    scores = payload[0] if isinstance(payload[0], list) else payload
    if not scores:
        raise ResponseParseError("Empty response from API")
    entries = [_entry(item) for item in scores]

    found: float | None = None
    for label, score in entries:
        if any(marker in label.lower() for marker in AI_LABEL_MARKERS):
            found = score
            break
    if found is None:
        for label, score in entries:
            if label == POSITIVE_CLASS_LABEL:
                found = score
                break
    if found is None and len(entries) >= 2:
        found = max(entries[0][1], entries[1][1])
    if found is None:
        raise ResponseParseError("Could not find AI score in response")
    if not 0.0 <= found <= 1.0:
        raise ResponseParseError(f"AI score out of range: {found}")
    return found


def _precheck(settings: Settings) -> ClassifierOutcome | None:
    if not settings.classifier_enabled:
        return ClassifierOutcome.failed(ClassifierFailureKind.CONFIG, "Remote classifier disabled")
    if not settings.hf_api_token:
        return ClassifierOutcome.failed(ClassifierFailureKind.CONFIG, "HF_API_TOKEN not set in environment")
    return None


def _no_client() -> ClassifierOutcome:
    return ClassifierOutcome.failed(ClassifierFailureKind.CONFIG, "No HTTP client in engine context")


def _interpret(response: httpx.Response) -> ClassifierOutcome:
    if not response.is_success:
        body = response.text[:MAX_ERROR_BODY_CHARS] or "Unknown error"
        return ClassifierOutcome.failed(
            ClassifierFailureKind.API,
            f"API returned {response.status_code}: {body}",
        )
    try:
        probability = extract_ai_score(response.json())
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError, ResponseParseError
        return ClassifierOutcome.failed(ClassifierFailureKind.PARSE, str(e))
    logger.debug("classifier_response", status_code=response.status_code, probability=probability)
    return ClassifierOutcome.success(probability)


def _transport_failure(e: httpx.HTTPError) -> ClassifierOutcome:
    logger.debug("classifier_request_failed", error_type=type(e).__name__, error=str(e))
    if isinstance(e, httpx.TimeoutException):
        return ClassifierOutcome.failed(ClassifierFailureKind.TIMEOUT, str(e) or "Request timed out")
    return ClassifierOutcome.failed(ClassifierFailureKind.NETWORK, str(e) or type(e).__name__)


def classify(text: str, context: EngineContext) -> ClassifierOutcome:
    """
    Ask the hosted classifier for the AI probability of text (blocking).

    Args:
        text: Raw text, already bound-checked by the engine.
        context: Engine context holding settings and the sync client.

    Returns:
        ClassifierOutcome with probability in [0, 1] or a failure.
    """
    skipped = _precheck(context.settings)
    if skipped is not None:
        return skipped
    client = context.client
    if client is None:
        return _no_client()
    try:
        response = client.post(context.settings.classifier_url, json={"inputs": text})
    except httpx.HTTPError as e:
        return _transport_failure(e)
    return _interpret(response)


async def classify_async(text: str, context: EngineContext) -> ClassifierOutcome:
    """Async twin of classify(); cancelling the awaiting task cancels the request."""
    skipped = _precheck(context.settings)
    if skipped is not None:
        return skipped
    client = context.async_client
    if client is None:
        return _no_client()
    try:
        response = await client.post(
            context.settings.classifier_url, json={"inputs": text}
        )
    except httpx.HTTPError as e:
        return _transport_failure(e)
    return _interpret(response)
