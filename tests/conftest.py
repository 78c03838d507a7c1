"""
Pytest fixtures for brbrbr tests. Builds Settings directly (no .env), engine
contexts backed by httpx.MockTransport, and a FastAPI TestClient.
"""

from __future__ import annotations

from typing import Callable, Iterator

import httpx
import pytest

from backend_brbrbr.analysis_engine import EngineContext, create_engine_context
from backend_brbrbr.config import Settings

TEST_TOKEN = "test-token"
TEST_URL = "https://classifier.test/models/detector"


def build_settings(**overrides) -> Settings:
    """Settings with the remote classifier configured; override any field."""
    values = {
        "hf_api_token": TEST_TOKEN,
        "classifier_model": "test/detector",
        "classifier_url": TEST_URL,
        "classifier_enabled": True,
        "classifier_timeout_sec": 2.0,
        "max_input_chars": 50_000,
        "api_host": "127.0.0.1",
        "api_port": 8080,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Factory fixture around build_settings."""
    return build_settings


@pytest.fixture
def heuristic_context() -> EngineContext:
    """Engine context with no token: every analysis takes the heuristic path."""
    return create_engine_context(build_settings(hf_api_token=None))


@pytest.fixture
def mock_context() -> Iterator[Callable[..., EngineContext]]:
    """
    Factory: engine context whose classifier calls are answered by handler.

    Usage: ctx = mock_context(lambda request: httpx.Response(200, json=[...]))
    """
    created: list[EngineContext] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **overrides) -> EngineContext:
        transport = httpx.MockTransport(handler)
        ctx = create_engine_context(
            build_settings(**overrides),
            transport=transport,
            async_transport=transport,
        )
        created.append(ctx)
        return ctx

    yield _make
    for ctx in created:
        ctx.close()


@pytest.fixture
def client(monkeypatch):
    """FastAPI TestClient with the remote classifier unset and a small input bound."""
    from fastapi.testclient import TestClient

    monkeypatch.delenv("HF_API_TOKEN", raising=False)
    monkeypatch.setenv("BRBRBR_CLASSIFIER_ENABLED", "false")
    monkeypatch.setenv("BRBRBR_MAX_INPUT_CHARS", "1000")

    from backend_brbrbr.api_server.server import app

    with TestClient(app) as test_client:
        yield test_client
