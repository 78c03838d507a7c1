"""
Engine context: settings plus the shared HTTP clients for the remote classifier.

Built once at process start with create_engine_context() and read-only
afterwards; close() / aclose() release the clients at shutdown. When the
remote classifier is not configured the clients are None and every analysis
runs on the local heuristics.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from backend_brbrbr.brbrbr_logging import get_logger
from backend_brbrbr.config import Settings, get_settings

logger = get_logger(__name__)


@dataclass(frozen=True)
class EngineContext:
    settings: Settings
    client: httpx.Client | None = None
    """Sync client for analyze(); None when the remote classifier is not configured."""
    async_client: httpx.AsyncClient | None = None
    """Async client for analyze_async(); None when the remote classifier is not configured."""

    def close(self) -> None:
        if self.client is not None:
            self.client.close()

    async def aclose(self) -> None:
        if self.async_client is not None:
            await self.async_client.aclose()
        self.close()


def _headers(settings: Settings) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {settings.hf_api_token}",
        "Content-Type": "application/json",
    }


def create_engine_context(
    settings: Settings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    async_transport: httpx.AsyncBaseTransport | None = None,
) -> EngineContext:
    """
    Build the engine context for this process.

    Args:
        settings: Service settings; loaded from the environment when None.
        transport: Optional sync transport (tests pass httpx.MockTransport).
        async_transport: Optional async transport for the async client.

    Returns:
        EngineContext with HTTP clients only when the remote classifier is
        enabled and a token is present.
    """
    cfg = settings or get_settings()
    if not cfg.remote_configured:
        logger.info("engine_context_heuristics_only", **cfg.to_log_dict())
        return EngineContext(settings=cfg)

    timeout = httpx.Timeout(cfg.classifier_timeout_sec)
    client = httpx.Client(timeout=timeout, headers=_headers(cfg), transport=transport)
    async_client = httpx.AsyncClient(
        timeout=timeout, headers=_headers(cfg), transport=async_transport
    )
    logger.info("engine_context_created", **cfg.to_log_dict())
    return EngineContext(settings=cfg, client=client, async_client=async_client)
