"""
FastAPI server: thin HTTP layer over the analysis engine.

Exposes POST /api/analyze returning the human/AI split and verdict, and
GET /health. The engine context (settings + classifier HTTP clients) is built
once in the lifespan and closed on shutdown. Config via env (see config.env).
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from backend_brbrbr import __version__
from backend_brbrbr.analysis_engine import EngineContext, Verdict, analyze_async, create_engine_context
from backend_brbrbr.api_server.middleware import RequestLoggingMiddleware
from backend_brbrbr.brbrbr_logging import get_logger
from backend_brbrbr.config import get_settings
from backend_brbrbr.core.exceptions import InputTooLarge

logger = get_logger(__name__)

SERVICE_NAME = "brbrbr"


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    """POST /api/analyze body."""

    text: str = Field(..., description="Text to classify; may be empty")


class AnalyzeResponse(BaseModel):
    """POST /api/analyze response: confidence split and verdict."""

    human_percentage: float = Field(..., ge=0, le=100, description="Human-written likelihood (0-100)")
    ai_percentage: float = Field(..., ge=0, le=100, description="AI-generated likelihood (0-100)")
    verdict: Verdict = Field(..., description="Human Written | AI Generated | Uncertain")


class HealthResponse(BaseModel):
    status: str
    service: str


# -----------------------------------------------------------------------------
# Lifespan and dependency
# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the engine context once; close its HTTP clients on shutdown."""
    context = create_engine_context(get_settings())
    app.state.engine_context = context
    logger.info("api_started", service=SERVICE_NAME, version=__version__)
    try:
        yield
    finally:
        await context.aclose()
        logger.info("api_stopped", service=SERVICE_NAME)


def get_engine_context(request: Request) -> EngineContext:
    """Dependency: the process-wide engine context created in lifespan."""
    return request.app.state.engine_context


app = FastAPI(
    title="brbrbr",
    description="Classify text as human-written or AI-generated",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", service=SERVICE_NAME)


@app.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze_text(
    body: AnalyzeRequest,
    context: EngineContext = Depends(get_engine_context),
) -> AnalyzeResponse:
    """Run the engine on body.text. Oversized text is rejected with 413."""
    try:
        result = await analyze_async(body.text, context)
    except InputTooLarge as e:
        logger.info("api_input_too_large", length=e.length, limit=e.limit)
        raise HTTPException(status_code=413, detail=str(e)) from e
    return AnalyzeResponse(
        human_percentage=result.human_percentage,
        ai_percentage=result.ai_percentage,
        verdict=result.verdict,
    )
