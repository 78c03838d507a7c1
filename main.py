"""
Main entrypoint: FastAPI server for the brbrbr text detector.

Env: HF_API_TOKEN (optional; heuristics only when unset), API_HOST, API_PORT,
BRBRBR_MAX_INPUT_CHARS, BRBRBR_CLASSIFIER_TIMEOUT_SEC, LOG_LEVEL, etc.

Equivalent: uvicorn backend_brbrbr.api_server.app:app --host 127.0.0.1 --port 8080
"""

import os
import sys

# Configure structured JSON logging before other imports that may log
from backend_brbrbr.brbrbr_logging import get_logger
from backend_brbrbr.core.exceptions import ConfigError

logger = get_logger("main")


def main() -> None:
    """Validate settings, then run the FastAPI server in the main thread."""
    from backend_brbrbr.config import get_settings

    try:
        settings = get_settings()
    except ConfigError as e:
        logger.error("main_config_error", message=str(e))
        sys.exit(1)

    from backend_brbrbr.api_server.app import app
    import uvicorn

    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        remote_classifier=settings.remote_configured,
    )
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
