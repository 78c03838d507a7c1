"""
Environment variable loading and validation for brbrbr.

- HF_API_TOKEN: bearer token for the hosted classifier (unset = heuristics only)
- BRBRBR_CLASSIFIER_MODEL: model id (default: Hello-SimpleAI/chatgpt-detector-roberta)
- BRBRBR_CLASSIFIER_URL: endpoint; may contain {model}
- BRBRBR_CLASSIFIER_ENABLED: 0/false/no/off disables the remote path
- BRBRBR_CLASSIFIER_TIMEOUT_SEC: remote timeout in seconds, clamped to (0, 5]
- BRBRBR_MAX_INPUT_CHARS: maximum accepted text length
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from backend_brbrbr.core.exceptions import ConfigError

# Project root: config is backend_brbrbr/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_CLASSIFIER_MODEL = "Hello-SimpleAI/chatgpt-detector-roberta"
DEFAULT_CLASSIFIER_URL_TEMPLATE = "https://api-inference.huggingface.co/models/{model}"
DEFAULT_CLASSIFIER_TIMEOUT_SEC = 3.0
MAX_CLASSIFIER_TIMEOUT_SEC = 5.0
DEFAULT_MAX_INPUT_CHARS = 50_000
DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8080

_FALSE_VALUES = ("0", "false", "no", "off")


def load_brbrbr_env() -> None:
    """Load .env from project root. Existing environment variables win."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH, override=False)


def _read(name: str) -> str:
    return (os.getenv(name) or "").strip()


def _read_float(name: str, default: float) -> float:
    raw = _read(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(name, raw, "expected a number") from None


def _read_int(name: str, default: int) -> int:
    raw = _read(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(name, raw, "expected an integer") from None


def get_hf_api_token() -> str | None:
    """Return HF_API_TOKEN, or None when unset/blank."""
    return _read("HF_API_TOKEN") or None


def get_classifier_model() -> str:
    return _read("BRBRBR_CLASSIFIER_MODEL") or DEFAULT_CLASSIFIER_MODEL


def get_classifier_url() -> str:
    """
    Resolve the classifier endpoint.
    Order: BRBRBR_CLASSIFIER_URL (with {model} substituted) > Hugging Face inference URL for the model.
    """
    template = _read("BRBRBR_CLASSIFIER_URL") or DEFAULT_CLASSIFIER_URL_TEMPLATE
    return template.replace("{model}", get_classifier_model())


def is_classifier_enabled() -> bool:
    """Return False only when BRBRBR_CLASSIFIER_ENABLED is explicitly off."""
    return _read("BRBRBR_CLASSIFIER_ENABLED").lower() not in _FALSE_VALUES


def get_classifier_timeout_sec() -> float:
    """Remote call timeout. Must be positive; values above the cap are clamped to it."""
    value = _read_float("BRBRBR_CLASSIFIER_TIMEOUT_SEC", DEFAULT_CLASSIFIER_TIMEOUT_SEC)
    if value <= 0:
        raise ConfigError("BRBRBR_CLASSIFIER_TIMEOUT_SEC", str(value), "must be positive")
    return min(value, MAX_CLASSIFIER_TIMEOUT_SEC)


def get_max_input_chars() -> int:
    value = _read_int("BRBRBR_MAX_INPUT_CHARS", DEFAULT_MAX_INPUT_CHARS)
    if value <= 0:
        raise ConfigError("BRBRBR_MAX_INPUT_CHARS", str(value), "must be positive")
    return value


def get_api_host() -> str:
    return _read("API_HOST") or DEFAULT_API_HOST


def get_api_port() -> int:
    return _read_int("API_PORT", DEFAULT_API_PORT)
