"""
Application settings and environment configuration.

Responsibilities:
- Load configuration from environment variables and the project .env file.
- Validate settings and provide defaults for optional ones.
- Expose one frozen Settings value, built once at process start and passed
  into the analysis engine and API server.
"""

from __future__ import annotations

from dataclasses import dataclass

from backend_brbrbr.config import env


@dataclass(frozen=True)
class Settings:
    """Service configuration. Read-only after construction."""

    hf_api_token: str | None
    classifier_model: str
    classifier_url: str
    classifier_enabled: bool
    classifier_timeout_sec: float
    max_input_chars: int
    api_host: str
    api_port: int

    @property
    def remote_configured(self) -> bool:
        """True when the hosted classifier may be called (enabled and token present)."""
        return self.classifier_enabled and bool(self.hf_api_token)

    def to_log_dict(self) -> dict[str, object]:
        """Settings safe to log: the token is reported only as present/absent."""
        return {
            "classifier_model": self.classifier_model,
            "classifier_url": self.classifier_url,
            "classifier_enabled": self.classifier_enabled,
            "classifier_token_set": bool(self.hf_api_token),
            "classifier_timeout_sec": self.classifier_timeout_sec,
            "max_input_chars": self.max_input_chars,
        }


def get_settings() -> Settings:
    """
    Return the current application settings.

    Loads .env first, then reads every value from the environment.

    Returns:
        Settings with classifier credentials, timeout, input bound, and API bind address.

    Raises:
        ConfigError: a numeric variable is malformed or out of range.
    """
    env.load_brbrbr_env()
    return Settings(
        hf_api_token=env.get_hf_api_token(),
        classifier_model=env.get_classifier_model(),
        classifier_url=env.get_classifier_url(),
        classifier_enabled=env.is_classifier_enabled(),
        classifier_timeout_sec=env.get_classifier_timeout_sec(),
        max_input_chars=env.get_max_input_chars(),
        api_host=env.get_api_host(),
        api_port=env.get_api_port(),
    )
