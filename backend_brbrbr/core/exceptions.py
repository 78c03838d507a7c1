"""
Application-level exceptions.

Only InputTooLarge crosses the analysis engine boundary. Remote classifier
failures are represented as values (see analysis_engine.classifier_gateway)
and recovered locally; ConfigError is raised at settings load time.
"""

from __future__ import annotations


class BrbrbrError(Exception):
    """Base class for all brbrbr errors."""


class InputTooLarge(BrbrbrError):
    """Text exceeds the configured character bound; the caller must shorten it."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(
            f"Text is too large: {length} characters (limit: {limit})"
        )


class ConfigError(BrbrbrError):
    """An environment variable holds a value that cannot be used."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        self.variable = variable
        self.value = value
        super().__init__(f"{variable}={value!r}: {reason}")
