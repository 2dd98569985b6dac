"""Error taxonomy shared by the client, the fallback helper and the app."""
from __future__ import annotations


class ConfigError(Exception):
    """Startup configuration is missing or malformed."""


class RelayError(Exception):
    """Request-level failure rendered as ``{"error": message}``."""

    status_code = 500
    message = "AI service failed"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(RelayError):
    status_code = 400
    message = "Prompt is required"


class ProviderCallError(RelayError):
    """Both model tiers failed. The message never carries provider detail."""

    status_code = 500
    message = "AI service failed"


class EmptyOutputError(RelayError):
    status_code = 500
    message = "No output from Gemini"
