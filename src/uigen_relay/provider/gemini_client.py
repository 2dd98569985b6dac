"""Thin wrapper around the Gemini ``generateContent`` REST endpoint."""
from __future__ import annotations
import logging
from typing import Any

import httpx

LOGGER = logging.getLogger("uigen_relay.provider.gemini")

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"


def extract_text(envelope: dict[str, Any]) -> str | None:
    """Return ``candidates[0].content.parts[0].text`` or None if any hop is missing."""
    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


def block_reason(envelope: dict[str, Any]) -> str | None:
    """Return ``promptFeedback.blockReason`` when Gemini refused the prompt."""
    feedback = envelope.get("promptFeedback")
    if isinstance(feedback, dict):
        return feedback.get("blockReason")
    return None


class GeminiClient:
    """Stateless client; safe to share across concurrent requests."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _url(self, model: str) -> str:
        if not model.startswith("models/"):
            model = f"models/{model}"
        return f"{self.base_url}/v1beta/{model}:generateContent"

    def generate_content(self, model: str, prompt: str) -> dict[str, Any]:
        """
        Send one user turn to ``model`` and return the decoded response envelope.

        Raises:
            httpx.HTTPError: network failure, timeout or non-2xx status.
            ValueError: response body is not a JSON object.
        """
        headers = {"x-goog-api-key": self.api_key}
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        with httpx.Client(timeout=self.timeout) as client:
            r = client.post(self._url(model), headers=headers, json=payload)
            r.raise_for_status()
            data = r.json()
        if not isinstance(data, dict):
            raise ValueError(f"unexpected response body from {model}")
        return data
