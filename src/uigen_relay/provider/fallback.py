"""Primary-then-fallback model invocation.

Each attempt is turned into a tagged outcome instead of an exception, so the
caller decides what a failure means. The fallback tier runs only after the
primary attempt has failed, and at most once.
"""
from __future__ import annotations
import logging

from uigen_relay.common.schema import Failed, ModelTier, Outcome, Succeeded
from uigen_relay.provider.gemini_client import GeminiClient, extract_text

LOGGER = logging.getLogger("uigen_relay.provider.fallback")


def attempt(client: GeminiClient, model: str, prompt: str) -> Outcome:
    try:
        envelope = client.generate_content(model, prompt)
    except Exception as e:
        return Failed(model=model, error=e)
    return Succeeded(model=model, text=extract_text(envelope), envelope=envelope)


def generate_with_fallback(client: GeminiClient, models: ModelTier, prompt: str) -> Outcome:
    """
    Try ``models.primary``, then ``models.fallback`` with the same prompt.

    A successful primary call is returned as-is even when it carries no text.

    Returns:
        The primary outcome if it succeeded, otherwise the fallback outcome.
    """
    first = attempt(client, models.primary, prompt)
    if isinstance(first, Succeeded):
        return first

    LOGGER.warning(
        "Primary model %s failed (%s); switching to %s",
        models.primary,
        type(first.error).__name__,
        models.fallback,
    )
    LOGGER.debug("Primary failure detail: %s", first.error)
    return attempt(client, models.fallback, prompt)
