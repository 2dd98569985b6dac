"""FastAPI relay in front of the Gemini text generation API.

Endpoints:
- GET /health
- POST /generate  { "prompt": "...", "framework": "..." }
"""
from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from uigen_relay.common.errors import (
    EmptyOutputError,
    ProviderCallError,
    RelayError,
    ValidationError,
)
from uigen_relay.common.config import Settings
from uigen_relay.common.schema import ErrorOut, Failed, GenerateIn, GenerateOut
from uigen_relay.common.templates import load_template, render_prompt
from uigen_relay.provider.fallback import generate_with_fallback
from uigen_relay.provider.gemini_client import GeminiClient, block_reason

LOGGER = logging.getLogger("uigen_relay.serve.app")

ERROR_RESPONSES = {400: {"model": ErrorOut}, 500: {"model": ErrorOut}}


def _has_field_errors(exc: RequestValidationError) -> bool:
    """True when a known body field had the wrong type, e.g. {"prompt": 123}."""
    return any(
        len(err.get("loc", ())) > 1 and err["loc"][1] in GenerateIn.model_fields
        for err in exc.errors()
    )


def create_app(settings: Settings, client: GeminiClient | None = None) -> FastAPI:
    """
    Build the relay application.

    Args:
        settings: Validated startup settings.
        client: Provider client; one is built from ``settings`` when omitted.
    """
    if client is None:
        client = GeminiClient(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout_s,
        )
    # read once; a bad PROMPT_TEMPLATE_PATH fails here
    template = load_template(settings.template_path)

    app = FastAPI(title="UI Generation Relay")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allow_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(RelayError)
    async def _relay_error(request: Request, exc: RelayError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        LOGGER.info("Rejected request body: %s", exc.errors())
        # a missing or non-object body carries no prompt at all
        if _has_field_errors(exc):
            return JSONResponse(status_code=400, content={"error": "Invalid request body"})
        return JSONResponse(status_code=400, content={"error": ValidationError.message})

    @app.get("/health")
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "primary_model": settings.models.primary,
            "fallback_model": settings.models.fallback,
        }

    @app.post("/generate", response_model=GenerateOut, responses=ERROR_RESPONSES)
    def generate(body: GenerateIn) -> GenerateOut:
        if not body.prompt:
            raise ValidationError()

        full_prompt = render_prompt(template, body.prompt, body.framework)
        outcome = generate_with_fallback(client, settings.models, full_prompt)

        if isinstance(outcome, Failed):
            LOGGER.error("Gemini error (%s): %s", outcome.model, outcome.error)
            raise ProviderCallError()
        if not outcome.text:
            LOGGER.warning(
                "Empty output from %s (blockReason=%s)",
                outcome.model,
                block_reason(outcome.envelope),
            )
            raise EmptyOutputError()

        LOGGER.info("Generated %d chars with %s", len(outcome.text), outcome.model)
        return GenerateOut(result=outcome.text)

    return app
