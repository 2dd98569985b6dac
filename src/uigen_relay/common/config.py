"""Environment-driven settings, validated once at startup."""
from __future__ import annotations
import math
import os
from dataclasses import dataclass, field
from typing import Mapping

from dotenv import load_dotenv

from uigen_relay.common.errors import ConfigError
from uigen_relay.common.schema import ModelTier

DEFAULT_ORIGINS = (
    "http://localhost:5173",
    "https://vercel-frontend-ivory.vercel.app",
)

@dataclass(frozen=True)
class Settings:
    api_key: str = field(repr=False)
    models: ModelTier = ModelTier("models/gemini-2.5-flash", "models/gemini-2.5-pro")
    base_url: str = "https://generativelanguage.googleapis.com"
    timeout_s: float = 60.0
    allow_origins: tuple[str, ...] = DEFAULT_ORIGINS
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    template_path: str | None = None


def _number(env: Mapping[str, str], name: str, default: str, cast: type) -> float | int:
    raw = env.get(name) or default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a positive finite number, got {raw!r}")
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from the environment.

    When ``env`` is omitted a local ``.env`` file is loaded first (existing
    variables win) and ``os.environ`` is read.

    Raises:
        ConfigError: GEMINI_API_KEY is missing or a numeric setting is malformed.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    api_key = (env.get("GEMINI_API_KEY") or "").strip()
    if not api_key:
        raise ConfigError("GEMINI_API_KEY missing")

    origins_raw = env.get("CORS_ALLOW_ORIGINS")
    if origins_raw:
        origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip())
    else:
        origins = DEFAULT_ORIGINS

    defaults = Settings(api_key=api_key)
    return Settings(
        api_key=api_key,
        models=ModelTier(
            env.get("GEMINI_PRIMARY_MODEL") or defaults.models.primary,
            env.get("GEMINI_FALLBACK_MODEL") or defaults.models.fallback,
        ),
        base_url=(env.get("GEMINI_BASE_URL") or defaults.base_url).rstrip("/"),
        timeout_s=float(_number(env, "GEMINI_TIMEOUT_S", "60", float)),
        allow_origins=origins,
        host=env.get("HOST") or defaults.host,
        port=int(_number(env, "PORT", "5000", int)),
        log_level=env.get("LOG_LEVEL") or defaults.log_level,
        template_path=env.get("PROMPT_TEMPLATE_PATH") or None,
    )
