from __future__ import annotations

import logging

import pytest

from uigen_relay.common.config import DEFAULT_ORIGINS, load_settings
from uigen_relay.common.errors import ConfigError
from uigen_relay.common.logging_setup import setup_logging
import uigen_relay.serve.run_server as run_mod


def test_defaults() -> None:
    s = load_settings({"GEMINI_API_KEY": "abc"})
    assert s.models.primary == "models/gemini-2.5-flash"
    assert s.models.fallback == "models/gemini-2.5-pro"
    assert s.port == 5000
    assert s.allow_origins == DEFAULT_ORIGINS
    assert "abc" not in repr(s)


@pytest.mark.parametrize("env", [{}, {"GEMINI_API_KEY": ""}, {"GEMINI_API_KEY": "   "}])
def test_missing_key(env: dict) -> None:
    with pytest.raises(ConfigError):
        load_settings(env)


def test_overrides() -> None:
    s = load_settings(
        {
            "GEMINI_API_KEY": "abc",
            "PORT": "8080",
            "GEMINI_PRIMARY_MODEL": "models/a",
            "GEMINI_FALLBACK_MODEL": "models/b",
            "CORS_ALLOW_ORIGINS": "http://a.test, http://b.test,",
            "GEMINI_TIMEOUT_S": "12.5",
        }
    )
    assert s.port == 8080
    assert (s.models.primary, s.models.fallback) == ("models/a", "models/b")
    assert s.allow_origins == ("http://a.test", "http://b.test")
    assert s.timeout_s == 12.5


@pytest.mark.parametrize(
    "name,value",
    [("PORT", "abc"), ("PORT", "0"), ("GEMINI_TIMEOUT_S", "-1"), ("GEMINI_TIMEOUT_S", "nan"), ("GEMINI_TIMEOUT_S", "inf")],
)
def test_bad_numbers(name: str, value: str) -> None:
    with pytest.raises(ConfigError):
        load_settings({"GEMINI_API_KEY": "abc", name: value})


def test_main_exits_without_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setattr("uigen_relay.common.config.load_dotenv", lambda: None)
    started = []
    monkeypatch.setattr(run_mod.uvicorn, "run", lambda *a, **k: started.append(a))
    with pytest.raises(SystemExit) as exc:
        run_mod.main()
    assert exc.value.code == 1
    assert started == []


def test_main_serves_with_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    monkeypatch.setenv("PORT", "5055")
    monkeypatch.setattr("uigen_relay.common.config.load_dotenv", lambda: None)
    started = []
    monkeypatch.setattr(run_mod.uvicorn, "run", lambda app, **k: started.append(k))
    run_mod.main()
    assert started[0]["port"] == 5055


def test_setup_logging_accepts_names() -> None:
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    setup_logging("nonsense")
    assert logging.getLogger().level == logging.INFO
