"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel


class GenerateIn(BaseModel):
    prompt: str | None = None
    framework: str | None = None


class GenerateOut(BaseModel):
    result: str


class ErrorOut(BaseModel):
    error: str


@dataclass(frozen=True)
class ModelTier:
    """Ordered pair of model identifiers, tried primary first."""
    primary: str
    fallback: str


@dataclass(frozen=True)
class Succeeded:
    """The provider answered; ``text`` may still be empty."""
    model: str
    text: str | None
    envelope: dict[str, Any]


@dataclass(frozen=True)
class Failed:
    model: str
    error: Exception


Outcome = Union[Succeeded, Failed]
