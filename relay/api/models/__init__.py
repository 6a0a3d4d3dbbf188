"""Pydantic models for API requests and responses."""

from .requests import AskWorkerRequest
from .responses import (
    ErrorResponse,
    NarrativeResponse,
    METHOD_NOT_ALLOWED,
    PROMPT_REQUIRED,
    WORKER_FAILED,
)

__all__ = [
    "AskWorkerRequest",
    "ErrorResponse",
    "NarrativeResponse",
    "METHOD_NOT_ALLOWED",
    "PROMPT_REQUIRED",
    "WORKER_FAILED",
]
