"""Pydantic models for API responses."""

from pydantic import BaseModel

# Client-facing error messages
METHOD_NOT_ALLOWED = "Only POST /ask-worker is allowed"
PROMPT_REQUIRED = "Property 'prompt' is required"
WORKER_FAILED = "Worker GPT failed"


class NarrativeResponse(BaseModel):
    """Successful reply from the worker assistant."""

    narrative: str


class ErrorResponse(BaseModel):
    """Body of every non-200 response."""

    error: str
