"""Pydantic models for API requests."""

from pydantic import BaseModel, Field, StrictStr


class AskWorkerRequest(BaseModel):
    """Request body for POST /ask-worker."""

    prompt: StrictStr = Field(
        ...,
        min_length=1,
        description="Prompt forwarded verbatim to the worker assistant",
        examples=["Describe the harbour at dawn"],
    )
