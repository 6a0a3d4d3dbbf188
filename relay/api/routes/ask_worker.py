"""The /ask-worker relay endpoint."""

import json
import time
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..dependencies import Assistant
from ..errors import ParseError
from ..logging import relay_logger
from ..models import (
    AskWorkerRequest,
    ErrorResponse,
    NarrativeResponse,
    PROMPT_REQUIRED,
    WORKER_FAILED,
)

router = APIRouter()


def parse_body(raw: bytes) -> Any:
    """Decode a request body as JSON, treating an empty body as {}.

    A literal `null` body has no fields to read a prompt from, so it is a
    ParseError like malformed JSON rather than a missing prompt.
    """
    try:
        payload = json.loads(raw.decode("utf-8") or "{}")
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError("Invalid JSON body") from e
    if payload is None:
        raise ParseError("JSON body is null")
    return payload


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/ask-worker",
    response_model=NarrativeResponse,
)
async def ask_worker(request: Request, assistant: Assistant):
    """
    Relay a prompt to the worker assistant and return its reply.

    The body is read and validated by hand so that malformed JSON is a 500
    and a missing prompt is a 400, rather than FastAPI's 422.
    """
    start = time.monotonic()

    try:
        payload = parse_body(await request.body())

        try:
            ask = AskWorkerRequest.model_validate(payload)
        except ValidationError:
            return error_response(status.HTTP_400_BAD_REQUEST, PROMPT_REQUIRED)

        relay_logger.ask_received(len(ask.prompt))
        reply = await assistant.ask(ask.prompt)

    except Exception as e:
        relay_logger.ask_failed(e)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, WORKER_FAILED)

    relay_logger.ask_completed(reply.thread_id, len(reply.narrative), time.monotonic() - start)
    return NarrativeResponse(narrative=reply.narrative)
