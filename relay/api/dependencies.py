"""FastAPI dependency injection for the worker assistant."""

from typing import Annotated

from fastapi import Depends, Request

from .services.worker_assistant import WorkerAssistant


def get_worker_assistant(request: Request) -> WorkerAssistant:
    """The shared WorkerAssistant created in the app lifespan."""
    return request.app.state.worker_assistant


# Type aliases for cleaner route signatures
Assistant = Annotated[WorkerAssistant, Depends(get_worker_assistant)]
