"""Services for relaying prompts to the worker assistant."""

from .worker_assistant import WorkerAssistant, WorkerReply, extract_text

__all__ = ["WorkerAssistant", "WorkerReply", "extract_text"]
