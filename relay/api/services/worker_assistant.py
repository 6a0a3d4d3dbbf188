"""Orchestration of a single prompt through the OpenAI Assistants API.

One call to WorkerAssistant.ask() runs the full sequence:
create thread -> post user message -> run assistant until terminal -> read
the newest message. The first failure aborts the sequence; nothing is retried.
"""

import time
from dataclasses import dataclass
from typing import Any, Optional

import openai
from openai import AsyncOpenAI

from ..config import RelaySettings
from ..errors import OrchestrationError, TransportError
from ..logging import relay_logger

COMPLETED = "completed"


@dataclass
class WorkerReply:
    """Result of a successful assistant run."""

    narrative: str
    thread_id: str
    run_id: str


def extract_text(message: Any) -> str:
    """Return the text of the first text block in a thread message, or ""."""
    if message is None:
        return ""
    for block in getattr(message, "content", None) or []:
        if getattr(block, "type", None) == "text":
            text = getattr(block, "text", None)
            return getattr(text, "value", None) or ""
    return ""


class WorkerAssistant:
    """Relays prompts to one configured assistant."""

    def __init__(
        self,
        client: AsyncOpenAI,
        assistant_id: str,
        poll_interval_ms: Optional[int] = None,
    ):
        self.client = client
        self.assistant_id = assistant_id
        self.poll_interval_ms = poll_interval_ms

    @classmethod
    def from_settings(cls, settings: RelaySettings) -> "WorkerAssistant":
        """Build an assistant with its own AsyncOpenAI client."""
        return cls(
            client=AsyncOpenAI(api_key=settings.api_key),
            assistant_id=settings.assistant_id,
            poll_interval_ms=settings.poll_interval_ms,
        )

    async def close(self) -> None:
        await self.client.close()

    async def ask(self, prompt: str) -> WorkerReply:
        """
        Run the assistant on a fresh thread containing only `prompt`.

        Raises:
            TransportError: If any call to the API fails.
            OrchestrationError: If the run ends in a state other than completed.
        """
        threads = self.client.beta.threads
        start = time.monotonic()

        try:
            thread = await threads.create()
            await threads.messages.create(thread_id=thread.id, role="user", content=prompt)

            run_kwargs = {"thread_id": thread.id, "assistant_id": self.assistant_id}
            if self.poll_interval_ms is not None:
                run_kwargs["poll_interval_ms"] = self.poll_interval_ms
            # Polls until the run is terminal, no upper bound on wait
            run = await threads.runs.create_and_poll(**run_kwargs)
        except openai.OpenAIError as e:
            raise TransportError(f"Assistant API call failed: {e}") from e

        relay_logger.run_finished(thread.id, run.id, run.status, time.monotonic() - start)

        if run.status != COMPLETED:
            raise OrchestrationError(run.status)

        try:
            page = await threads.messages.list(thread_id=thread.id, limit=1)
        except openai.OpenAIError as e:
            raise TransportError(f"Fetching assistant reply failed: {e}") from e

        latest = page.data[0] if page.data else None
        return WorkerReply(narrative=extract_text(latest), thread_id=thread.id, run_id=run.id)
