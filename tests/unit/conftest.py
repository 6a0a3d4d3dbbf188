"""Pytest fixtures for API tests."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from relay.api.config import RelaySettings
from relay.api.dependencies import get_worker_assistant
from relay.api.main import create_app
from relay.api.services.worker_assistant import WorkerAssistant, WorkerReply

TEST_ASSISTANT_ID = "asst_test123"


@pytest.fixture
def settings():
    """Settings with fake credentials; nothing here reaches the network."""
    return RelaySettings(api_key="sk-test-key", assistant_id=TEST_ASSISTANT_ID)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def mock_assistant():
    """A WorkerAssistant stub that answers "world"."""
    assistant = AsyncMock(spec=WorkerAssistant)
    assistant.ask = AsyncMock(
        return_value=WorkerReply(narrative="world", thread_id="thread_1", run_id="run_1")
    )
    return assistant


@pytest.fixture
def client(app, mock_assistant):
    """TestClient with the orchestration collaborator stubbed out."""
    app.dependency_overrides[get_worker_assistant] = lambda: mock_assistant

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


def make_message(text):
    """Build an object shaped like an openai thread message with one text block."""
    block = SimpleNamespace(type="text", text=SimpleNamespace(value=text, annotations=[]))
    return SimpleNamespace(id="msg_1", role="assistant", content=[block])


@pytest.fixture
def mock_openai_client():
    """MagicMock standing in for openai.AsyncOpenAI with a successful run."""
    client = MagicMock()
    threads = client.beta.threads
    threads.create = AsyncMock(return_value=SimpleNamespace(id="thread_abc"))
    threads.messages.create = AsyncMock(return_value=SimpleNamespace(id="msg_user"))
    threads.runs.create_and_poll = AsyncMock(
        return_value=SimpleNamespace(id="run_xyz", status="completed")
    )
    threads.messages.list = AsyncMock(
        return_value=SimpleNamespace(data=[make_message("Once upon a time")])
    )
    client.close = AsyncMock()
    return client
