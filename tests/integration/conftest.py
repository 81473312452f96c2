from collections.abc import Callable, Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pdfsummary.api.app import create_app
from pdfsummary.config.settings import Settings


def _make_usage() -> MagicMock:
    usage = MagicMock()
    usage.prompt_tokens = 210
    usage.completion_tokens = 58
    usage.total_tokens = 268
    usage.total_time = 0.42
    usage.queue_time = 0.03
    return usage


@pytest.fixture()
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture()
def groq_sdk() -> Generator[MagicMock, None, None]:
    """Replace the OpenAI SDK client used for Groq with a mock.

    By default the mock answers with a summary and a full usage block.
    """
    mock_client = MagicMock()
    choice = MagicMock()
    choice.message.content = "The document greets the world."
    response = MagicMock()
    response.choices = [choice]
    response.usage = _make_usage()
    mock_client.chat.completions.create.return_value = response
    with patch(
        "pdfsummary.summarization.groq_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        yield mock_client


@pytest.fixture()
def make_client(
    upload_dir: Path, groq_sdk: MagicMock
) -> Callable[..., TestClient]:
    """Build a TestClient for an app configured with the given overrides."""

    def _make(**overrides: object) -> TestClient:
        settings = Settings(upload_dir=str(upload_dir), **overrides)
        app: FastAPI = create_app(settings)
        return TestClient(app)

    return _make


@pytest.fixture()
def client(make_client: Callable[..., TestClient]) -> TestClient:
    return make_client()
