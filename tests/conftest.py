from unittest.mock import AsyncMock, MagicMock

import pytest

from tesser_mcp.config import Settings
from tesser_mcp.generator.code import CodeGenerator


def _echo_length(prompt: str, max_tokens: int | None = None) -> str:
    return f"prompt length: {len(prompt)}"


@pytest.fixture
def settings():
    return Settings(model="test-model", api_key="test-key", max_tokens=1234)


@pytest.fixture
def llm_client():
    """Stub collaborator that answers with the prompt length."""
    client = MagicMock()
    client.complete = AsyncMock(side_effect=_echo_length)
    return client


@pytest.fixture
def generator(settings, llm_client):
    return CodeGenerator(settings=settings, client=llm_client)
