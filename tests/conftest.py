"""Shared fixtures: isolated env, a mocked LangChain chat client, and captured loguru output."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.messages import AIMessage
from loguru import logger

from persona_agents.llm import _cached_chat


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "OPENAI_API_KEY",
        "OPENAI_BASE_URL",
        "OPENAI_MODEL",
        "OPENAI_TEMPERATURE",
        "OPENAI_MAX_TOKENS",
        "PROMPTS_DIR",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    _cached_chat.cache_clear()
    yield
    _cached_chat.cache_clear()


@pytest.fixture
def mock_llm():
    """Patch the client factory used by Agent.chat with a mock ChatOpenAI."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content="Mock response from OpenAI"))
    with patch("persona_agents.agents.get_openai_chat", return_value=llm) as factory:
        llm.factory = factory
        yield llm


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
