"""Unit tests for the cached ChatOpenAI factory."""

import asyncio
from unittest.mock import patch

from persona_agents.llm import get_openai_chat


def test_returns_none_without_key(log_messages):
    assert get_openai_chat("gpt-3.5-turbo", 0.7, 1000) is None
    assert any("OPENAI_API_KEY not set" in m for m in log_messages)


def test_uses_env_key_and_caches(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    with patch("persona_agents.llm.ChatOpenAI") as chat_cls:
        first = get_openai_chat("gpt-3.5-turbo", 0.7, 1000)
        second = get_openai_chat("gpt-3.5-turbo", 0.7, 1000)

    assert first is second
    chat_cls.assert_called_once_with(
        model="gpt-3.5-turbo", temperature=0.7, max_tokens=1000, api_key="sk-env"
    )


def test_explicit_key_and_parameters_get_separate_clients(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    with patch("persona_agents.llm.ChatOpenAI") as chat_cls:
        get_openai_chat("gpt-3.5-turbo", 0.7, 1000)
        get_openai_chat("gpt-3.5-turbo", 0.7, 1000, api_key="sk-agent")
        get_openai_chat("gpt-4", 0.5, 500, api_key="sk-agent")

    assert chat_cls.call_count == 3
    assert chat_cls.call_args_list[1].kwargs["api_key"] == "sk-agent"
    assert chat_cls.call_args_list[2].kwargs["model"] == "gpt-4"


def test_each_event_loop_gets_its_own_client(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

    async def fetch():
        return get_openai_chat("gpt-3.5-turbo", 0.7, 1000), get_openai_chat("gpt-3.5-turbo", 0.7, 1000)

    with patch("persona_agents.llm.ChatOpenAI", side_effect=lambda **kw: object()):
        first_a, first_b = asyncio.run(fetch())
        second_a, _ = asyncio.run(fetch())

    assert first_a is first_b
    assert first_a is not second_a
