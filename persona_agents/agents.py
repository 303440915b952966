from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from loguru import logger
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from .config import DEFAULT_NAME, DEFAULT_SYSTEM_PROMPT, load_settings
from .llm import MissingAPIKeyError, get_openai_chat
from .personas import specialized_config


_ROLE_MESSAGES = {
    "user": HumanMessage,
    "assistant": AIMessage,
}


class Agent:
    """A persona bound to an OpenAI chat model, with an in-memory transcript.

    Any field left as None takes its default from the environment settings
    (OPENAI_MODEL, OPENAI_TEMPERATURE, OPENAI_MAX_TOKENS, OPENAI_API_KEY).
    No client is created until the first chat.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        api_key: Optional[str] = None,
    ) -> None:
        settings = load_settings()
        self.name = name or DEFAULT_NAME
        self.system_prompt = system_prompt or DEFAULT_SYSTEM_PROMPT
        self.model = model or settings.model
        self.max_tokens = max_tokens if max_tokens is not None else settings.max_tokens
        self.temperature = temperature if temperature is not None else settings.temperature
        self.api_key = api_key or settings.api_key
        self.conversation_history: List[Dict[str, str]] = []

    def __repr__(self) -> str:
        return f"Agent(name={self.name!r}, model={self.model!r}, turns={len(self.conversation_history)})"

    def build_messages(self) -> List[BaseMessage]:
        messages: List[BaseMessage] = [SystemMessage(content=self.system_prompt)]
        for entry in self.conversation_history:
            messages.append(_ROLE_MESSAGES[entry["role"]](content=entry["content"]))
        return messages

    async def chat(
        self,
        message: str,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Send a user message and return the assistant's reply.

        Per-call options override the agent's parameters for this call only.
        On failure the user turn stays in the history and the error propagates.
        """
        self.conversation_history.append({"role": "user", "content": message})
        mdl = model or self.model
        try:
            llm = get_openai_chat(
                model=mdl,
                temperature=temperature if temperature is not None else self.temperature,
                max_tokens=max_tokens if max_tokens is not None else self.max_tokens,
                api_key=self.api_key,
            )
            if llm is None:
                raise MissingAPIKeyError(
                    "OpenAI client not initialized; set OPENAI_API_KEY or pass api_key"
                )
            t0 = time.perf_counter()
            result = await llm.ainvoke(self.build_messages())
            dt = time.perf_counter() - t0
        except Exception as e:
            logger.error(f"agent_chat_failed | name={self.name} model={mdl} | {e}")
            raise

        text = result.content or ""
        logger.info(f"llm_call | name={self.name} model={mdl} dt={dt:.2f}s")
        self.conversation_history.append({"role": "assistant", "content": text})
        return text

    def clear_history(self) -> None:
        self.conversation_history = []

    def get_history(self) -> List[Dict[str, str]]:
        return [dict(entry) for entry in self.conversation_history]

    def set_system_prompt(self, prompt: str) -> None:
        self.system_prompt = prompt

    @classmethod
    def create_specialized(cls, persona_type: str, **config: Any) -> "Agent":
        """Create an agent from the specialized persona table (coder, writer, analyst).

        Unknown types fall back to the coder persona; ``config`` overrides any field.
        """
        return cls(**specialized_config(persona_type, **config))
