from __future__ import annotations

import asyncio
import os
from functools import lru_cache
from typing import Optional

from loguru import logger
from langchain_openai import ChatOpenAI


class MissingAPIKeyError(RuntimeError):
    """Raised when a chat is attempted without any OpenAI API key."""


@lru_cache(maxsize=32)
def _cached_chat(
    model: str,
    temperature: float,
    max_tokens: int,
    api_key: str,
    loop: Optional[asyncio.AbstractEventLoop] = None,
) -> ChatOpenAI:
    # The async HTTP pool is bound to the loop that first used it
    logger.debug(f"Initializing OpenAI chat model={model} temperature={temperature} max_tokens={max_tokens}")
    return ChatOpenAI(model=model, temperature=temperature, max_tokens=max_tokens, api_key=api_key)


def _current_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def get_openai_chat(
    model: str,
    temperature: float,
    max_tokens: int,
    api_key: Optional[str] = None,
) -> Optional[ChatOpenAI]:
    """Return a cached LangChain ChatOpenAI client for these parameters.

    Clients are cached per running event loop. Falls back to OPENAI_API_KEY
    when no explicit key is given. Returns None when neither is available.
    """
    key = api_key or os.getenv("OPENAI_API_KEY")
    if not key:
        logger.error("OPENAI_API_KEY not set; cannot initialize OpenAI chat client")
        return None
    return _cached_chat(model, temperature, max_tokens, key, _current_loop())
