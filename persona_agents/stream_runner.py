from __future__ import annotations

import asyncio
from typing import Any, Dict, Generator, List, Sequence

from loguru import logger

from .manager import AgentManager


def run_orchestration_stream(
    manager: AgentManager,
    agent_ids: Sequence[str],
    initial_message: str,
    max_rounds: int = 3,
) -> Generator[Dict[str, Any], None, None]:
    """Synchronous streaming runner for UI. Yields events as the orchestration progresses.

    Yields dicts of shape:
      - {type: 'start', data: {agent_ids, max_rounds}}
      - {type: 'turn', data: {round, agent_id, agent_name, message, response, timestamp}}
      - {type: 'error', data: {round, agent_id, error}}
      - {type: 'end', data: {conversation}}
    """
    ids = list(agent_ids)
    logger.info(f"ui_orchestration_start | agents={ids} | max_rounds={max_rounds}")
    yield {"type": "start", "data": {"agent_ids": ids, "max_rounds": max_rounds}}

    conversation: List[Dict[str, Any]] = []
    loop = asyncio.new_event_loop()
    events = manager.iter_conversation(ids, initial_message, max_rounds)
    try:
        while True:
            try:
                event = loop.run_until_complete(events.__anext__())
            except StopAsyncIteration:
                break
            if event["type"] == "turn":
                conversation.append(event["data"])
            yield event
    finally:
        loop.run_until_complete(events.aclose())
        loop.close()

    logger.info(f"ui_orchestration_end | exchanges={len(conversation)}")
    yield {"type": "end", "data": {"conversation": conversation}}
