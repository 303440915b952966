from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence

from loguru import logger

from .agents import Agent
from .formatting import one_line, snippet


class AgentNotFoundError(LookupError):
    pass


class NoCurrentAgentError(RuntimeError):
    pass


class AgentManager:
    """Registry of agents keyed by id, with a current agent and round-robin orchestration."""

    def __init__(self) -> None:
        self.agents: Dict[str, Agent] = {}
        self.current_agent: Optional[Agent] = None

    def register_agent(self, agent_id: str, agent: Agent) -> None:
        if not isinstance(agent, Agent):
            raise TypeError("Agent must be an instance of the Agent class")
        self.agents[agent_id] = agent
        logger.debug(f"agent_registered | id={agent_id} name={agent.name}")

    def create_agent(self, agent_id: str, **config: Any) -> Agent:
        agent = Agent(**config)
        self.register_agent(agent_id, agent)
        return agent

    def create_specialized_agent(self, agent_id: str, persona_type: str, **config: Any) -> Agent:
        agent = Agent.create_specialized(persona_type, **config)
        self.register_agent(agent_id, agent)
        return agent

    def get_agent(self, agent_id: str) -> Optional[Agent]:
        return self.agents.get(agent_id)

    def _require(self, agent_id: str) -> Agent:
        agent = self.get_agent(agent_id)
        if agent is None:
            raise AgentNotFoundError(f"Agent with id '{agent_id}' not found")
        return agent

    def set_current_agent(self, agent_id: str) -> None:
        self.current_agent = self._require(agent_id)

    async def chat(self, message: str, **options: Any) -> str:
        if self.current_agent is None:
            raise NoCurrentAgentError("No current agent set. Use set_current_agent() first.")
        return await self.current_agent.chat(message, **options)

    async def chat_with_agent(self, agent_id: str, message: str, **options: Any) -> str:
        agent = self._require(agent_id)
        return await agent.chat(message, **options)

    def get_agent_ids(self) -> List[str]:
        return list(self.agents.keys())

    def remove_agent(self, agent_id: str) -> bool:
        agent = self.agents.pop(agent_id, None)
        if agent is None:
            return False
        if self.current_agent is agent:
            self.current_agent = None
        return True

    def clear_agents(self) -> None:
        self.agents.clear()
        self.current_agent = None

    async def iter_conversation(
        self,
        agent_ids: Sequence[str],
        initial_message: str,
        max_rounds: int = 3,
    ) -> AsyncIterator[Dict[str, Any]]:
        """Run the round-robin loop, yielding ``turn`` and ``error`` events.

        Each successful response becomes the next agent's input. Unknown ids
        are skipped; a failing step is logged and leaves the message unchanged.
        """
        current_message = initial_message
        for round_no in range(1, max_rounds + 1):
            for agent_id in agent_ids:
                agent = self.get_agent(agent_id)
                if agent is None:
                    logger.warning(f"orchestration_skip | id={agent_id} round={round_no} | agent not registered")
                    continue
                try:
                    response = await agent.chat(current_message)
                except Exception as e:
                    logger.error(f"Error with agent {agent_id} | round={round_no} | {e}")
                    yield {"type": "error", "data": {"round": round_no, "agent_id": agent_id, "error": str(e)}}
                    continue
                exchange = {
                    "round": round_no,
                    "agent_id": agent_id,
                    "agent_name": agent.name,
                    "message": current_message,
                    "response": response,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                }
                logger.info(
                    f"orchestration_turn | round={round_no} id={agent_id} | "
                    f"msg='{one_line(snippet(response, 400))}'"
                )
                current_message = response
                yield {"type": "turn", "data": exchange}

    async def orchestrate_conversation(
        self,
        agent_ids: Sequence[str],
        initial_message: str,
        max_rounds: int = 3,
    ) -> List[Dict[str, Any]]:
        logger.info(f"orchestration_start | agents={list(agent_ids)} | max_rounds={max_rounds}")
        conversation: List[Dict[str, Any]] = []
        async for event in self.iter_conversation(agent_ids, initial_message, max_rounds):
            if event["type"] == "turn":
                conversation.append(event["data"])
        logger.info(f"orchestration_end | exchanges={len(conversation)}")
        return conversation
