from __future__ import annotations

import asyncio
import os

from loguru import logger

from persona_agents import AgentManager
from persona_agents.config import setup_logging


DEMONSTRATIONS = [
    ("coder", "Can you write a simple Python function to calculate fibonacci numbers?"),
    ("writer", "Write a brief, engaging introduction for a blog post about artificial intelligence."),
    ("analyst", "What are the key metrics I should track for a SaaS business?"),
]


async def main() -> None:
    setup_logging()
    if not os.getenv("OPENAI_API_KEY"):
        logger.warning("OPENAI_API_KEY not set")
        return

    manager = AgentManager()
    for persona_type, _ in DEMONSTRATIONS:
        agent = manager.create_specialized_agent(persona_type, persona_type)
        logger.info(f"Created: {agent.name}")

    for agent_id, question in DEMONSTRATIONS:
        agent = manager.get_agent(agent_id)
        print(f"{agent.name} | Question: {question}")
        try:
            response = await manager.chat_with_agent(agent_id, question)
        except Exception as e:
            logger.error(f"Error with {agent_id}: {e}")
            continue
        print(f"Response: {response}\n---\n")

    # Switching the current agent
    for agent_id, question in (
        ("coder", "What programming language would you recommend for beginners?"),
        ("writer", "How can I improve my writing style?"),
    ):
        manager.set_current_agent(agent_id)
        print(f"Current agent: {manager.current_agent.name}")
        try:
            response = await manager.chat(question)
        except Exception as e:
            logger.error(f"Error with current agent {agent_id}: {e}")
            continue
        print(f"Response: {response}\n")

    print(f"Available agents: {', '.join(manager.get_agent_ids())}")


if __name__ == "__main__":
    asyncio.run(main())
