from __future__ import annotations

import asyncio
import os

from loguru import logger

from persona_agents import Agent
from persona_agents.config import setup_logging
from persona_agents.formatting import snippet


# ==========================
# Configuration (edit here)
# ==========================
QUESTIONS = [
    "What is the capital of France?",
    "Can you explain what that city is famous for?",
    "Thank you for the information!",
]


async def main() -> None:
    setup_logging()
    if not os.getenv("OPENAI_API_KEY"):
        logger.warning("OPENAI_API_KEY not set; create a .env with OPENAI_API_KEY=your_api_key_here")
        return

    agent = Agent(
        name="Helper Bot",
        system_prompt="You are a friendly and helpful assistant. Keep responses concise but informative.",
        temperature=0.7,
    )
    logger.info(f"Agent created: {agent.name} | prompt={agent.system_prompt}")

    for question in QUESTIONS:
        print(f"User: {question}")
        try:
            response = await agent.chat(question)
        except Exception as e:
            logger.error(f"Error getting response: {e}")
            break
        print(f"{agent.name}: {response}\n")

    print("Conversation History:")
    for i, msg in enumerate(agent.get_history(), start=1):
        print(f"{i}. {msg['role']}: {snippet(msg['content'])}")


if __name__ == "__main__":
    asyncio.run(main())
