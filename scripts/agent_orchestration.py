from __future__ import annotations

import asyncio
import os
import time

from loguru import logger

from persona_agents import AgentManager
from persona_agents.config import setup_logging
from persona_agents.formatting import format_exchange


# ==========================
# Configuration (edit here)
# ==========================
PROJECT_BRIEF = (
    "We need to build a simple task management app for small teams. The app should allow users"
    " to create, assign, and track tasks with due dates and priorities."
)
ROUNDS = 2
KICKOFF = (
    "Let's discuss how we can integrate our different perspectives on this task management app."
    " What potential challenges do you see?"
)


def build_team(manager: AgentManager) -> None:
    manager.create_agent(
        "pm",
        name="Product Manager",
        system_prompt=(
            "You are an experienced product manager. Focus on user needs, business requirements,"
            " and project planning. Keep responses practical and business-oriented."
        ),
        temperature=0.6,
    )
    manager.create_specialized_agent(
        "dev",
        "coder",
        name="Senior Developer",
        system_prompt=(
            "You are a senior software developer. Focus on technical implementation, best practices,"
            " and code architecture. Provide detailed technical guidance."
        ),
        temperature=0.4,
    )
    manager.create_agent(
        "designer",
        name="UX Designer",
        system_prompt=(
            "You are a UX/UI designer. Focus on user experience, interface design, and usability."
            " Think about user workflows and visual design principles."
        ),
        temperature=0.7,
    )


async def main() -> None:
    setup_logging()
    if not os.getenv("OPENAI_API_KEY"):
        logger.warning("OPENAI_API_KEY not set")
        return

    manager = AgentManager()
    build_team(manager)
    logger.info("Team created: Product Manager, Senior Developer, UX Designer")

    team_inputs = [
        ("pm", f"{PROJECT_BRIEF} As the product manager, what are the key features and requirements we should prioritize?"),
        ("designer", "Based on this task management app project, what should be the main user flows and interface considerations?"),
        ("dev", "For this task management app, what would be the recommended technical architecture and technology stack?"),
    ]
    for agent_id, question in team_inputs:
        agent = manager.get_agent(agent_id)
        try:
            response = await manager.chat_with_agent(agent_id, question)
        except Exception as e:
            logger.error(f"Error getting input from {agent.name}: {e}")
            continue
        print(f"{agent.name} Input:\n{response}\n---\n")

    t0 = time.perf_counter()
    collaboration = await manager.orchestrate_conversation(["pm", "designer", "dev"], KICKOFF, ROUNDS)
    logger.info(f"Orchestration completed in {time.perf_counter() - t0:.2f}s with {len(collaboration)} exchanges")
    for exchange in collaboration:
        print(format_exchange(exchange) + "\n")


if __name__ == "__main__":
    asyncio.run(main())
