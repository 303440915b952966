from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from typing import Any, Dict, List

from loguru import logger

from persona_agents import AgentManager
from persona_agents.config import setup_logging
from persona_agents.personas import SPECIALIZED_PERSONAS
from persona_agents.team import build_team as assemble_team


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a round-robin conversation between persona agents")
    p.add_argument("message", type=str, help="Initial message handed to the first agent")
    p.add_argument("--rounds", type=int, default=3, help="Number of rounds over the agent list")
    p.add_argument(
        "--team",
        type=str,
        nargs="+",
        choices=sorted(SPECIALIZED_PERSONAS),
        default=["coder", "writer", "analyst"],
        help="Specialized personas to use, in speaking order",
    )
    p.add_argument("--team-json", type=str, help="Path to JSON list of agent configs (each with an 'id')")
    p.add_argument("--model", type=str, help="Model override applied to every agent")
    p.add_argument("--temperature", type=float, help="Temperature override applied to every agent")
    p.add_argument("--log-level", type=str, default=None, help="Log level (default: LOG_LEVEL or INFO)")
    return p.parse_args()


def load_json_file(path: str) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def build_team(manager: AgentManager, args: argparse.Namespace) -> List[str]:
    overrides = {"model": args.model, "temperature": args.temperature}
    if args.team_json:
        return assemble_team(manager, custom_agents=load_json_file(args.team_json), **overrides)
    return assemble_team(manager, args.team, **overrides)


async def main() -> int:
    args = parse_args()
    setup_logging(args.log_level)

    if not os.getenv("OPENAI_API_KEY"):
        logger.warning("OPENAI_API_KEY not set; create a .env with OPENAI_API_KEY=... to run")
        return 1

    manager = AgentManager()
    try:
        ids = build_team(manager, args)
    except ValueError as e:
        logger.error(f"Invalid team: {e}")
        return 2
    conversation = await manager.orchestrate_conversation(ids, args.message, args.rounds)
    print(json.dumps(conversation, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
