from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .manager import AgentManager


def build_team(
    manager: AgentManager,
    persona_types: Iterable[str] = (),
    custom_agents: Iterable[Dict[str, Any]] = (),
    **overrides: Optional[Any],
) -> List[str]:
    """Register specialized personas, then custom agent configs, and return the speaking order.

    A custom config needs an ``id`` and may name a persona ``type``. Overrides
    that are not None apply to every agent. Raises ValueError when an id is
    already taken.
    """
    extra = {k: v for k, v in overrides.items() if v is not None}
    ids: List[str] = []

    def _claim(agent_id: str) -> None:
        if agent_id in ids or manager.get_agent(agent_id) is not None:
            raise ValueError(f"Agent id '{agent_id}' is already in the team")
        ids.append(agent_id)

    for persona_type in persona_types:
        _claim(persona_type)
        manager.create_specialized_agent(persona_type, persona_type, **extra)
    for entry in custom_agents:
        cfg = dict(entry)
        agent_id = cfg.pop("id")
        persona_type = cfg.pop("type", None)
        cfg.update(extra)
        _claim(agent_id)
        if persona_type:
            manager.create_specialized_agent(agent_id, persona_type, **cfg)
        else:
            manager.create_agent(agent_id, **cfg)
    return ids
