from __future__ import annotations

from typing import Any, Dict


def snippet(text: str | None, limit: int = 100) -> str:
    raw = text or ""
    return raw if len(raw) <= limit else raw[:limit] + "..."


def one_line(text: str | None) -> str:
    return " ".join((text or "").split())


def format_exchange(exchange: Dict[str, Any], limit: int = 100) -> str:
    """Render one orchestration exchange as a printable block."""
    return (
        f"Round {exchange.get('round')} - {exchange.get('agent_name')}:\n"
        f"Input: {snippet(exchange.get('message'), limit)}\n"
        f"Response: {exchange.get('response', '')}"
    )
