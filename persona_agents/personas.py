from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from .config import load_settings


DEFAULT_TYPE = "coder"

SPECIALIZED_PERSONAS: Dict[str, Dict[str, str]] = {
    "coder": {
        "name": "Code Assistant",
        "system_prompt": (
            "You are an expert programmer. Help users with coding questions, debug issues,"
            " and write clean, efficient code. Always explain your reasoning and provide"
            " examples when helpful."
        ),
    },
    "writer": {
        "name": "Writing Assistant",
        "system_prompt": (
            "You are a professional writing assistant. Help users improve their writing,"
            " create content, and communicate effectively. Focus on clarity, style, and"
            " engagement."
        ),
    },
    "analyst": {
        "name": "Data Analyst",
        "system_prompt": (
            "You are a data analyst and researcher. Help users understand data, create"
            " insights, and make data-driven decisions. Provide clear explanations and"
            " actionable recommendations."
        ),
    },
}


def _load_prompt_override(persona_type: str, prompts_dir: Optional[Path] = None) -> Optional[str]:
    base_dir = prompts_dir or load_settings().prompts_dir
    path = Path(base_dir) / f"{persona_type}_prompt.md"
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.warning(f"Falling back to built-in {persona_type} prompt: {e}")
        return None
    return text or None


def resolve_type(persona_type: str) -> str:
    if persona_type in SPECIALIZED_PERSONAS:
        return persona_type
    logger.warning(f"persona_unknown | type={persona_type!r} | falling back to {DEFAULT_TYPE}")
    return DEFAULT_TYPE


def specialized_config(persona_type: str, **overrides: Any) -> Dict[str, Any]:
    """Build the agent config for a specialized persona.

    Unknown types resolve to the coder persona. A ``<type>_prompt.md`` file in
    PROMPTS_DIR replaces the built-in system prompt, and explicit overrides
    win over both.
    """
    resolved = resolve_type(persona_type)
    config: Dict[str, Any] = dict(SPECIALIZED_PERSONAS[resolved])
    prompt = _load_prompt_override(resolved)
    if prompt:
        config["system_prompt"] = prompt
    config.update({k: v for k, v in overrides.items() if v is not None})
    return config
