from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger


ROOT = Path(__file__).resolve().parents[1]

DEFAULT_NAME = "Assistant"
DEFAULT_SYSTEM_PROMPT = "You are a helpful AI assistant."
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000


# Project-local .env first, then the working directory; never override the shell
for _env_path in (ROOT / ".env", Path.cwd() / ".env"):
    if _env_path.is_file():
        load_dotenv(dotenv_path=str(_env_path), override=False)
        break


@dataclass
class Settings:
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    prompts_dir: Path = ROOT / "prompts"
    log_level: str = "INFO"


def _env_number(name: str, cast, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"config | invalid {name}={raw!r}; using {default}")
        return default


def load_settings() -> Settings:
    """Snapshot the environment-driven settings.

    Env vars:
      - OPENAI_API_KEY (optional here; required to chat)
      - OPENAI_MODEL (default: gpt-3.5-turbo)
      - OPENAI_TEMPERATURE (default: 0.7)
      - OPENAI_MAX_TOKENS (default: 1000)
      - PROMPTS_DIR (default: <project>/prompts)
      - LOG_LEVEL (default: INFO)
    """
    prompts_dir = os.getenv("PROMPTS_DIR")
    return Settings(
        api_key=os.getenv("OPENAI_API_KEY") or None,
        model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
        temperature=_env_number("OPENAI_TEMPERATURE", float, DEFAULT_TEMPERATURE),
        max_tokens=_env_number("OPENAI_MAX_TOKENS", int, DEFAULT_MAX_TOKENS),
        prompts_dir=Path(prompts_dir) if prompts_dir else ROOT / "prompts",
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def setup_logging(level: Optional[str] = None) -> None:
    logger.remove()
    logger.add(
        sys.stdout,
        level=level or load_settings().log_level,
        colorize=True,
        format="{time:HH:mm:ss} | {level} | {message}",
    )
