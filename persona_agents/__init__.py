"""
Persona agents over the OpenAI chat API.

Modules:
- agents: Agent persona with an in-memory transcript
- manager: AgentManager registry + round-robin orchestration
- personas: specialized persona table (coder, writer, analyst)
- stream_runner: synchronous event stream for UIs
- llm: cached ChatOpenAI client via LangChain
- team: team assembly shared by the CLI and the UI
- config: env/.env settings and logging setup
"""

from .agents import Agent
from .llm import MissingAPIKeyError
from .manager import AgentManager, AgentNotFoundError, NoCurrentAgentError

__version__ = "0.1.0"

__all__ = [
    "Agent",
    "AgentManager",
    "AgentNotFoundError",
    "NoCurrentAgentError",
    "MissingAPIKeyError",
    "__version__",
]
