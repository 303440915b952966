"""Walk through the Agent/AgentManager object model without calling the API."""

from __future__ import annotations

from persona_agents import Agent, AgentManager


def main() -> None:
    agent = Agent(
        name="Demo Agent",
        system_prompt="You are a helpful assistant for demonstrations.",
        api_key="demo-key",
    )
    print("1. Basic agent")
    print(f"   name={agent.name} model={agent.model} temperature={agent.temperature} max_tokens={agent.max_tokens}")
    print(f"   system prompt: {agent.system_prompt}\n")

    print("2. Conversation history")
    print(f"   initial length: {len(agent.get_history())}")
    agent.conversation_history.extend(
        [{"role": "user", "content": "Hello!"}, {"role": "assistant", "content": "Hi there!"}]
    )
    print(f"   after simulated turns: {len(agent.get_history())}")
    agent.clear_history()
    print(f"   after clear: {len(agent.get_history())}\n")

    print("3. Specialized agents")
    coder = Agent.create_specialized("coder", api_key="demo-key")
    writer = Agent.create_specialized("writer", api_key="demo-key")
    analyst = Agent.create_specialized("analyst", api_key="demo-key")
    for a in (coder, writer, analyst):
        print(f"   {a.name}")
    print()

    print("4. Agent manager")
    manager = AgentManager()
    manager.register_agent("basic", agent)
    manager.register_agent("coder", coder)
    manager.register_agent("writer", writer)
    print(f"   registered: {', '.join(manager.get_agent_ids())}")
    manager.set_current_agent("coder")
    print(f"   current agent: {manager.current_agent.name}")
    print(f"   retrieved: {manager.get_agent('writer').name}")
    print(f"   total agents: {len(manager.get_agent_ids())}")


if __name__ == "__main__":
    main()
