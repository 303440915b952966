from __future__ import annotations

import json
import os
import time
from pathlib import Path

import streamlit as st
from loguru import logger

from persona_agents import AgentManager
from persona_agents.personas import SPECIALIZED_PERSONAS
from persona_agents.stream_runner import run_orchestration_stream
from persona_agents.team import build_team


ROOT = Path(__file__).resolve().parent
RESULTS_DIR = ROOT / "chat_results"
AVATARS = ["🟦", "🟩", "🟧", "🟪", "🟥"]


def parse_custom_agent(txt: str) -> dict | None:
    try:
        obj = json.loads(txt or "")
    except json.JSONDecodeError:
        return None
    if not isinstance(obj, dict):
        return None
    idv = obj.get("id")
    name = obj.get("name")
    prompt = obj.get("system_prompt")
    if all(isinstance(x, str) and x.strip() for x in (idv, name, prompt)):
        cfg = {"id": idv.strip(), "name": name.strip(), "system_prompt": prompt.strip()}
        if isinstance(obj.get("temperature"), (int, float)):
            cfg["temperature"] = float(obj["temperature"])
        return cfg
    return None


st.set_page_config(page_title="Persona Agents Orchestration", page_icon="🤖", layout="wide")

st.sidebar.title("Orchestration – Controls")
team = st.sidebar.multiselect(
    "Specialized personas (speaking order)",
    sorted(SPECIALIZED_PERSONAS),
    default=["coder", "writer", "analyst"],
)
st.sidebar.text("Optional custom agent JSON: id, name, system_prompt[, temperature]")
custom_json = st.sidebar.text_area(
    "Custom agent",
    placeholder='{"id":"pm","name":"Product Manager","system_prompt":"..."}',
    height=140,
)
rounds = st.sidebar.slider("Rounds", min_value=1, max_value=5, value=2, step=1)
model = st.sidebar.text_input("Model override", value="")
start_btn = st.sidebar.button("Start Conversation", type="primary")

st.title("Live Agent Round-Robin")
initial_message = st.text_area("Initial message", value="", height=100)
chat_area = st.container()
status_text = st.empty()

if start_btn:
    if not os.getenv("OPENAI_API_KEY"):
        st.sidebar.error("OPENAI_API_KEY not set")
        st.stop()
    if not initial_message.strip():
        st.sidebar.error("Provide an initial message")
        st.stop()

    manager = AgentManager()
    custom_agents: list[dict] = []
    if custom_json.strip():
        custom = parse_custom_agent(custom_json)
        if not custom:
            st.sidebar.error("Invalid custom agent JSON. Expect non-empty id, name, system_prompt.")
            st.stop()
        custom_agents.append(custom)
    try:
        agent_ids = build_team(manager, team, custom_agents, model=model.strip() or None)
    except ValueError as e:
        st.sidebar.error(f"{e}; pick a different custom agent id.")
        st.stop()
    if not agent_ids:
        st.sidebar.error("Select at least one agent")
        st.stop()

    avatars = {aid: AVATARS[i % len(AVATARS)] for i, aid in enumerate(agent_ids)}
    with chat_area:
        st.write(f"Participants: {' → '.join(manager.get_agent(a).name for a in agent_ids)}")
        with st.chat_message("user"):
            st.markdown(initial_message)
        t0 = time.perf_counter()
        for event in run_orchestration_stream(manager, agent_ids, initial_message, rounds):
            if event["type"] == "turn":
                d = event["data"]
                with st.chat_message("assistant", avatar=avatars[d["agent_id"]]):
                    st.markdown(
                        f"**{d['agent_name']}**\n\n{d['response']}\n\n"
                        f"<span style='color:gray;font-size:smaller'>[round {d['round']}] {d['timestamp']}</span>",
                        unsafe_allow_html=True,
                    )
            elif event["type"] == "error":
                d = event["data"]
                st.warning(f"Round {d['round']} – {d['agent_id']} failed: {d['error']}")
            elif event["type"] == "end":
                conversation = event["data"]["conversation"]
                status_text.success(
                    f"Completed in {time.perf_counter() - t0:.1f}s | {len(conversation)} exchanges"
                )
                RESULTS_DIR.mkdir(parents=True, exist_ok=True)
                out_path = RESULTS_DIR / f"{'__'.join(agent_ids)}__{int(time.time())}.json"
                out_path.write_text(json.dumps(conversation, ensure_ascii=False, indent=2), encoding="utf-8")
                logger.info(f"Wrote conversation to {out_path}")
else:
    st.info("Pick the team, enter a message and click Start Conversation")
