from persona_agents.formatting import format_exchange, one_line, snippet


def test_snippet_truncates_long_text():
    assert snippet("x" * 150) == "x" * 100 + "..."
    assert snippet("short") == "short"
    assert snippet(None) == ""


def test_one_line_collapses_whitespace():
    assert one_line("a\n  b\tc ") == "a b c"


def test_format_exchange():
    block = format_exchange(
        {"round": 2, "agent_name": "UX Designer", "message": "m" * 120, "response": "Looks good"}
    )

    assert block.splitlines() == [
        "Round 2 - UX Designer:",
        "Input: " + "m" * 100 + "...",
        "Response: Looks good",
    ]
