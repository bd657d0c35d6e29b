"""
Unit tests for prompt construction and location extraction.
"""

from datetime import datetime
from unittest.mock import Mock

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_core.tools import tool

from event_planner.core.completion import CompletionClient
from event_planner.core.executor import ToolRegistry
from event_planner.core.models import ConversationTurn, PlannedActivitySlot, ToolInvocationResult
from event_planner.core.synthesizer import ResponseSynthesizer, extract_location


@tool
def search_places(utterance: str) -> list:
    """Search for places and venues"""
    return []


class TestExtractLocation:

    @pytest.mark.parametrize("message,expected", [
        ("Plan a birthday party in downtown for 10 people, 2:00pm - cake", "downtown"),
        ("Find restaurants near downtown", "downtown"),
        ("Something around the old harbor!", "the old harbor"),
        ("Let's meet at Union Square tomorrow", "union square"),
    ])
    def test_single_message(self, message, expected):
        assert extract_location([message]) == expected

    def test_newest_message_wins(self):
        assert extract_location(["dinner in boston", "actually in chicago"]) == "chicago"

    def test_falls_back_to_older_messages(self):
        assert extract_location(["a picnic in central park", "make it 3pm"]) == "central park"

    def test_times_are_not_places(self):
        assert extract_location(["see you at 2pm"]) is None

    def test_no_location(self):
        assert extract_location(["what should we do?"]) is None

    def test_phrase_of_only_connectives_is_not_a_place(self):
        assert extract_location(["I am in for it"]) is None
        assert extract_location(["a picnic in central park", "count me in for it"]) == "central park"


class TestResponseSynthesizer:

    @pytest.fixture
    def client(self):
        client = Mock(spec=CompletionClient)
        client.complete.return_value = "Here is your plan."
        return client

    @pytest.fixture
    def synthesizer(self, client):
        return ResponseSynthesizer(ToolRegistry([search_places]), client)

    def test_system_prompt_lists_tools_and_styles(self, synthesizer):
        prompt = synthesizer.build_system_prompt("downtown")

        assert "- search_places: Search for places and venues" in prompt
        assert "Focused" in prompt
        assert "Brainstorming" in prompt
        assert "3-4 short options" in prompt
        assert "never mention tools" in prompt
        assert "Current location context: downtown" in prompt

    def test_system_prompt_without_location(self, synthesizer):
        assert "Current location context: not specified" in synthesizer.build_system_prompt()

    def test_system_prompt_includes_current_schedule(self, synthesizer):
        slot = PlannedActivitySlot(
            id="a1", title="Brunch", description="Brunch",
            start_time=datetime(2024, 5, 11, 10, 0), end_time=datetime(2024, 5, 11, 11, 0),
        )

        prompt = synthesizer.build_system_prompt(current_schedule=[slot])

        assert "Current schedule:\n- 10:00 Brunch" in prompt

    def test_tool_results_precede_user_message(self, synthesizer, client):
        history = [
            ConversationTurn(role="user", content="hi"),
            ConversationTurn(role="assistant", content="hello!"),
        ]
        results = [
            ToolInvocationResult.ok("search_places", [{"name": "Luigi's"}]),
            ToolInvocationResult.failed("get_weather", "Execution failed: 503"),
        ]

        reply = synthesizer.synthesize("find pizza", history, results, location="soho")

        assert reply == "Here is your plan."
        system_prompt, messages, user_message = client.complete.call_args[0]
        assert user_message == "find pizza"
        assert "Current location context: soho" in system_prompt
        assert isinstance(messages[0], HumanMessage)
        assert isinstance(messages[1], AIMessage)
        assert isinstance(messages[-1], SystemMessage)
        assert '[search_places] [{"name": "Luigi\'s"}]' in messages[-1].content
        assert "[get_weather] unavailable: Execution failed: 503" in messages[-1].content

    def test_no_tool_results_no_block(self, synthesizer, client):
        synthesizer.synthesize("hi", [], [])

        _, messages, _ = client.complete.call_args[0]
        assert messages == []

    def test_history_is_bounded(self, synthesizer, client):
        history = [ConversationTurn(role="user", content=f"msg {i}") for i in range(15)]

        synthesizer.synthesize("hi", history, [])

        _, messages, _ = client.complete.call_args[0]
        assert len(messages) == 10
        assert messages[0].content == "msg 5"

    def test_backend_errors_propagate(self, synthesizer, client):
        from event_planner.core.errors import BackendError

        client.complete.side_effect = BackendError("down")

        with pytest.raises(BackendError):
            synthesizer.synthesize("hi", [], [])
