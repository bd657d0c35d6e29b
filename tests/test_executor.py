"""
Unit tests for the tool registry and the concurrent executor.
"""

import threading
from typing import Optional

import pytest
import requests
from langchain_core.tools import tool

from event_planner.core.executor import ToolExecutor, ToolRegistry

# Both tools wait for each other: this only completes if they run concurrently.
_barrier = threading.Barrier(2, timeout=5)


@tool
def first(utterance: str, location: Optional[str] = None) -> str:
    """First test tool."""
    _barrier.wait()
    return f"first:{utterance}"


@tool
def second(utterance: str, location: Optional[str] = None) -> str:
    """Second test tool."""
    _barrier.wait()
    return f"second:{location}"


@tool
def upstream_down(utterance: str, location: Optional[str] = None) -> str:
    """Tool whose provider answers with a 503."""
    response = requests.Response()
    response.status_code = 503
    response.url = "https://provider.test/api"
    response.raise_for_status()
    return "unreachable"


@tool
def echo(utterance: str, location: Optional[str] = None) -> str:
    """Echo the utterance back."""
    return utterance


class TestToolRegistry:

    def test_lookup_and_order(self):
        registry = ToolRegistry([echo, first])

        assert list(registry) == ["echo", "first"]
        assert registry["echo"] is echo
        assert len(registry) == 2

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            ToolRegistry([echo, echo])

    def test_is_immutable(self):
        registry = ToolRegistry([echo])

        with pytest.raises(TypeError):
            registry["new"] = echo

    def test_describe_lists_tools(self):
        description = ToolRegistry([echo]).describe()

        assert description == "- echo: Echo the utterance back."


class TestToolExecutor:

    @pytest.fixture
    def executor(self):
        return ToolExecutor(ToolRegistry([first, second, upstream_down, echo]))

    def test_runs_concurrently_and_keeps_order(self, executor):
        _barrier.reset()

        results = executor.execute(["second", "first"], "party", "downtown")

        assert [r.tool_name for r in results] == ["second", "first"]
        assert all(r.success for r in results)
        assert results[0].payload == "second:downtown"
        assert results[1].payload == "first:party"

    def test_failure_is_isolated(self, executor):
        results = executor.execute(["upstream_down", "echo"], "hello")

        assert results[0].success is False
        assert "503" in results[0].error
        assert results[0].payload is None
        assert results[1].success is True
        assert results[1].payload == "hello"

    def test_unknown_tool(self, executor):
        results = executor.execute(["missing"], "hello")

        assert results[0].success is False
        assert "missing" in results[0].error

    def test_no_tools(self, executor):
        assert executor.execute([], "hello") == []

    def test_prompt_blocks(self, executor):
        ok, failed = executor.execute(["echo", "upstream_down"], "hi")

        assert ok.as_prompt_block() == '[echo] "hi"'
        assert failed.as_prompt_block().startswith("[upstream_down] unavailable:")
