"""Node definitions for the LangGraph workflow."""

import logging
from typing import Any, Callable, Dict

from ..extraction.places import PlaceExtractor
from ..extraction.schedule import extract_schedule
from .executor import ToolExecutor
from .selector import ToolSelector
from .state import AgentState
from .synthesizer import ResponseSynthesizer, extract_location

Node = Callable[[AgentState], Dict[str, Any]]


def make_select_tools_node(selector: ToolSelector) -> Node:
    def select_tools_node(state: AgentState) -> Dict[str, Any]:
        logging.info("--- Running Node: select_tools ---")
        utterance = state["utterance"]
        contents = [turn.content for turn in state.get("history", ())] + [utterance]
        selected = selector.select(utterance)
        location = extract_location(contents)
        logging.info(f"Selected tools: {list(selected)}; location context: {location}")
        return {"selected_tools": selected, "location": location}
    return select_tools_node


def make_execute_tools_node(executor: ToolExecutor) -> Node:
    def execute_tools_node(state: AgentState) -> Dict[str, Any]:
        logging.info("--- Running Node: execute_tools ---")
        results = executor.execute(state.get("selected_tools", ()), state["utterance"], state.get("location"))
        failed = [r.tool_name for r in results if not r.success]
        if failed:
            logging.warning(f"Tools failed and will be reported as unavailable: {failed}")
        return {"tool_results": results}
    return execute_tools_node


def make_synthesize_node(synthesizer: ResponseSynthesizer) -> Node:
    def synthesize_node(state: AgentState) -> Dict[str, Any]:
        """Backend failures propagate; the agent turns them into an apology."""
        logging.info("--- Running Node: synthesize_response ---")
        reply = synthesizer.synthesize(
            state["utterance"],
            state.get("history", ()),
            state.get("tool_results", []),
            location=state.get("location"),
            current_schedule=state.get("current_schedule"),
        )
        return {"reply": reply}
    return synthesize_node


def make_extract_places_node(extractor: PlaceExtractor) -> Node:
    def extract_places_node(state: AgentState) -> Dict[str, Any]:
        logging.info("--- Running Node: extract_places ---")
        return {"suggestions": extractor.extract(state["reply"], state.get("location"))}
    return extract_places_node


def extract_schedule_node(state: AgentState) -> Dict[str, Any]:
    logging.info("--- Running Node: extract_schedule ---")
    schedule = extract_schedule(state["reply"])
    logging.info(f"Parsed {len(schedule)} scheduled activities.")
    return {"schedule": schedule}
