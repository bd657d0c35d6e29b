"""LangGraph workflow definition for the event planning agent."""

import logging
from typing import Any, TYPE_CHECKING

from langgraph.graph import StateGraph, END

from .state import AgentState
from .nodes import (
    extract_schedule_node,
    make_execute_tools_node,
    make_extract_places_node,
    make_select_tools_node,
    make_synthesize_node,
)

if TYPE_CHECKING:
    from .agent import EventPlanningAgent


def create_graph(agent: "EventPlanningAgent") -> StateGraph:
    """Creates the linear select -> execute -> synthesize -> extract workflow."""
    workflow = StateGraph(AgentState)

    # Add nodes
    workflow.add_node("select_tools", make_select_tools_node(agent.selector))
    workflow.add_node("execute_tools", make_execute_tools_node(agent.executor))
    workflow.add_node("synthesize_response", make_synthesize_node(agent.synthesizer))
    workflow.add_node("extract_places", make_extract_places_node(agent.place_extractor))
    workflow.add_node("extract_schedule", extract_schedule_node)

    # Define edges
    workflow.set_entry_point("select_tools")
    workflow.add_edge("select_tools", "execute_tools")
    workflow.add_edge("execute_tools", "synthesize_response")
    workflow.add_edge("synthesize_response", "extract_places")
    workflow.add_edge("extract_places", "extract_schedule")
    workflow.add_edge("extract_schedule", END)

    return workflow


def compile_graph(agent: "EventPlanningAgent") -> Any:
    """Compiles and returns the LangGraph application."""
    app = create_graph(agent).compile()
    logging.info("Event planning graph compiled successfully.")
    return app
