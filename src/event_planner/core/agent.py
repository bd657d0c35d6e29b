"""
Event planning agent: the top-level handler for one chat message.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Union

from langchain_core.tools import BaseTool

from ..config.settings import APOLOGY_MESSAGE
from ..extraction.places import PlaceExtractor
from ..utils.places_client import PlacesClient
from ..utils.tools import build_tools
from .completion import CompletionClient
from .executor import ToolExecutor, ToolRegistry
from .graph import compile_graph
from .models import AgentResponse, ChatRequest
from .selector import DEFAULT_SELECTION_RULES, ToolSelector
from .synthesizer import ResponseSynthesizer


class EventPlanningAgent:
    """
    Classifies the message, runs tools, asks the backend for a reply and
    mines it for place suggestions and a schedule.

    Holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(self, tools: Optional[Iterable[BaseTool]] = None,
                 completion_client: Optional[CompletionClient] = None,
                 places_client: Optional[PlacesClient] = None,
                 selection_rules=DEFAULT_SELECTION_RULES):
        self.places_client = places_client or PlacesClient()
        self.registry = ToolRegistry(tools if tools is not None else build_tools(self.places_client))
        self.selector = ToolSelector(self.registry.keys(), selection_rules)
        self.executor = ToolExecutor(self.registry)
        self.synthesizer = ResponseSynthesizer(self.registry, completion_client or CompletionClient())
        self.place_extractor = PlaceExtractor(self.places_client)
        self.app = compile_graph(self)

    def process_chat(self, request: Union[ChatRequest, Dict[str, Any]]) -> AgentResponse:
        """
        Answer one chat message.

        A malformed request dict raises InvalidRequestError. Any failure after
        that (backend down or misconfigured) is logged and answered with the
        fixed apology and no suggestions.
        """
        if not isinstance(request, ChatRequest):
            request = ChatRequest.from_dict(request)

        try:
            final_state = self.app.invoke({
                "utterance": request.message,
                "history": request.previous_messages,
                "current_schedule": request.current_schedule,
            })
        except Exception as e:
            logging.error(f"Event {request.event_id}: agent failed: {e}", exc_info=True)
            return AgentResponse(message=APOLOGY_MESSAGE, suggestions=[])

        schedule = final_state.get("schedule") or None
        return AgentResponse(
            message=final_state["reply"],
            suggestions=final_state.get("suggestions", []),
            schedule=schedule,
        )
