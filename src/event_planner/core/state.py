"""State definitions for the event planning pipeline."""

from typing import TypedDict, Sequence, Optional, List, Tuple

from .models import ConversationTurn, PlaceCandidate, PlannedActivitySlot, ToolInvocationResult


class AgentState(TypedDict, total=False):
    """State for one chat request; nothing survives past the request."""
    # Inputs supplied by the caller
    utterance: str
    history: Sequence[ConversationTurn]
    current_schedule: Optional[Sequence[PlannedActivitySlot]]

    # Location phrase mined from the conversation, if any
    location: Optional[str]

    selected_tools: Tuple[str, ...]
    tool_results: List[ToolInvocationResult]

    # Raw backend text
    reply: str

    suggestions: List[PlaceCandidate]
    schedule: List[PlannedActivitySlot]
