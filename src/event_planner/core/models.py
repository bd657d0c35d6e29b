"""
Pydantic models for the chat request/response contract.
Also holds the tool result record passed between the executor and the synthesizer.
"""

import json
from datetime import datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, Literal, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_serializer, model_validator
from pydantic.alias_generators import to_camel

from .errors import InvalidRequestError


# ---------------------------------------------------------------------------
# Wire schema
# ---------------------------------------------------------------------------
class WireModel(BaseModel):
    """Immutable model read from and written to camelCase JSON."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ConversationTurn(WireModel):
    """One message of the event conversation, supplied by the caller."""

    # Stored messages carry their role under "type"
    role: Literal["user", "assistant"] = Field(validation_alias=AliasChoices("role", "type"))
    content: str
    timestamp: Optional[datetime] = None


class Coordinates(WireModel):
    lat: float
    lng: float


class PlaceCandidate(WireModel):
    """A venue resolved through the places provider."""

    id: str
    name: str
    address: str
    coordinates: Coordinates
    rating: Optional[float] = None
    price_level: Optional[int] = None
    photo_url: Optional[str] = None
    categories: FrozenSet[str] = frozenset()

    @field_serializer("categories")
    def _sorted_categories(self, categories: FrozenSet[str]):
        return sorted(categories)


class ActivityCategory(Enum):
    RESTAURANT = "restaurant"
    ATTRACTION = "attraction"
    ACCOMMODATION = "accommodation"
    TRANSPORTATION = "transportation"
    CUSTOM = "custom"


class PlannedActivitySlot(WireModel):
    """A timed activity, mined from the assistant's reply or supplied as the current schedule."""

    id: str
    title: str
    description: str = ""
    start_time: datetime
    end_time: datetime
    category: ActivityCategory = Field(
        ActivityCategory.ATTRACTION,
        validation_alias=AliasChoices("category", "type"),
        serialization_alias="category",
    )


class ChatRequest(WireModel):
    """Input contract: the new message plus caller-supplied context."""

    message: str = Field(..., min_length=1, description="The user's new message")
    event_id: str = Field(..., min_length=1, description="Event the conversation belongs to")
    previous_messages: Tuple[ConversationTurn, ...] = ()
    current_schedule: Optional[Tuple[PlannedActivitySlot, ...]] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_context(cls, data: Any) -> Any:
        # The wire format nests history and schedule under "context"
        if not isinstance(data, dict) or "context" not in data:
            return data
        data = dict(data)
        context = data.pop("context") or {}
        if not isinstance(context, dict):
            raise ValueError("context must be an object")
        data["previousMessages"] = context.get("previousMessages") or ()
        data["currentSchedule"] = context.get("currentSchedule")
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "ChatRequest":
        """Validate a wire request; any malformed field raises InvalidRequestError."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidRequestError(f"Malformed chat request: {e}") from e


class AgentResponse(WireModel):
    """Output contract. ``schedule`` is None, and left out of the wire form, when the reply held no schedule."""

    message: str
    suggestions: Tuple[PlaceCandidate, ...] = ()
    schedule: Optional[Tuple[PlannedActivitySlot, ...]] = None


# ---------------------------------------------------------------------------
# Pipeline records
# ---------------------------------------------------------------------------
class ToolInvocationResult(BaseModel):
    """Outcome of a single tool call. Failures are data, never exceptions."""

    model_config = ConfigDict(frozen=True)

    tool_name: str
    success: bool
    payload: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, tool_name: str, payload: Any) -> "ToolInvocationResult":
        return cls(tool_name=tool_name, success=True, payload=payload)

    @classmethod
    def failed(cls, tool_name: str, error: str) -> "ToolInvocationResult":
        return cls(tool_name=tool_name, success=False, error=error)

    def as_prompt_block(self) -> str:
        """Render the result as a labeled plain-text block for the backend."""
        if not self.success:
            return f"[{self.tool_name}] unavailable: {self.error}"
        try:
            body = json.dumps(self.payload, default=str)
        except (TypeError, ValueError):
            body = str(self.payload)
        return f"[{self.tool_name}] {body}"
