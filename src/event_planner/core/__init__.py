"""
Core agent pipeline: data model, errors, tool selection and execution,
completion backend and reply synthesis.
"""

from .errors import (
    AgentError,
    BackendError,
    BackendUnavailable,
    ConfigurationError,
    InvalidRequestError,
    UpstreamError,
)
from .models import (
    ActivityCategory,
    AgentResponse,
    ChatRequest,
    ConversationTurn,
    Coordinates,
    PlaceCandidate,
    PlannedActivitySlot,
    ToolInvocationResult,
)

__all__ = [
    'AgentError',
    'BackendError',
    'BackendUnavailable',
    'ConfigurationError',
    'InvalidRequestError',
    'UpstreamError',
    'ActivityCategory',
    'AgentResponse',
    'ChatRequest',
    'ConversationTurn',
    'Coordinates',
    'PlaceCandidate',
    'PlannedActivitySlot',
    'ToolInvocationResult',
]
