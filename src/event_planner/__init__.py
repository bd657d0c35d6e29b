"""
Conversational event planning agent.
"""

from .core.agent import EventPlanningAgent
from .core.models import AgentResponse, ChatRequest

__version__ = "0.1.0"

__all__ = ['EventPlanningAgent', 'AgentResponse', 'ChatRequest']
