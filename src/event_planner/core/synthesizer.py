"""Prompt construction and reply synthesis through the completion backend."""

import re
from typing import List, Optional, Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from ..config.settings import MAX_HISTORY_TURNS, SYSTEM_PROMPT
from .completion import CompletionClient
from .executor import ToolRegistry
from .models import ConversationTurn, PlannedActivitySlot, ToolInvocationResult

_LOCATION_PATTERN = re.compile(r"\b(?:in|at|near|around)\s+([^,.!?;\n]+)", re.IGNORECASE)
_LOCATION_STOP = re.compile(r"(?:^|\s+)(?:for|with|on|to|from|and|by|this|next|tomorrow|tonight)\b.*$", re.IGNORECASE)


def extract_location(messages: Sequence[str]) -> Optional[str]:
    """
    Find the most recent location phrase ("in downtown", "near the river").

    Messages are scanned newest first; phrases that start with a digit are
    times ("at 2pm"), not places.
    """
    for content in reversed(messages):
        for match in _LOCATION_PATTERN.finditer(content.lower()):
            phrase = _LOCATION_STOP.sub("", match.group(1)).strip()
            if len(phrase) > 2 and not phrase[0].isdigit():
                return phrase
    return None


def history_to_messages(history: Sequence[ConversationTurn]) -> List[BaseMessage]:
    messages: List[BaseMessage] = []
    for turn in list(history)[-MAX_HISTORY_TURNS:]:
        if turn.role == "user":
            messages.append(HumanMessage(content=turn.content))
        else:
            messages.append(AIMessage(content=turn.content))
    return messages


class ResponseSynthesizer:
    """Builds the backend prompt and returns the backend's raw text."""

    def __init__(self, registry: ToolRegistry, client: CompletionClient):
        self.registry = registry
        self.client = client

    def build_system_prompt(self, location: Optional[str] = None,
                            current_schedule: Optional[Sequence[PlannedActivitySlot]] = None) -> str:
        prompt = SYSTEM_PROMPT.format(
            tool_list=self.registry.describe() or "- none",
            location=location or "not specified",
        )
        if current_schedule:
            lines = "\n".join(
                f"- {slot.start_time.strftime('%H:%M')} {slot.title}" for slot in current_schedule
            )
            prompt += f"\nCurrent schedule:\n{lines}\n"
        return prompt

    def synthesize(self, utterance: str, history: Sequence[ConversationTurn],
                   tool_results: Sequence[ToolInvocationResult], location: Optional[str] = None,
                   current_schedule: Optional[Sequence[PlannedActivitySlot]] = None) -> str:
        messages = history_to_messages(history)
        if tool_results:
            blocks = "\n".join(result.as_prompt_block() for result in tool_results)
            messages.append(SystemMessage(content=f"TOOL RESULTS:\n{blocks}"))

        system_prompt = self.build_system_prompt(location, current_schedule)
        return self.client.complete(system_prompt, messages, utterance)
