"""Keyword-based intent classification and tool selection."""

from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Tuple

# Tool name -> trigger vocabulary. Matching is substring membership on the
# lowercased utterance.
DEFAULT_SELECTION_RULES: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "search_places": frozenset({"place", "restaurant", "venue", "attraction", "where"}),
    "build_itinerary": frozenset({"plan", "itinerary", "schedule", "timeline"}),
    "get_weather": frozenset({"weather", "temperature", "forecast", "rain"}),
    "check_availability": frozenset({"availability", "available", "book", "reserve"}),
})


class ToolSelector:
    """
    Decides which registered tools apply to an utterance.

    Returns tool names in registry order. When no rule fires, every available
    tool is selected so the request is never under-served.
    """

    def __init__(self, available: Iterable[str], rules: Mapping[str, FrozenSet[str]] = DEFAULT_SELECTION_RULES):
        self.available: Tuple[str, ...] = tuple(available)
        self.rules = MappingProxyType({name: frozenset(words) for name, words in rules.items()})

    def select(self, utterance: str) -> Tuple[str, ...]:
        lowered = utterance.lower()
        selected = tuple(
            name for name in self.available
            if any(keyword in lowered for keyword in self.rules.get(name, ()))
        )
        return selected or self.available
