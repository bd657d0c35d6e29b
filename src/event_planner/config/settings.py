"""
Configuration settings and constants for the event planning agent.
"""

import os
import logging
from typing import Optional


def _float_env(name: str, default: Optional[float]) -> Optional[float]:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        logging.warning(f"Ignoring non-numeric value for {name}: {value!r}")
        return default


# Completion backend (any chat-completions compatible endpoint)
COMPLETION_BASE_URL = os.environ.get("COMPLETION_BASE_URL") or os.environ.get("NVIDIA_BASE_URL")
COMPLETION_API_KEY = os.environ.get("COMPLETION_API_KEY") or os.environ.get("NVIDIA_API_KEY")
COMPLETION_MODEL = os.environ.get("COMPLETION_MODEL", "meta/llama-3.1-405b-instruct")
COMPLETION_TEMPERATURE = 0.7
COMPLETION_MAX_TOKENS = 1000
COMPLETION_TIMEOUT = _float_env("COMPLETION_TIMEOUT", None)

# API Keys
MAPS_API_KEY = os.environ.get("MAPS_API_KEY") or os.environ.get("GOOGLE_PLACES_API_KEY")
WEATHER_API_KEY = os.environ.get("WEATHER_API_KEY")

# API Endpoints
OWM_ONECALL_ENDPOINT = "https://api.openweathermap.org/data/3.0/onecall"
PLACES_PHOTO_ENDPOINT = "https://maps.googleapis.com/maps/api/place/photo"
AVAILABILITY_API_URL = os.environ.get("AVAILABILITY_API_URL")

# Places extraction policy
PLACE_CATEGORIES = (
    "restaurant", "cafe", "bar", "museum", "park", "theater", "cinema",
    "hotel", "attraction", "shopping", "market", "gallery", "club",
)
RESULTS_PER_CATEGORY = 2
MAX_SUGGESTIONS = 5

# Schedule extraction policy
SLOT_DURATION_MINUTES = 60

# Only the most recent turns are sent to the backend
MAX_HISTORY_TURNS = 10

# User-facing messages
APOLOGY_MESSAGE = (
    "I apologize, but I encountered an error while processing your request. "
    "Please try again."
)
EMPTY_COMPLETION_MESSAGE = "I apologize, but I could not generate a response."

# System Prompt
SYSTEM_PROMPT = """You are an autonomous AI event planning assistant helping a group plan an event together.

AVAILABLE TOOLS:
{tool_list}

INSTRUCTIONS:
- Output ONLY plain text, no markdown formatting.
- Decide whether the request is focused or brainstorming:
    * Focused (a specific request such as "find a pizza place for 6 tonight"): give exactly ONE concrete, minimal answer. Do not offer alternatives.
    * Brainstorming (an open request such as "what could we do on Saturday?"): give 3-4 short options, one line each.
- If the request is vague, create one balanced itinerary (a park, a restaurant, a local hotspot).
- Tool results are provided to you as context. Use them silently: never mention tools, searches or lookups.
- When you propose a schedule, put each activity on its own line starting with its time, e.g. "2:00 pm - Lunch at the market".
- Keep responses short.

Current location context: {location}
"""

# Logging Configuration
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - [%(levelname)s] - %(message)s'
)


def validate_api_keys() -> bool:
    """Validate that all required API keys are present."""
    missing_keys = []

    if not COMPLETION_BASE_URL:
        missing_keys.append("COMPLETION_BASE_URL")
    if not COMPLETION_API_KEY:
        missing_keys.append("COMPLETION_API_KEY")
        logging.error("COMPLETION_API_KEY not found. The agent will only answer with an apology.")
    if not MAPS_API_KEY:
        logging.warning("MAPS_API_KEY not found. Place suggestions and weather lookups will be skipped.")
    if not WEATHER_API_KEY:
        logging.warning("WEATHER_API_KEY not found. The weather tool will report failures.")

    if missing_keys:
        logging.error(f"Missing required configuration: {', '.join(missing_keys)}")
        return False

    return True
