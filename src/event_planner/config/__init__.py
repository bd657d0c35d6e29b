"""
Configuration settings and constants for the event planning agent.
"""

from .settings import (
    COMPLETION_BASE_URL,
    COMPLETION_API_KEY,
    COMPLETION_MODEL,
    MAPS_API_KEY,
    WEATHER_API_KEY,
    OWM_ONECALL_ENDPOINT,
    APOLOGY_MESSAGE,
    SYSTEM_PROMPT,
    validate_api_keys
)

__all__ = [
    'COMPLETION_BASE_URL',
    'COMPLETION_API_KEY',
    'COMPLETION_MODEL',
    'MAPS_API_KEY',
    'WEATHER_API_KEY',
    'OWM_ONECALL_ENDPOINT',
    'APOLOGY_MESSAGE',
    'SYSTEM_PROMPT',
    'validate_api_keys'
]
