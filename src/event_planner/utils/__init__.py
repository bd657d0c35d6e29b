"""
Utility functions and tools for the event planning agent.
"""

from .places_client import PlacesClient
from .tools import build_tools, map_price_level

__all__ = ['PlacesClient', 'build_tools', 'map_price_level']
