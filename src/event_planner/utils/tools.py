"""
External capability tools available to the event planning agent.
"""

import logging
import re
from typing import Any, Dict, List, Optional
from datetime import datetime, timedelta, timezone

import requests
from langchain_core.tools import BaseTool, tool

from ..config.settings import (
    AVAILABILITY_API_URL,
    OWM_ONECALL_ENDPOINT,
    SLOT_DURATION_MINUTES,
    WEATHER_API_KEY,
)
from ..core.errors import ConfigurationError
from ..extraction.places import build_query, detect_categories
from ..extraction.schedule import extract_schedule
from .places_client import PlacesClient

DEFAULT_VENUE_QUERY = "event venue"
DEFAULT_TIME_SLOTS = ["10:00 AM", "2:00 PM", "6:00 PM"]


def map_price_level(level: Optional[int]) -> str:
    """Maps Google Places price level (0-4) to $, $$, $$$ etc."""
    if level == 0: return "Free"
    if level == 1: return "$"
    if level == 2: return "$$"
    if level == 3: return "$$$"
    if level == 4: return "$$$$"
    return "Unknown"


def _tomorrow() -> datetime:
    return datetime.now() + timedelta(days=1)


def build_tools(places_client: PlacesClient) -> List[BaseTool]:
    """Create the tool descriptors bound to ``places_client``."""

    @tool
    def search_places(utterance: str, location: Optional[str] = None) -> List[Dict[str, Any]]:
        """Search for places and venues that fit the request."""
        logging.info(f"TOOL CALLED: search_places(location='{location}')")
        categories = detect_categories(utterance)
        query = build_query(categories[0] if categories else DEFAULT_VENUE_QUERY, location)

        results = []
        for place in places_client.search(query)[:5]:
            results.append({
                "name": place.get("name"),
                "address": place.get("formatted_address"),
                "rating": place.get("rating"),
                "price_level_str": map_price_level(place.get("price_level")),
                "types": place.get("types"),
            })
        return results

    @tool
    def build_itinerary(utterance: str, location: Optional[str] = None) -> Dict[str, Any]:
        """Lay out the timeline frame for the event: date, slot length and requested times."""
        logging.info(f"TOOL CALLED: build_itinerary(location='{location}')")
        requested = [
            {"time": slot.start_time.strftime("%H:%M"), "activity": slot.title}
            for slot in extract_schedule("\n".join(re.split(r"[,;\n]", utterance)))
        ]
        return {
            "date": _tomorrow().strftime("%Y-%m-%d"),
            "location": location,
            "slot_minutes": SLOT_DURATION_MINUTES,
            "requested_slots": requested,
        }

    @tool
    def get_weather(utterance: str, location: Optional[str] = None) -> Dict[str, Any]:
        """Get the weather forecast for the event day."""
        logging.info(f"TOOL CALLED: get_weather(location='{location}')")

        if not WEATHER_API_KEY:
            raise ConfigurationError("Weather API key not configured.")
        if not location:
            raise ValueError("No location known for the weather forecast.")

        lat, lon = places_client.geocode(location)
        params = {
            'lat': lat,
            'lon': lon,
            'appid': WEATHER_API_KEY,
            'units': 'metric',
            'exclude': 'current,minutely,hourly,alerts'
        }
        response = requests.get(OWM_ONECALL_ENDPOINT, params=params)
        response.raise_for_status()
        weather_data = response.json()

        target_date = _tomorrow().date()
        for day_forecast in weather_data.get('daily', []):
            forecast_date = datetime.fromtimestamp(day_forecast['dt'], tz=timezone.utc).date()
            if forecast_date == target_date:
                return {
                    "date": target_date.isoformat(),
                    "location": location,
                    "temp_high_c": day_forecast['temp']['max'],
                    "temp_low_c": day_forecast['temp']['min'],
                    "conditions": day_forecast['weather'][0]['description'],
                    "precip_prob_percent": round(day_forecast.get('pop', 0) * 100, 1),
                }

        raise LookupError(f"No forecast available for {target_date.isoformat()}")

    @tool
    def check_availability(utterance: str, location: Optional[str] = None) -> Dict[str, Any]:
        """Check venue availability for the event day."""
        logging.info(f"TOOL CALLED: check_availability(location='{location}')")
        date = _tomorrow().strftime("%Y-%m-%d")

        if not AVAILABILITY_API_URL:
            logging.info("No availability provider configured, using default time slots.")
            return {"date": date, "available": True, "time_slots": DEFAULT_TIME_SLOTS, "status": "OK_DEFAULT"}

        response = requests.get(AVAILABILITY_API_URL, params={"venue": location or "", "date": date})
        response.raise_for_status()
        return response.json()

    return [search_places, build_itinerary, get_weather, check_availability]
