"""
Google Maps adapter used by the places extractor and the tools.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode

import googlemaps
from googlemaps import exceptions as gmaps_exceptions

from ..config.settings import MAPS_API_KEY, PLACES_PHOTO_ENDPOINT
from ..core.errors import ConfigurationError, UpstreamError
from ..core.models import Coordinates, PlaceCandidate

DETAIL_FIELDS = ["place_id", "name", "formatted_address", "rating", "price_level", "photo", "geometry", "type"]

_GMAPS_ERRORS = (gmaps_exceptions.ApiError, gmaps_exceptions.TransportError, gmaps_exceptions.Timeout)


class PlacesClient:
    """Thin wrapper over ``googlemaps.Client`` that speaks PlaceCandidate."""

    def __init__(self, api_key: Optional[str] = None, client: Optional[googlemaps.Client] = None):
        self.api_key = api_key if api_key is not None else MAPS_API_KEY
        self._client = client
        self._init_error = "MAPS_API_KEY is not configured."

        if self._client is None and self.api_key:
            try:
                self._client = googlemaps.Client(key=self.api_key)
                logging.info("Google Maps client initialized successfully.")
            except ValueError as e:
                self._init_error = f"Failed to initialize Google Maps client: {e}"
                logging.error(self._init_error)

    @property
    def client(self) -> googlemaps.Client:
        if self._client is None:
            raise ConfigurationError(self._init_error)
        return self._client

    def search(self, query: str) -> List[Dict[str, Any]]:
        """Run a text search and return the raw result records."""
        logging.info(f"Places text search: '{query}'")
        try:
            response = self.client.places(query=query)
        except _GMAPS_ERRORS as e:
            raise UpstreamError(f"Places search failed for '{query}': {e}") from e
        return response.get("results", [])

    def details(self, place_id: str) -> Optional[PlaceCandidate]:
        """Fetch the detail record for ``place_id``; None when the provider has none."""
        try:
            response = self.client.place(place_id, fields=DETAIL_FIELDS)
        except _GMAPS_ERRORS as e:
            raise UpstreamError(f"Place details failed for '{place_id}': {e}") from e

        place = response.get("result")
        if not place:
            return None

        photo_url = None
        photos = place.get("photos") or []
        if photos and photos[0].get("photo_reference"):
            photo_url = self.photo_url(photos[0]["photo_reference"])

        location = place.get("geometry", {}).get("location", {})
        return PlaceCandidate(
            id=place_id,
            name=place.get("name", ""),
            address=place.get("formatted_address", ""),
            coordinates=Coordinates(lat=location.get("lat"), lng=location.get("lng")),
            rating=place.get("rating"),
            price_level=place.get("price_level"),
            photo_url=photo_url,
            categories=frozenset(place.get("types") or []),
        )

    def geocode(self, location: str) -> Tuple[float, float]:
        try:
            geocode_result = self.client.geocode(location)
        except _GMAPS_ERRORS as e:
            raise UpstreamError(f"Geocoding failed for '{location}': {e}") from e
        if not geocode_result:
            raise UpstreamError(f"Could not find coordinates for location: {location}")

        coords = geocode_result[0]["geometry"]["location"]
        return coords["lat"], coords["lng"]

    def photo_url(self, photo_reference: str, max_width: int = 400) -> str:
        query = urlencode({"maxwidth": max_width, "photo_reference": photo_reference, "key": self.api_key})
        return f"{PLACES_PHOTO_ENDPOINT}?{query}"
