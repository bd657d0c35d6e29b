"""
Places extraction: looks up venues for the place categories a reply mentions.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from ..config.settings import MAX_SUGGESTIONS, PLACE_CATEGORIES, RESULTS_PER_CATEGORY
from ..core.models import PlaceCandidate

if TYPE_CHECKING:
    from ..utils.places_client import PlacesClient


def detect_categories(text: str) -> List[str]:
    """Return the known place categories literally present in ``text``."""
    lowered = text.lower()
    return [category for category in PLACE_CATEGORIES if category in lowered]


def build_query(category: str, location_hint: Optional[str] = None) -> str:
    return f"{category} in {location_hint}" if location_hint else category


class PlaceExtractor:
    """Resolves the categories mentioned in a reply into PlaceCandidates."""

    def __init__(self, places_client: "PlacesClient"):
        self.places_client = places_client

    def extract(self, response_text: str, location_hint: Optional[str] = None) -> List[PlaceCandidate]:
        found: List[PlaceCandidate] = []
        seen_ids = set()

        for category in detect_categories(response_text):
            query = build_query(category, location_hint)
            try:
                results = self.places_client.search(query)
            except Exception as e:
                logging.warning(f"Skipping category '{category}': {e}")
                continue

            for result in results[:RESULTS_PER_CATEGORY]:
                place_id = result.get("place_id")
                if not place_id or place_id in seen_ids:
                    continue
                seen_ids.add(place_id)
                try:
                    details = self.places_client.details(place_id)
                except Exception as e:
                    logging.warning(f"Skipping place '{place_id}' for '{category}': {e}")
                    continue
                if details:
                    found.append(details)

        logging.info(f"Extracted {len(found)} place candidates, returning at most {MAX_SUGGESTIONS}.")
        return found[:MAX_SUGGESTIONS]
