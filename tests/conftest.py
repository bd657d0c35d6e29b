"""Shared fixtures: fake tools and a places client double."""

from datetime import datetime
from unittest.mock import Mock

import pytest

from event_planner.core.models import Coordinates, PlaceCandidate
from event_planner.utils.places_client import PlacesClient


def make_place(place_id: str, name: str = None, types=("point_of_interest",)) -> PlaceCandidate:
    return PlaceCandidate(
        id=place_id,
        name=name or f"Place {place_id}",
        address=f"{place_id} Main St",
        coordinates=Coordinates(lat=40.0, lng=-73.0),
        rating=4.5,
        price_level=2,
        categories=frozenset(types),
    )


@pytest.fixture
def places_client():
    """PlacesClient double: every query returns three results, details echo the id."""
    client = Mock(spec=PlacesClient)

    def search(query):
        slug = query.split(" ")[0]
        return [{"place_id": f"{slug}-{i}", "name": f"{slug} {i}"} for i in range(3)]

    client.search.side_effect = search
    client.details.side_effect = lambda place_id: make_place(place_id)
    return client


@pytest.fixture
def now():
    return datetime(2024, 5, 10, 9, 30)
