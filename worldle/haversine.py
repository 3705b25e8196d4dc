"""Great-circle distance between two points."""

from __future__ import annotations

import math

EARTH_RADIUS_M = 6371e3


def haversine(guess_lat: float, guess_lng: float, answer_lat: float, answer_lng: float) -> float:
    """Distance in metres between two latitude/longitude points."""
    guess_lat_rad = math.radians(guess_lat)
    answer_lat_rad = math.radians(answer_lat)
    delta_lat = math.radians(answer_lat - guess_lat)
    delta_lng = math.radians(answer_lng - guess_lng)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(guess_lat_rad) * math.cos(answer_lat_rad) * math.sin(delta_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c