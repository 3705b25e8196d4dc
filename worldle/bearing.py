"""Compass direction from one point on the globe to another."""

from __future__ import annotations

import math

_DIRECTIONS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def get_compass(guess_lat: float, guess_lng: float, answer_lat: float, answer_lng: float) -> str:
    """Return the 16-point compass direction from the guess to the answer."""
    bearing = initial_bearing(guess_lat, guess_lng, answer_lat, answer_lng)
    return degrees_to_compass(normalize_degrees(radians_to_degrees(bearing)))


def degrees_to_compass(degrees: float) -> str:
    """Map a bearing in degrees (0 to 360) onto a 16-point compass name."""
    return _DIRECTIONS[int((degrees + 11.25) / 22.5) % 16]


def normalize_degrees(degrees: float) -> float:
    """Bring an angle from the -180..180 range into 0..360."""
    return math.fmod(degrees + 360, 360)


def radians_to_degrees(bearing: float) -> float:
    """Convert radians to degrees."""
    return bearing * (180.0 / math.pi)


def initial_bearing(guess_lat: float, guess_lng: float, answer_lat: float, answer_lng: float) -> float:
    """Initial great-circle bearing in radians, in the range -pi..pi."""
    guess_lat_rad = math.radians(guess_lat)
    answer_lat_rad = math.radians(answer_lat)
    delta_lng = math.radians(answer_lng) - math.radians(guess_lng)

    y = math.sin(delta_lng) * math.cos(answer_lat_rad)
    x = (
        math.cos(guess_lat_rad) * math.sin(answer_lat_rad)
        - math.sin(guess_lat_rad) * math.cos(answer_lat_rad) * math.cos(delta_lng)
    )
    return math.atan2(y, x)