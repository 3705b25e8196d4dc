"""Distance, direction and map links between territories."""

from __future__ import annotations

import math
import threading
from collections.abc import Callable

from worldle.bearing import get_compass
from worldle.haversine import haversine
from worldle.mapsapi import MapsApiError, geocode, maps_api_key

Geocoder = Callable[[str], "tuple[float, float]"]


def _default_geocoder(territory: str) -> tuple[float, float]:
    return geocode(territory, maps_api_key())


class GeoService:
    """Looks up territory coordinates, caching each answer."""

    def __init__(self, geocoder: Geocoder | None = None) -> None:
        self._geocoder = geocoder or _default_geocoder
        self._cache: dict[str, tuple[float, float]] = {}
        self._lock = threading.Lock()

    def coordinates(self, territory: str) -> tuple[float, float]:
        """Latitude and longitude of ``territory``, geocoded once."""
        with self._lock:
            cached = self._cache.get(territory)
        if cached is not None:
            return cached

        try:
            coords = self._geocoder(territory)
        except MapsApiError as exc:
            raise MapsApiError(f"failed to geocode territory: {territory}: {exc}") from exc

        with self._lock:
            self._cache[territory] = coords
        return coords

    def distance_and_direction(self, guess: str, answer: str) -> tuple[float, str]:
        """Whole kilometres and compass direction from the guess to the answer."""
        guess_lat, guess_lng = self.coordinates(guess)
        answer_lat, answer_lng = self.coordinates(answer)
        metres = haversine(guess_lat, guess_lng, answer_lat, answer_lng)
        kilometres = float(math.floor(metres / 1000 + 0.5))
        direction = get_compass(guess_lat, guess_lng, answer_lat, answer_lng)
        return kilometres, direction

    def maps_url(self, guess: str, answer: str) -> str:
        """Google Maps directions link from the guess to the answer."""
        guess_lat, guess_lng = self.coordinates(guess)
        answer_lat, answer_lng = self.coordinates(answer)
        return (
            "https://www.google.com/maps/dir/"
            f"{guess_lat:f},{guess_lng:f}/{answer_lat:f},{answer_lng:f}"
        )


def maps_url_answer(answer: str) -> str:
    """Google Maps link to the answer's place page."""
    return f"https://www.google.com/maps/place/{answer}"