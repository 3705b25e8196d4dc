"""Geocoding through the Google Maps API."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import requests

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class MapsApiError(Exception):
    """Raised when the Maps API cannot be reached or answers unexpectedly."""


def maps_api_key(environ: Mapping[str, str] | None = None) -> str:
    """Return the Maps API key from the environment."""
    env = os.environ if environ is None else environ
    key = env.get("MAPS_API_KEY", "")
    if not key:
        raise MapsApiError("MAPS_API_KEY environment variable is not set")
    return key


def maps_api(url: str, session: requests.Session | None = None) -> dict[str, Any]:
    """GET ``url`` and return its JSON object body."""
    http = session or requests.Session()
    try:
        response = http.get(url)
    except requests.RequestException as exc:
        raise MapsApiError(f"failed to get a response from Google Maps API: {exc}") from exc

    if response.status_code != 200:
        raise MapsApiError(
            f"google Maps API returned status: {response.status_code} {response.reason}"
        )

    try:
        results = response.json()
    except ValueError as exc:
        raise MapsApiError(f"failed to unmarshal JSON response: {exc}") from exc
    if not isinstance(results, dict):
        raise MapsApiError("failed to unmarshal JSON response: not an object")
    return results


def geocode(
    country: str, api_key: str, session: requests.Session | None = None
) -> tuple[float, float]:
    """Return the latitude and longitude the Maps API gives for ``country``."""
    url = f"{GEOCODE_URL}?address={country}&key={api_key}"
    try:
        results = maps_api(url, session)
    except MapsApiError as exc:
        raise MapsApiError(f"failed to get geocode from Google Maps API: {exc}") from exc

    try:
        location = results["results"][0]["geometry"]["location"]
        return float(location["lat"]), float(location["lng"])
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise MapsApiError(f"unexpected geocode response for {country!r}") from exc