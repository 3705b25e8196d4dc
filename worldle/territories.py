"""List the territories that have a silhouette in the GitHub repository."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import requests

from worldle.github import create_github_request

logger = logging.getLogger(__name__)

_SUFFIX = ".png"


class TerritoriesError(Exception):
    """Raised when the territory list cannot be fetched or is empty."""


def format_territory_name(name: str) -> str:
    """Turn a file-style name such as ``united_kingdom`` into display form."""
    return name.upper().replace("_", " ")


def get_all_territories(
    session: requests.Session | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Names of all silhouette files, without their ``.png`` suffix."""
    request = create_github_request("contents/silhouettes", None, environ)
    http = session or requests.Session()
    try:
        response = http.send(http.prepare_request(request))
    except requests.RequestException as exc:
        logger.error("Failed to make request to GitHub API: %s", exc)
        raise TerritoriesError(f"failed to reach GitHub API: {exc}") from exc

    if response.status_code != 200:
        raise TerritoriesError(
            "failed to fetch silhouettes from GitHub API: "
            f"{response.status_code} {response.reason}"
        )

    try:
        files = response.json()
    except ValueError as exc:
        logger.error("Failed to decode response body from GitHub API: %s", exc)
        raise TerritoriesError(f"failed to decode GitHub response: {exc}") from exc
    if not isinstance(files, list):
        raise TerritoriesError("failed to decode GitHub response: not a list")

    territories = [
        name[: -len(_SUFFIX)]
        for name in (entry.get("name", "") for entry in files if isinstance(entry, dict))
        if isinstance(name, str) and name.endswith(_SUFFIX)
    ]
    if not territories:
        raise TerritoriesError("no territories found in the response")
    return territories


def get_formatted_territory_names(
    session: requests.Session | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """All territory names in display form."""
    return [format_territory_name(name) for name in get_all_territories(session, environ)]