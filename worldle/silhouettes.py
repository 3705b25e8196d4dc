"""Fetch territory silhouettes and pick a random territory."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping

import requests

from worldle.github import GitHubConfigError, create_github_request
from worldle.territories import get_all_territories

logger = logging.getLogger(__name__)

_RAW_ACCEPT = "application/vnd.github.raw"


class SilhouetteError(Exception):
    """Raised when a silhouette image cannot be fetched."""


def fetch_silhouette(
    country: str,
    session: requests.Session | None = None,
    environ: Mapping[str, str] | None = None,
) -> bytes:
    """Return the PNG bytes of the silhouette for ``country``."""
    try:
        request = create_github_request(
            f"contents/silhouettes/{country}.png", {"Accept": _RAW_ACCEPT}, environ
        )
    except GitHubConfigError:
        logger.error("Error creating new GitHub request")
        raise

    http = session or requests.Session()
    try:
        response = http.send(http.prepare_request(request))
    except requests.RequestException as exc:
        logger.error(
            "Failed to make request to GitHub API - Authorization issue or network error: %s",
            exc,
        )
        raise SilhouetteError(f"failed to reach GitHub API: {exc}") from exc

    if response.status_code != 200:
        raise SilhouetteError("failed to fetch silhouette from GitHub API")
    return response.content


def get_random_country(
    session: requests.Session | None = None,
    environ: Mapping[str, str] | None = None,
    rng: random.Random | None = None,
) -> str:
    """Pick one territory at random from those with a silhouette."""
    countries = get_all_territories(session, environ)
    chooser = rng or random.Random()
    return chooser.choice(countries)