"""Build authenticated requests against the GitHub contents API."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

_API_ROOT = "https://api.github.com/repos"


class GitHubConfigError(Exception):
    """Raised when the GitHub settings are missing from the environment."""


@dataclass(frozen=True)
class GitConfig:
    """Where the silhouettes live on GitHub and how to reach them."""

    token: str
    repo: str
    owner: str
    branch: str


def load_git_config(environ: Mapping[str, str] | None = None) -> GitConfig:
    """Read the GitHub settings from the environment."""
    env = os.environ if environ is None else environ
    config = GitConfig(
        token=env.get("GITHUB_TOKEN", ""),
        repo=env.get("GITHUB_REPO", ""),
        owner=env.get("GITHUB_OWNER", ""),
        branch=env.get("GITHUB_BRANCH", ""),
    )
    if not all((config.token, config.repo, config.owner, config.branch)):
        raise GitHubConfigError("missing required GitHub configuration")
    return config


def create_github_request(
    endpoint: str,
    headers: Mapping[str, str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> requests.Request:
    """Return a GET request for ``endpoint`` of the configured repository."""
    try:
        config = load_git_config(environ)
    except GitHubConfigError:
        logger.error("Error loading GitHub configuration")
        raise

    url = f"{_API_ROOT}/{config.owner}/{config.repo}/{endpoint}?ref={config.branch}"
    request_headers = {"Authorization": f"Bearer {config.token}"}
    request_headers.update(headers or {})
    return requests.Request("GET", url, headers=request_headers)