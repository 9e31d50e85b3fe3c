"""Resolve the published site URL and its base path."""

import os
from urllib.parse import urlparse


def get_site_url() -> str:
    """Resolve the site URL from the environment.

    Preference order: SITE_URL; a GitHub Pages URL derived from
    GITHUB_REPOSITORY; the local development server.

    Raises:
        ValueError: If GITHUB_REPOSITORY is not ``owner/repo``
    """
    site_url = os.environ.get("SITE_URL")
    if site_url:
        return site_url

    repository = os.environ.get("GITHUB_REPOSITORY")
    if repository:
        parts = repository.split("/")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise ValueError(f'Invalid GITHUB_REPOSITORY format: "{repository}". Expected "owner/repo".')
        owner, repo = parts
        return f"https://{owner}.github.io/{repo}"

    return "http://localhost:3000"


def get_base_path(site_url: str) -> str:
    """Base path of a site URL, always ending with ``/``."""
    path = urlparse(site_url).path or "/"
    return path if path.endswith("/") else f"{path}/"
