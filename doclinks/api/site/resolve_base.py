"""Deployment base path from configuration."""

from ..config.SiteConfig import SiteConfig
from .get_site_url import get_base_path, get_site_url


def resolve_site_url(site: SiteConfig) -> str:
    return site.url or get_site_url()


def resolve_base(site: SiteConfig) -> str:
    """Configured base, else the path component of the site URL."""
    if site.base is not None:
        return site.base
    return get_base_path(resolve_site_url(site))
