"""Unit tests for site URL and base path resolution."""

import pytest

from doclinks.api.config.SiteConfig import SiteConfig
from doclinks.api.site.get_site_url import get_base_path, get_site_url
from doclinks.api.site.resolve_base import resolve_base, resolve_site_url

pytestmark = pytest.mark.site


def test_site_url_env_wins(monkeypatch):
    monkeypatch.setenv("SITE_URL", "https://docs.example.com/project")
    monkeypatch.setenv("GITHUB_REPOSITORY", "owner/repo")
    assert get_site_url() == "https://docs.example.com/project"


def test_github_pages_url(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "owner/repo")
    assert get_site_url() == "https://owner.github.io/repo"


@pytest.mark.parametrize("repository", ["owner", "owner/repo/extra", "/repo", "owner/"])
def test_malformed_github_repository(monkeypatch, repository):
    monkeypatch.setenv("GITHUB_REPOSITORY", repository)
    with pytest.raises(ValueError, match="Invalid GITHUB_REPOSITORY format"):
        get_site_url()


def test_local_default():
    assert get_site_url() == "http://localhost:3000"


@pytest.mark.parametrize(
    ("url", "base"),
    [
        ("https://owner.github.io/repo", "/repo/"),
        ("https://example.com/a/", "/a/"),
        ("http://localhost:3000", "/"),
    ],
)
def test_get_base_path(url, base):
    assert get_base_path(url) == base


def test_resolve_base_prefers_config():
    assert resolve_base(SiteConfig(base="/custom/", url="https://owner.github.io/repo")) == "/custom/"


def test_resolve_base_from_config_url():
    assert resolve_base(SiteConfig(url="https://owner.github.io/repo")) == "/repo/"


def test_resolve_base_from_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "owner/repo")
    assert resolve_site_url(SiteConfig()) == "https://owner.github.io/repo"
    assert resolve_base(SiteConfig()) == "/repo/"
