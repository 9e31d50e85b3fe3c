"""Unit tests for site cmd_href and cmd_url."""

import pytest

from doclinks.api.site.cmd_href import cmd_href
from doclinks.api.site.cmd_url import cmd_url
from tests.conftest import run_cmd

pytestmark = pytest.mark.site


def test_cmd_href_with_explicit_base():
    result = run_cmd(cmd_href, "/docs/a.md#x", base="/proj/")

    assert result.success is True
    assert result.output["rewritten"] == "/proj/a/#x"
    assert result.output["base"] == "/proj/"
    assert result.result == "/docs/a.md#x -> /proj/a/#x"


def test_cmd_href_prefixes_assets():
    assert run_cmd(cmd_href, "/img/x.png", base="/proj/").output["rewritten"] == "/proj/img/x.png"


def test_cmd_href_base_from_config(write_config):
    write_config({"site": {"url": "https://owner.github.io/repo"}})
    result = run_cmd(cmd_href, "./page.md")
    assert result.output["base"] == "/repo/"
    assert result.output["rewritten"] == "./page/"


def test_cmd_href_default_base():
    result = run_cmd(cmd_href, "/docs/guides/index.md")
    assert result.output["base"] == "/"
    assert result.output["rewritten"] == "/guides/"


def test_cmd_href_bad_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "not-a-repo")
    result = run_cmd(cmd_href, "/docs/a.md")
    assert result.success is False
    assert result.output["rewritten"] == "/docs/a.md"
    assert "Invalid GITHUB_REPOSITORY" in result.output["errors"][0]


def test_cmd_url_from_config(write_config):
    write_config({"site": {"url": "https://docs.example.com"}})
    result = run_cmd(cmd_url)
    assert result.success is True
    assert result.output["url"] == "https://docs.example.com"


def test_cmd_url_from_environment(monkeypatch):
    monkeypatch.setenv("SITE_URL", "https://env.example.com/p")
    assert run_cmd(cmd_url).result == "https://env.example.com/p"


def test_cmd_url_bad_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "bad")
    result = run_cmd(cmd_url)
    assert result.success is False
    assert result.output["url"] == ""
