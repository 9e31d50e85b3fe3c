"""Unit tests for doclinks.api.links.to_repo_relative and normalize_text."""

import pytest

from doclinks.api.links.normalize_text import normalize_text
from doclinks.api.links.to_repo_relative import repo_relative_exists, to_repo_relative
from tests.conftest import write_doc

pytestmark = pytest.mark.links


@pytest.fixture
def current(docs):
    for rel in ["setup.md", "guides/index.md", "guides/install.md"]:
        write_doc(docs, rel, "# Doc\n")
    return docs / "guides" / "index.md"


@pytest.mark.parametrize(
    ("href", "expected"),
    [
        ("./install.md", "/docs/guides/install.md"),
        ("install", "/docs/guides/install.md"),
        ("../setup.md#intro", "/docs/setup.md#intro"),
        ("/guides/", "/docs/guides/index.md"),
        ("/setup/", "/docs/setup.md"),
        ("/setup?tab=1", "/docs/setup.md?tab=1"),
        ("/docs/setup.md", "/docs/setup.md"),
        ("/nowhere/", "/docs/nowhere/index.md"),
    ],
)
def test_to_repo_relative(current, docs, href, expected):
    assert to_repo_relative(href, current, docs) == expected


@pytest.mark.parametrize(
    "href",
    ["https://example.com/a.md", "mailto:me@example.com", "#top", "/img/logo.png", "../../outside.md"],
)
def test_to_repo_relative_leaves_link_alone(current, docs, href):
    assert to_repo_relative(href, current, docs) is None


def test_custom_mount_prefix(current, docs):
    assert to_repo_relative("./install.md", current, docs, mount_prefix="/content") == "/content/guides/install.md"


def test_repo_relative_exists(current, docs):
    assert repo_relative_exists("/docs/setup.md#x", docs)
    assert not repo_relative_exists("/docs/missing.md", docs)


def test_normalize_text(current, docs):
    content = "[I](./install.md) [S](/docs/setup.md) [E](https://e.com)\n```\n[X](./x.md)\n```\n"

    updated, changes = normalize_text(content, current, docs)

    assert changes == [("./install.md", "/docs/guides/install.md")]
    assert updated == "[I](/docs/guides/install.md) [S](/docs/setup.md) [E](https://e.com)\n```\n[X](./x.md)\n```\n"
