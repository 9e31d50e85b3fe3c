"""Unit tests for doclinks.api.links.LinkResolver."""

import pytest

from doclinks.api.links.iter_markdown_files import iter_markdown_files
from doclinks.api.links.LinkResolver import LinkResolver
from tests.conftest import write_doc

pytestmark = pytest.mark.links


@pytest.fixture
def resolver(docs):
    for rel in ["index.md", "setup.md", "guides/index.md", "guides/install.md"]:
        write_doc(docs, rel, "# Doc\n")
    (docs / "files").mkdir()
    (docs / "files" / "data.zip").write_bytes(b"PK")
    return LinkResolver(docs, iter_markdown_files(docs))


@pytest.mark.parametrize("link_path", ["/setup/", "/setup", "/setup.md"])
def test_pretty_url_forms_resolve_to_same_document(resolver, docs, link_path):
    assert resolver.resolve(link_path) == docs / "setup.md"


def test_trailing_slash_falls_back_to_index(resolver, docs):
    assert resolver.resolve("/guides/") == docs / "guides" / "index.md"


def test_directory_without_slash_does_not_resolve(resolver):
    assert resolver.resolve("/guides") is None


def test_site_root(resolver, docs):
    assert resolver.resolve("/") == docs / "index.md"


def test_mount_prefix_is_stripped(resolver, docs):
    assert resolver.strip_mount_prefix("/docs/setup/") == "/setup/"
    assert resolver.strip_mount_prefix("/docsy/") == "/docsy/"
    assert resolver.resolve("/docs/guides/install.md") == docs / "guides" / "install.md"


def test_non_markdown_targets_are_checked_on_disk(resolver, docs):
    assert resolver.resolve("/files/data.zip") == docs / "files" / "data.zip"
    assert resolver.resolve("/files/missing.zip") is None


def test_paths_escaping_root_do_not_resolve(resolver):
    assert resolver.resolve("/../outside.md") is None
    assert resolver.resolve("/guides/../../outside/") is None


def test_documents_outside_snapshot_do_not_resolve(resolver, docs):
    write_doc(docs, "late.md", "# Late\n")
    assert resolver.resolve("/late/") is None


def test_file_and_index_forms(docs):
    write_doc(docs, "a.md", "# A\n")
    write_doc(docs, "b/index.md", "# B\n")
    resolver = LinkResolver(docs, iter_markdown_files(docs))

    assert resolver.resolve("/a/") == docs / "a.md"
    assert resolver.resolve("/b/") == docs / "b" / "index.md"
    assert resolver.resolve("/a") == docs / "a.md"
    assert resolver.resolve("/b") is None
