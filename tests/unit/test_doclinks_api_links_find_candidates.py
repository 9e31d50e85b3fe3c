"""Unit tests for doclinks.api.links.find_candidates."""

import pytest

from doclinks.api.links.find_candidates import find_candidates
from doclinks.api.links.iter_markdown_files import iter_markdown_files
from tests.conftest import write_doc

pytestmark = pytest.mark.links


@pytest.fixture
def documents(docs):
    for rel in ["index.md", "archive/old-page.md", "guides/old-page.md", "reference/api/index.md"]:
        write_doc(docs, rel, "# Doc\n")
    return iter_markdown_files(docs)


def rel(paths, root):
    return [p.relative_to(root).as_posix() for p in paths]


def test_same_name_anywhere(documents, docs):
    assert rel(find_candidates("/old-page/", documents, docs), docs) == [
        "archive/old-page.md",
        "guides/old-page.md",
    ]


def test_parent_match_wins(documents, docs):
    assert rel(find_candidates("/moved/guides/old-page/", documents, docs), docs) == ["guides/old-page.md"]


def test_md_suffix_is_not_doubled(documents, docs):
    assert rel(find_candidates("/somewhere/guides/old-page.md", documents, docs), docs) == ["guides/old-page.md"]


def test_directory_index_candidate(documents, docs):
    assert rel(find_candidates("/api/", documents, docs), docs) == ["reference/api/index.md"]


def test_root_index_is_not_a_candidate(documents, docs):
    assert find_candidates(f"/{docs.name}/", documents, docs) == []


def test_no_candidates(documents, docs):
    assert find_candidates("/missing/", documents, docs) == []
