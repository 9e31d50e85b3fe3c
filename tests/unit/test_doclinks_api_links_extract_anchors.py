"""Unit tests for doclinks.api.links.extract_anchors."""

import pytest

from doclinks.api.links.extract_anchors import clean_heading, extract_anchors

pytestmark = pytest.mark.links


def test_extract_anchors_from_all_levels():
    text = "# Title\n\nBody\n\n## Getting Started\n\n###### Deep\n"
    assert extract_anchors(text) == {"title", "getting-started", "deep"}


def test_extract_anchors_cleans_inline_markup():
    text = "## Sub **bold** `code`\n### [Link](/x) text\n#### *Emphasis* here\n"
    assert extract_anchors(text) == {"sub-bold", "link-text", "emphasis-here"}


def test_extract_anchors_ignores_headings_in_code_blocks():
    text = "# Real\n\n```bash\n# not a heading\n```\n\n~~~\n## also not\n~~~\n"
    assert extract_anchors(text) == {"real"}


def test_extract_anchors_requires_space_after_hashes():
    assert extract_anchors("#hashtag\n") == set()


def test_extract_anchors_empty():
    assert extract_anchors("") == set()


def test_clean_heading():
    assert clean_heading(" Use `cmd` with **care** and [docs](/docs/) ") == "Use  with care and docs"
