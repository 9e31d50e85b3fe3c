"""Heading anchor extractor."""

import re

from ._constants import HEADING_PATTERN
from .heading_to_anchor import heading_to_anchor
from .strip_code_blocks import strip_code_blocks

_INLINE_CODE = re.compile(r"`[^`]+`")
_BOLD = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC = re.compile(r"\*([^*]+)\*")
_LINK = re.compile(r"\[([^\]]+)\]\([^)]+\)")


def clean_heading(heading: str) -> str:
    """Drop inline code and emphasis markers, keep only the text of nested links."""
    text = _INLINE_CODE.sub("", heading.strip())
    text = _BOLD.sub(r"\1", text)
    text = _ITALIC.sub(r"\1", text)
    text = _LINK.sub(r"\1", text)
    return text.strip()


def extract_anchors(text: str) -> set[str]:
    """Extract the anchor slugs a markdown document exposes.

    Headings inside fenced code blocks are ignored.
    """
    if not text:
        return set()
    return {heading_to_anchor(clean_heading(m.group(1))) for m in HEADING_PATTERN.finditer(strip_code_blocks(text))}
