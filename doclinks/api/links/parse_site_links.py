"""Site-relative link parser (UNO: single function)."""

from collections.abc import Iterator

from ._constants import SITE_LINK_PATTERN
from .SiteLink import SiteLink
from .strip_code_blocks import strip_code_blocks


def parse_site_links(text: str) -> Iterator[SiteLink]:
    """Extract all ``[text](/target)`` links outside fenced code.

    Args:
        text: Raw markdown content

    Yields:
        SiteLink objects in document order
    """
    for match in SITE_LINK_PATTERN.finditer(strip_code_blocks(text)):
        yield SiteLink(text=match.group(1), href=match.group(2))
