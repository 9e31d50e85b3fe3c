"""Rewrite ``a[href]`` markdown links in a HAST tree to page routes."""

from typing import Any

from ._visit_elements import _visit_elements
from .rewrite_markdown_href import rewrite_markdown_href


def rehype_markdown_links(tree: dict[str, Any], base: str = "/", mount_prefix: str = "/docs") -> dict[str, Any]:
    """Rewrite anchor hrefs in place and return the tree."""
    for node in _visit_elements(tree):
        if node.get("tagName") != "a":
            continue
        properties = node.get("properties") or {}
        href = properties.get("href")
        if isinstance(href, str) and href:
            properties["href"] = rewrite_markdown_href(href, base, mount_prefix)
    return tree
