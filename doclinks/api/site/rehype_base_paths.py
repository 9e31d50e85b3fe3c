"""Prefix the deployment base onto absolute URLs in a HAST tree."""

from typing import Any

from ._visit_elements import _visit_elements
from .prefix_base_path import prefix_base_path

# tag -> (attribute, leave .md links alone)
_URL_ATTRIBUTES = {
    "img": ("src", False),
    "iframe": ("src", False),
    "a": ("href", True),
}


def rehype_base_paths(tree: dict[str, Any], base: str = "/") -> dict[str, Any]:
    """Rewrite img/iframe sources and anchor hrefs in place and return the tree."""
    for node in _visit_elements(tree):
        rule = _URL_ATTRIBUTES.get(node.get("tagName", ""))
        if rule is None:
            continue
        attribute, skip_markdown = rule
        properties = node.get("properties") or {}
        value = properties.get(attribute)
        if isinstance(value, str) and value:
            properties[attribute] = prefix_base_path(value, base, skip_markdown=skip_markdown)
    return tree
