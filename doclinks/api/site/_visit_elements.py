"""HAST element traversal (private)."""

from collections.abc import Iterator
from typing import Any


def _visit_elements(node: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Yield every element node of a HAST-shaped tree, depth first."""
    if node.get("type") == "element":
        yield node
    for child in node.get("children", ()):
        yield from _visit_elements(child)
