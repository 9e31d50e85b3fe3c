"""Heading slug generator."""

import re

_EMOJI = re.compile("[\U0001f300-\U0001f9ff]")
# ASCII \w to match the slugs produced by the site generator
_SPECIAL = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def heading_to_anchor(heading: str) -> str:
    """Convert heading text to its anchor slug.

    >>> heading_to_anchor("Hello, World! 🎉")
    'hello-world'
    """
    slug = heading.lower()
    slug = _EMOJI.sub("", slug)
    slug = _SPECIAL.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")
