"""Deployment base path prefixing."""

from ..links.SplitHref import SplitHref


def normalize_base(base: str) -> str:
    """Base path with exactly one trailing slash."""
    return base if base.endswith("/") else f"{base}/"


def prefix_base_path(url: str, base: str = "/", skip_markdown: bool = False) -> str:
    """Prepend base to an absolute URL that does not already carry it.

    Relative, external and protocol-relative (``//host``) URLs are unchanged.
    With skip_markdown, ``.md`` targets are left for rewrite_markdown_href.
    """
    normalized_base = normalize_base(base)
    if normalized_base == "/":
        return url
    if not url.startswith("/") or url.startswith("//"):
        return url
    if url.startswith(normalized_base):
        return url
    if skip_markdown and SplitHref.parse(url).path.endswith(".md"):
        return url
    return normalized_base + url[1:]
