"""Markdown file link to page route conversion."""

from ..links.SplitHref import SplitHref

_EXTERNAL_PREFIXES = ("mailto:", "tel:")
_LOCAL_PREFIXES = ("./", "../", "/")


def rewrite_markdown_href(href: str, base: str = "/", mount_prefix: str = "/docs") -> str:
    """Convert a link to a ``.md`` file into its page route.

    ``./file.md`` -> ``./file/``, ``./dir/index.md`` -> ``./dir/``,
    ``/docs/a/b.md#x`` -> ``{base}a/b/#x``. External links, links that do not
    start with ``./``, ``../`` or ``/``, and non-markdown links are returned
    unchanged.
    """
    if "://" in href or href.startswith(_EXTERNAL_PREFIXES):
        return href
    if not href.startswith(_LOCAL_PREFIXES):
        return href

    target = SplitHref.parse(href)
    url_path = target.path
    if not url_path.endswith(".md"):
        return href

    is_absolute = url_path.startswith("/")
    if mount_prefix and url_path.startswith(f"{mount_prefix}/"):
        url_path = url_path[len(mount_prefix) :]

    if url_path.endswith("/index.md"):
        url_path = url_path[: -len("index.md")]
    else:
        url_path = url_path[: -len(".md")] + "/"

    normalized_base = "" if base == "/" else base.rstrip("/")
    if is_absolute and normalized_base:
        url_path = normalized_base + url_path

    return str(target.with_path(url_path))
