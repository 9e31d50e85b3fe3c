"""Site build link transforms."""

from .get_site_url import get_base_path, get_site_url
from .prefix_base_path import prefix_base_path
from .rehype_base_paths import rehype_base_paths
from .rehype_markdown_links import rehype_markdown_links
from .rewrite_markdown_href import rewrite_markdown_href

__all__ = [
    "get_base_path",
    "get_site_url",
    "prefix_base_path",
    "rehype_base_paths",
    "rehype_markdown_links",
    "rewrite_markdown_href",
]
