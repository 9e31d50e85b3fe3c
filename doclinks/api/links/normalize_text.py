"""Rewrite every markdown link of a document to repo-relative form."""

import re
from pathlib import Path

from ._constants import MARKDOWN_LINK_PATTERN
from .mask_code_blocks import mask_code_blocks
from .to_repo_relative import to_repo_relative


def normalize_text(content: str, current_file: Path, root: Path, mount_prefix: str = "/docs") -> tuple[str, list[tuple[str, str]]]:
    """Rewrite links outside fenced code blocks.

    Returns:
        The updated content and the (from, to) href pairs that changed
    """
    masked, restore = mask_code_blocks(content)
    changes: list[tuple[str, str]] = []

    def _rewrite(match: re.Match[str]) -> str:
        text, href = match.group(1), match.group(2)
        new_href = to_repo_relative(href, current_file, root, mount_prefix)
        if new_href is None or new_href == href:
            return match.group(0)
        changes.append((href, new_href))
        return f"[{text}]({new_href})"

    rewritten = MARKDOWN_LINK_PATTERN.sub(_rewrite, masked)
    return restore(rewritten), changes
