"""Fenced code block removal."""

from ._constants import CODE_FENCE_PATTERN


def strip_code_blocks(text: str) -> str:
    """Remove fenced code blocks so example paths inside them are not scanned."""
    if not text:
        return ""
    return CODE_FENCE_PATTERN.sub("", text)
