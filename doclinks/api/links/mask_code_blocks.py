"""Placeholder masking for fenced code blocks during rewrites."""

import re
from collections.abc import Callable

from ._constants import CODE_FENCE_PATTERN

_PLACEHOLDER = "\x00CODE_BLOCK_{}\x00"
_PLACEHOLDER_PATTERN = re.compile(r"\x00CODE_BLOCK_(\d+)\x00")


def mask_code_blocks(text: str) -> tuple[str, Callable[[str], str]]:
    """Swap fenced code blocks for placeholders.

    Returns:
        The masked text and a function restoring the original blocks in a
        (possibly rewritten) masked text
    """
    blocks: list[str] = []

    def _stash(match: re.Match[str]) -> str:
        blocks.append(match.group(0))
        return _PLACEHOLDER.format(len(blocks) - 1)

    masked = CODE_FENCE_PATTERN.sub(_stash, text)

    def restore(rewritten: str) -> str:
        return _PLACEHOLDER_PATTERN.sub(lambda m: blocks[int(m.group(1))], rewritten)

    return masked, restore
