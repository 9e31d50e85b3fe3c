"""Constants for documentation link checking (private)."""

import re

MARKDOWN_SUFFIX = ".md"
INDEX_FILENAME = "index.md"

# [text](/site/relative/target); protocol-relative //host links are external
SITE_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\((/(?!/)[^)]+)\)")

# Any inline markdown link, used by the normalizer
MARKDOWN_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\(([^)]+)\)")

HEADING_PATTERN = re.compile(r"^#{1,6}\s+(.+)$", re.MULTILINE)

# ``` or ~~~ fenced regions, closed by the same fence
CODE_FENCE_PATTERN = re.compile(r"(```|~~~).*?\1", re.DOTALL)

# Names that are always skipped by the scanner
HIDDEN_PREFIXES = ("_", ".")

EXTERNAL_PREFIXES = ("mailto:", "tel:")
