"""Issue kind model."""

from enum import Enum


class IssueKind(str, Enum):
    BROKEN_LINK = "broken-link"
    BROKEN_ANCHOR = "broken-anchor"
