"""Link classification (closed set)."""

from enum import Enum


class IssueStatus(str, Enum):
    """Classification of a site-relative link."""

    VALID = "valid"
    AUTO_FIXABLE = "auto-fixable"
    NEEDS_REVIEW = "needs-review"
    MANUAL_CHECK = "manual-check"

    @property
    def tag(self) -> str:
        """Report tag printed in front of the link."""
        return _TAGS[self]


_TAGS = {
    IssueStatus.VALID: "[OK]",
    IssueStatus.AUTO_FIXABLE: "[FIX]",
    IssueStatus.NEEDS_REVIEW: "[REVIEW]",
    IssueStatus.MANUAL_CHECK: "[MANUAL]",
}
