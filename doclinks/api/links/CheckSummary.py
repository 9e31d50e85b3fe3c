"""Check run summary (accumulator returned by check_docs)."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .IssueStatus import IssueStatus
from .LinkIssue import LinkIssue


@dataclass
class CheckSummary:
    docs_root: Path
    write: bool = False
    files_scanned: int = 0
    files_with_issues: int = 0
    issues: list[LinkIssue] = field(default_factory=list)
    fixed: list[LinkIssue] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def count(self, status: IssueStatus) -> int:
        return sum(1 for issue in self.issues if issue.status is status)

    @property
    def total_issues(self) -> int:
        return len(self.issues)

    @property
    def auto_fixable(self) -> int:
        return self.count(IssueStatus.AUTO_FIXABLE)

    @property
    def needs_review(self) -> int:
        return self.count(IssueStatus.NEEDS_REVIEW)

    @property
    def manual_check(self) -> int:
        return self.count(IssueStatus.MANUAL_CHECK)

    @property
    def remaining(self) -> int:
        """Issues still outstanding after the fixing pass."""
        return self.total_issues - len(self.fixed)

    @property
    def is_clean(self) -> bool:
        return self.remaining == 0 and not self.errors

    def to_output(self) -> dict[str, Any]:
        """Fields shared with LinksCheckOutput."""
        return {
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "docs_root": str(self.docs_root),
            "mode": "write" if self.write else "dry-run",
            "files_scanned": self.files_scanned,
            "files_with_issues": self.files_with_issues,
            "total_issues": self.total_issues,
            "auto_fixable": self.auto_fixable,
            "needs_review": self.needs_review,
            "manual_check": self.manual_check,
            "fixed": len(self.fixed),
            "remaining": self.remaining,
            "issues": [issue.to_dict() for issue in self.issues],
        }
