"""Link issue model (UNO: single model)."""

from dataclasses import dataclass, field
from typing import Any

from .IssueKind import IssueKind
from .IssueStatus import IssueStatus
from .SiteLink import SiteLink


@dataclass
class LinkIssue:
    """One unresolved link or anchor, owned by a document."""

    file: str
    kind: IssueKind
    status: IssueStatus
    link: SiteLink
    suggested_fix: str | None = None
    found_at: str | None = None
    candidates: list[str] = field(default_factory=list)
    message: str = ""

    @property
    def is_fixable(self) -> bool:
        return self.status is IssueStatus.AUTO_FIXABLE and self.suggested_fix is not None

    def to_dict(self) -> dict[str, Any]:
        target = self.link.target
        return {
            "file": self.file,
            "kind": self.kind.value,
            "status": self.status.value,
            "link_text": self.link.text,
            "href": self.link.href,
            "link_path": target.path,
            "anchor": target.fragment,
            "suggested_fix": self.suggested_fix,
            "found_at": self.found_at,
            "candidates": list(self.candidates),
            "message": self.message,
        }
