"""Broken link classification."""

from pathlib import Path

from .file_to_site_relative import file_to_site_relative
from .IssueKind import IssueKind
from .IssueStatus import IssueStatus
from .LinkIssue import LinkIssue
from .SiteLink import SiteLink


def classify_broken_link(file: str, link: SiteLink, candidates: list[Path], root: Path) -> LinkIssue:
    """Turn the candidates found for a broken link into an issue.

    One candidate is auto-fixable, whether or not its parent directory
    matched. Several need review. None needs a manual check.
    """
    if len(candidates) == 1:
        target = candidates[0]
        return LinkIssue(
            file=file,
            kind=IssueKind.BROKEN_LINK,
            status=IssueStatus.AUTO_FIXABLE,
            link=link,
            suggested_fix=str(link.target.with_path(file_to_site_relative(target, root))),
            found_at=target.relative_to(root).as_posix(),
        )

    if candidates:
        return LinkIssue(
            file=file,
            kind=IssueKind.BROKEN_LINK,
            status=IssueStatus.NEEDS_REVIEW,
            link=link,
            candidates=[c.relative_to(root).as_posix() for c in candidates],
            message="Multiple matches found",
        )

    return LinkIssue(
        file=file,
        kind=IssueKind.BROKEN_LINK,
        status=IssueStatus.MANUAL_CHECK,
        link=link,
        message="File not found anywhere - may need to remove link",
    )
