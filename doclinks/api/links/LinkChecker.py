"""Per-document link checking (UNO: single class)."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..log.get_logger import get_logger
from ._constants import MARKDOWN_SUFFIX
from .classify_broken_link import classify_broken_link
from .extract_anchors import extract_anchors
from .find_candidates import find_candidates
from .IssueKind import IssueKind
from .IssueStatus import IssueStatus
from .LinkIssue import LinkIssue
from .LinkResolver import LinkResolver
from .parse_site_links import parse_site_links
from .SiteLink import SiteLink


class LinkChecker:
    """Validate the site-relative links of documents against a fixed snapshot."""

    def __init__(
        self,
        root: Path,
        documents: Iterable[Path],
        mount_prefix: str = "/docs",
        static_asset_extensions: Iterable[str] = (),
        custom_routes: Iterable[str] = (),
    ):
        self.root = Path(root)
        # Snapshot: candidates never change while files are being rewritten
        self.documents: tuple[Path, ...] = tuple(documents)
        self.resolver = LinkResolver(self.root, self.documents, mount_prefix)
        self.static_asset_extensions = tuple(ext.lower() for ext in static_asset_extensions)
        self.custom_routes = frozenset(custom_routes)
        # Anchor sets per target; None marks a target that could not be read
        self._anchors: dict[Path, set[str] | None] = {}
        self.errors: list[str] = []

    def relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def is_skipped(self, link_path: str) -> bool:
        """Static assets and custom page routes are not documents."""
        return link_path.lower().endswith(self.static_asset_extensions) or link_path in self.custom_routes

    def check_text(self, path: Path, content: str) -> list[LinkIssue]:
        """Check every site-relative link of one document.

        An anchor target that cannot be read is recorded once in ``errors``
        and its anchors are not checked; the other links are still checked.
        """
        file = self.relative(path)
        issues: list[LinkIssue] = []

        for link in parse_site_links(content):
            link_path = link.target.path
            if self.is_skipped(link_path):
                continue

            target = self.resolver.resolve(link_path)
            if target is None:
                search_path = self.resolver.strip_mount_prefix(link_path)
                candidates = find_candidates(search_path, self.documents, self.root)
                issues.append(classify_broken_link(file, link, candidates, self.root))
                continue

            anchor_issue = self._check_anchor(file, link, target)
            if anchor_issue is not None:
                issues.append(anchor_issue)

        return issues

    def _check_anchor(self, file: str, link: SiteLink, target: Path) -> LinkIssue | None:
        anchor = link.target.fragment
        if anchor is None or target.suffix != MARKDOWN_SUFFIX:
            return None

        anchors = self._target_anchors(target)
        if anchors is None or anchor in anchors:
            return None

        return LinkIssue(
            file=file,
            kind=IssueKind.BROKEN_ANCHOR,
            status=IssueStatus.MANUAL_CHECK,
            link=link,
            message=f'Anchor "#{anchor}" not found',
        )

    def _target_anchors(self, target: Path) -> set[str] | None:
        if target not in self._anchors:
            try:
                self._anchors[target] = extract_anchors(target.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError) as exc:
                message = f"Cannot read anchor target {self.relative(target)}: {exc}"
                get_logger("links").error(message)
                self.errors.append(message)
                self._anchors[target] = None
        return self._anchors[target]
