"""Documentation link checking domain."""

from .check_docs import check_docs
from .CheckSummary import CheckSummary
from .extract_anchors import extract_anchors
from .heading_to_anchor import heading_to_anchor
from .IssueKind import IssueKind
from .IssueStatus import IssueStatus
from .iter_markdown_files import iter_markdown_files
from .LinkIssue import LinkIssue
from .LinkResolver import LinkResolver
from .parse_site_links import parse_site_links
from .SplitHref import SplitHref

__all__ = [
    "CheckSummary",
    "IssueKind",
    "IssueStatus",
    "LinkIssue",
    "LinkResolver",
    "SplitHref",
    "check_docs",
    "extract_anchors",
    "heading_to_anchor",
    "iter_markdown_files",
    "parse_site_links",
]
