"""Output schemas for links commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinksCheckOutput(BaseOutputSchema):
    """Output schema for links check command.

    Output structure:
    - errors: list[str] - read failures and fatal errors
    - warnings: list[str] - fixes that could not be applied
    - docs_root: str - documentation root that was scanned
    - mode: str - "dry-run" or "write"
    - files_scanned / files_with_issues / total_issues: int - run totals
    - auto_fixable / needs_review / manual_check: int - per-status counts
    - fixed: int - fixes written to disk (always 0 in dry-run)
    - remaining: int - issues still outstanding after fixing
    - issues: list[dict] - one entry per broken link or anchor
    """

    docs_root: str = Field(..., description="Documentation root that was scanned")
    mode: str = Field(..., description="'dry-run' or 'write'")
    files_scanned: int = Field(..., description="Number of markdown files scanned")
    files_with_issues: int = Field(..., description="Number of files with at least one issue")
    total_issues: int = Field(..., description="Total number of issues found")
    auto_fixable: int = Field(..., description="Issues with exactly one candidate")
    needs_review: int = Field(..., description="Issues with several candidates")
    manual_check: int = Field(..., description="Issues with no candidate and broken anchors")
    fixed: int = Field(..., description="Number of fixes written to disk")
    remaining: int = Field(..., description="Issues outstanding after fixing")
    issues: list[dict[str, Any]] = Field(..., description="Issue records")


class LinksNormalizeOutput(BaseOutputSchema):
    """Output schema for links normalize command."""

    docs_root: str = Field(..., description="Documentation root that was scanned")
    mode: str = Field(..., description="'dry-run' or 'write'")
    files_scanned: int = Field(..., description="Number of markdown files scanned")
    files_changed: int = Field(..., description="Number of files with at least one rewritten link")
    total_changes: int = Field(..., description="Number of rewritten links")
    changes: list[dict[str, Any]] = Field(..., description="Rewrites as {file, from, to, valid}")
    broken: list[dict[str, Any]] = Field(..., description="Rewrites whose new target does not exist")


register_output_schema("links", "check", LinksCheckOutput)
register_output_schema("links", "normalize", LinksNormalizeOutput)
