"""Line-oriented check report."""

from typing import Any

from .IssueStatus import IssueStatus

RULE = "─" * 60


def format_report(output: dict[str, Any]) -> list[str]:
    """Render a LinksCheckOutput dict as report lines, grouped per file."""
    write = output["mode"] == "write"
    lines = [
        "",
        f"Validating docs in: {output['docs_root']}",
        f"Mode: {'WRITE MODE' if write else 'DRY RUN (use --write to fix)'}",
        "",
        f"Found {output['files_scanned']} markdown files",
    ]

    current_file = None
    for issue in output["issues"]:
        if issue["file"] != current_file:
            current_file = issue["file"]
            lines.extend(["", current_file])
        lines.extend(_issue_lines(issue))

    if output["errors"]:
        lines.extend(["", "Errors:"])
        lines.extend(f"   {error}" for error in output["errors"])
    if output["warnings"]:
        lines.extend(["", "Warnings:"])
        lines.extend(f"   {warning}" for warning in output["warnings"])

    lines.extend(
        [
            "",
            RULE,
            "",
            "Summary:",
            f"   Files scanned: {output['files_scanned']}",
            f"   Files with issues: {output['files_with_issues']}",
            f"   Total issues: {output['total_issues']}",
        ]
    )

    if output["total_issues"]:
        lines.extend(
            [
                "",
                "   Breakdown:",
                f"     Auto-fixable:  {output['auto_fixable']}",
                f"     Needs review:  {output['needs_review']}",
                f"     Manual check:  {output['manual_check']}",
            ]
        )
    if write:
        lines.extend([f"     Fixed:         {output['fixed']}", f"     Remaining:     {output['remaining']}"])

    if output["total_issues"] == 0:
        lines.extend(["", "   All links valid!"])
    elif not write and output["auto_fixable"]:
        lines.extend(["", f"Run with --write to auto-fix {output['auto_fixable']} issue(s)"])

    lines.append("")
    return lines


def _issue_lines(issue: dict[str, Any]) -> list[str]:
    status = IssueStatus(issue["status"])
    head = f"  {status.tag} {issue['href']}"
    if status is IssueStatus.AUTO_FIXABLE:
        return [head, f"     -> {issue['suggested_fix']}"]
    if status is IssueStatus.NEEDS_REVIEW:
        return [head, "     Multiple matches found:", *(f"       - {candidate}" for candidate in issue["candidates"])]
    if status is IssueStatus.MANUAL_CHECK:
        return [head, f"     {issue['message']}"]
    raise ValueError(f"Valid links are not reported: {issue['href']}")
