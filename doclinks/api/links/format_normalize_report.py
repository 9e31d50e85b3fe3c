"""Line-oriented normalize report."""

from typing import Any

from .format_report import RULE


def format_normalize_report(output: dict[str, Any]) -> list[str]:
    """Render a LinksNormalizeOutput dict as report lines."""
    write = output["mode"] == "write"
    lines = [
        "",
        f"Scanning docs in: {output['docs_root']}",
        f"Mode: {'WRITE MODE' if write else 'DRY RUN (use --write to apply changes)'}",
        "",
        f"Found {output['files_scanned']} markdown files",
    ]

    current_file = None
    for change in output["changes"]:
        if change["file"] != current_file:
            current_file = change["file"]
            lines.extend(["", current_file])
        marker = "  " if change["valid"] else "! "
        lines.extend([f"{marker}  {change['from']}", f"    -> {change['to']}"])

    lines.extend(
        [
            "",
            RULE,
            "",
            "Summary:",
            f"   Files scanned: {output['files_scanned']}",
            f"   Files with changes: {output['files_changed']}",
            f"   Total link updates: {output['total_changes']}",
        ]
    )

    if output["broken"]:
        lines.extend(["", f"!  Potential broken links ({len(output['broken'])}):"])
        lines.extend(f"   {b['file']}: {b['link']}" for b in output["broken"])
    if output["errors"]:
        lines.extend(["", "Errors:"])
        lines.extend(f"   {error}" for error in output["errors"])

    if not write and output["total_changes"]:
        lines.extend(["", "Run with --write to apply these changes"])

    lines.append("")
    return lines
