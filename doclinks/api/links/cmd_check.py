"""Links check API command.

CLI: doclinks links check [--write] [--root PATH]
"""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.links import LinksCheckOutput
from ..StageResult import StageResult


def cmd_check(root: str | None = None, write: bool = False) -> StageResult:
    """Check site-relative links and anchors in the documentation tree.

    Args:
        root: Documentation root; defaults to the configured docs_root.
        write: Apply auto-fixable repairs in place (default is a dry run).
    """

    def _fail(result_obj: StageResult, docs_root: str, message: str) -> None:
        result_obj.output = LinksCheckOutput(
            errors=[message],
            warnings=[],
            docs_root=docs_root,
            mode="write" if write else "dry-run",
            files_scanned=0,
            files_with_issues=0,
            total_issues=0,
            auto_fixable=0,
            needs_review=0,
            manual_check=0,
            fixed=0,
            remaining=0,
            issues=[],
        ).model_dump(mode="python")
        result_obj.result = f"Link check failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.DocLinksConfig import DocLinksConfig
        from .check_docs import check_docs
        from .make_exclude_predicate import make_exclude_predicate

        yield (0.1, "Loading configuration...")
        try:
            config = DocLinksConfig.load()
            if root is not None:
                config = config.model_copy(update={"docs_root": str(Path(root).expanduser().absolute())})
        except ValueError as e:
            _fail(result_obj, root or "", f"Failed to load config: {e}")
            return

        yield (0.3, f"Scanning {config.docs_root}...")
        try:
            summary = check_docs(
                config.root,
                write=write,
                exclude=make_exclude_predicate(config.exclude_dirnames),
                mount_prefix=config.mount_prefix,
                static_asset_extensions=config.static_asset_extensions,
                custom_routes=config.custom_routes,
            )
        except OSError as e:
            _fail(result_obj, config.docs_root, str(e))
            return

        yield (0.9, "Building report...")
        result_obj.output = LinksCheckOutput(**summary.to_output()).model_dump(mode="python")
        result_obj.success = summary.is_clean

        if summary.total_issues == 0 and not summary.errors:
            result_obj.result = f"All links valid ({summary.files_scanned} files)"
        elif write:
            result_obj.result = f"{len(summary.fixed)} fixed, {summary.remaining} remaining"
        else:
            result_obj.result = f"{summary.total_issues} issue(s) in {summary.files_with_issues} file(s)"
        if summary.errors:
            result_obj.result += f", {len(summary.errors)} unreadable file(s)"
        yield (1.0, "Complete")

    announce = f"Checking documentation links{' (write mode)' if write else ''}..."
    return StageResult(
        announce=announce,
        progress_callback=do_work,
    )
