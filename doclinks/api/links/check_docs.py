"""Single-pass link check over a documentation tree."""

from collections.abc import Callable, Iterable
from pathlib import Path

from ..log.get_logger import get_logger
from .apply_fixes import apply_fixes
from .CheckSummary import CheckSummary
from .iter_markdown_files import iter_markdown_files
from .LinkChecker import LinkChecker


def check_docs(
    root: Path,
    write: bool = False,
    exclude: Callable[[Path], bool] | None = None,
    mount_prefix: str = "/docs",
    static_asset_extensions: Iterable[str] = (),
    custom_routes: Iterable[str] = (),
    on_file: Callable[[int, int, Path], None] | None = None,
) -> CheckSummary:
    """Validate every site-relative link under root, optionally fixing them.

    The document list is snapshotted once before any file is rewritten.

    Args:
        root: Documentation root
        write: Apply auto-fixable repairs in place
        exclude: Scanner exclusion predicate (defaults to the built-in rules)
        mount_prefix: Repo-relative prefix stripped from link paths
        static_asset_extensions: Link extensions that are never validated
        custom_routes: Site routes that are never validated
        on_file: Called with (index, total, path) before each document

    Returns:
        The run's CheckSummary

    Raises:
        FileNotFoundError: If root does not exist
        NotADirectoryError: If root is not a directory
        OSError: If a fix cannot be written back
    """
    logger = get_logger("links")
    root = Path(root)
    documents = iter_markdown_files(root, exclude)
    logger.info(f"Checking {len(documents)} markdown files in {root} ({'write' if write else 'dry-run'})")

    checker = LinkChecker(
        root,
        documents,
        mount_prefix=mount_prefix,
        static_asset_extensions=static_asset_extensions,
        custom_routes=custom_routes,
    )
    summary = CheckSummary(docs_root=root, write=write, files_scanned=len(documents))

    for index, path in enumerate(documents):
        if on_file is not None:
            on_file(index, len(documents), path)

        rel = checker.relative(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(f"Cannot check {rel}: {exc}")
            summary.errors.append(f"Cannot check {rel}: {exc}")
            continue

        issues = checker.check_text(path, content)
        if not issues:
            continue

        summary.files_with_issues += 1
        summary.issues.extend(issues)

        if not write:
            continue

        fixable = [issue for issue in issues if issue.is_fixable]
        if not fixable:
            continue
        updated, applied = apply_fixes(content, fixable)
        applied_ids = {id(issue) for issue in applied}
        for issue in fixable:
            if id(issue) not in applied_ids:
                summary.warnings.append(f"{rel}: could not apply fix for {issue.link.href}")
        if applied:
            path.write_text(updated, encoding="utf-8")
            summary.fixed.extend(applied)
            for issue in applied:
                logger.info(f"Fixed {rel}: {issue.link.href} -> {issue.suggested_fix}")

    summary.errors.extend(checker.errors)
    return summary
