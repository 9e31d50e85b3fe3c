"""Links normalize API command.

CLI: doclinks links normalize [--write] [--root PATH]
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .._output_schemas.links import LinksNormalizeOutput
from ..StageResult import StageResult


def cmd_normalize(root: str | None = None, write: bool = False) -> StageResult:
    """Rewrite relative and route-style links to ``/docs/<path>.md`` form.

    Args:
        root: Documentation root; defaults to the configured docs_root.
        write: Write the rewritten files (default is a dry run).
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.DocLinksConfig import DocLinksConfig
        from ..log.get_logger import get_logger
        from .iter_markdown_files import iter_markdown_files
        from .make_exclude_predicate import make_exclude_predicate
        from .normalize_text import normalize_text
        from .to_repo_relative import repo_relative_exists

        logger = get_logger("links")
        mode = "write" if write else "dry-run"
        changes: list[dict[str, Any]] = []
        broken: list[dict[str, Any]] = []
        errors: list[str] = []
        files_changed = 0

        yield (0.1, "Loading configuration...")
        try:
            config = DocLinksConfig.load()
            if root is not None:
                config = config.model_copy(update={"docs_root": str(Path(root).expanduser().absolute())})
            documents = iter_markdown_files(config.root, make_exclude_predicate(config.exclude_dirnames))
        except (ValueError, OSError) as e:
            result_obj.output = LinksNormalizeOutput(
                errors=[str(e)],
                warnings=[],
                docs_root=root or "",
                mode=mode,
                files_scanned=0,
                files_changed=0,
                total_changes=0,
                changes=[],
                broken=[],
            ).model_dump(mode="python")
            result_obj.result = f"Link normalization failed: {e}"
            result_obj.success = False
            return

        yield (0.3, f"Rewriting links in {len(documents)} files...")
        for path in documents:
            rel = path.relative_to(config.root).as_posix()
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.error(f"Cannot read {rel}: {exc}")
                errors.append(f"Cannot read {rel}: {exc}")
                continue

            updated, file_changes = normalize_text(content, path, config.root, config.mount_prefix)
            if not file_changes:
                continue

            files_changed += 1
            for old, new in file_changes:
                valid = repo_relative_exists(new, config.root, config.mount_prefix)
                changes.append({"file": rel, "from": old, "to": new, "valid": valid})
                if not valid:
                    broken.append({"file": rel, "link": new, "original": old})

            if write:
                path.write_text(updated, encoding="utf-8")
                logger.info(f"Normalized {len(file_changes)} link(s) in {rel}")

        yield (1.0, "Complete")
        result_obj.output = LinksNormalizeOutput(
            errors=errors,
            warnings=[f"Potential broken link in {b['file']}: {b['link']}" for b in broken],
            docs_root=config.docs_root,
            mode=mode,
            files_scanned=len(documents),
            files_changed=files_changed,
            total_changes=len(changes),
            changes=changes,
            broken=broken,
        ).model_dump(mode="python")
        verb = "Rewrote" if write else "Would rewrite"
        result_obj.result = f"{verb} {len(changes)} link(s) in {files_changed} file(s)"
        result_obj.success = not errors

    return StageResult(
        announce=f"Normalizing documentation links{' (write mode)' if write else ''}...",
        progress_callback=do_work,
    )
