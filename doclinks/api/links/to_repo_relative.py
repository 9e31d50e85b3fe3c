"""Convert a markdown href to its canonical repo-relative form."""

import os
from pathlib import Path

from ._constants import EXTERNAL_PREFIXES, INDEX_FILENAME, MARKDOWN_SUFFIX
from .SplitHref import SplitHref


def to_repo_relative(href: str, current_file: Path, root: Path, mount_prefix: str = "/docs") -> str | None:
    """Rewrite href as ``{mount_prefix}/<path>.md`` (query and anchor kept).

    - ``./file.md`` and ``../other/file.md`` resolve from the linking file
    - ``/path/page/`` resolves from the docs root to ``page/index.md`` or ``page.md``
    - ``{mount_prefix}/...`` stays under the docs root

    Returns:
        The new href, or None for links that are left alone (external,
        anchor-only, non-markdown assets, or targets outside the docs root)
    """
    if "://" in href or href.startswith(EXTERNAL_PREFIXES) or href.startswith("#"):
        return None

    target = SplitHref.parse(href)
    path_portion = target.path
    if not path_portion:
        return None

    is_directory = path_portion.endswith("/")
    extension = os.path.splitext(path_portion.rstrip("/"))[1].lower()
    if extension and extension != MARKDOWN_SUFFIX and not is_directory:
        return None

    root = Path(root)
    if mount_prefix and path_portion.startswith(f"{mount_prefix}/"):
        absolute = os.path.join(root, path_portion[len(mount_prefix) + 1 :])
    elif path_portion.startswith("/"):
        absolute = os.path.join(root, path_portion.lstrip("/"))
    else:
        absolute = os.path.join(Path(current_file).parent, path_portion)

    rel = Path(os.path.relpath(os.path.normpath(absolute), root)).as_posix()
    if rel == ".":
        rel = ""
    if rel == ".." or rel.startswith("../"):
        return None

    if is_directory:
        if (root / rel / INDEX_FILENAME).is_file():
            rel = f"{rel}/{INDEX_FILENAME}" if rel else INDEX_FILENAME
        elif rel and (root / f"{rel}{MARKDOWN_SUFFIX}").is_file():
            rel = f"{rel}{MARKDOWN_SUFFIX}"
        else:
            # Neither exists; the index form is reported as a potential broken link
            rel = f"{rel}/{INDEX_FILENAME}" if rel else INDEX_FILENAME
    elif not rel.endswith(MARKDOWN_SUFFIX):
        rel = f"{rel}{MARKDOWN_SUFFIX}"

    return str(target.with_path(f"{mount_prefix}/{rel}"))


def repo_relative_exists(href: str, root: Path, mount_prefix: str = "/docs") -> bool:
    """True if a repo-relative href produced by to_repo_relative points at a file."""
    path = SplitHref.parse(href).path
    if mount_prefix and path.startswith(f"{mount_prefix}/"):
        path = path[len(mount_prefix) + 1 :]
    return (Path(root) / path.lstrip("/")).is_file()
