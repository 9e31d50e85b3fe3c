"""Document scanner."""

import os
from collections.abc import Callable
from pathlib import Path

from ..config.DocLinksConfig import DEFAULT_EXCLUDE_DIRNAMES
from ..log.get_logger import get_logger
from ._constants import MARKDOWN_SUFFIX
from .make_exclude_predicate import make_exclude_predicate

_DEFAULT_EXCLUDE = make_exclude_predicate(DEFAULT_EXCLUDE_DIRNAMES)


def iter_markdown_files(root: Path, exclude: Callable[[Path], bool] | None = None) -> list[Path]:
    """List markdown documents under root, depth first, sorted by name.

    Symbolic links are not followed, so every document is listed once and
    link loops cannot recurse. Subdirectories that cannot be read are logged
    and skipped.

    Args:
        root: Documentation root directory
        exclude: Predicate returning True for entries (files or directories) to skip

    Returns:
        Absolute paths of every ``*.md`` file not excluded

    Raises:
        FileNotFoundError: If root does not exist
        NotADirectoryError: If root is not a directory
        OSError: If root itself cannot be read
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Documentation root not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Documentation root is not a directory: {root}")

    skip = exclude or _DEFAULT_EXCLUDE
    logger = get_logger("links")
    files: list[Path] = []

    def walk(directory: Path, is_root: bool) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            if is_root:
                raise
            logger.debug(f"Skipping unreadable directory {directory}: {exc}")
            return

        for entry in entries:
            path = Path(entry.path)
            if skip(path):
                continue
            if entry.is_dir(follow_symlinks=False):
                walk(path, False)
            elif entry.is_file(follow_symlinks=False) and entry.name.endswith(MARKDOWN_SUFFIX):
                files.append(path)

    walk(root, True)
    return files
