"""Broken link target search."""

from collections.abc import Iterable
from pathlib import Path

from ._constants import INDEX_FILENAME, MARKDOWN_SUFFIX


def find_candidates(link_path: str, documents: Iterable[Path], root: Path) -> list[Path]:
    """Search the document snapshot for files a broken link probably meant.

    The last path segment gives the expected file name, the one before it the
    expected parent directory. A file matching both is returned alone. Other
    matches are files with the expected name anywhere, and ``index.md`` files
    inside a directory named like the expected file.

    Args:
        link_path: Path portion of the broken link, mount prefix already stripped
        documents: Document snapshot, in scan order
        root: Documentation root

    Returns:
        Candidate documents, empty if nothing matches
    """
    parts = link_path.strip("/").split("/")
    stem = parts[-1].removesuffix(MARKDOWN_SUFFIX)
    file_name = f"{stem}{MARKDOWN_SUFFIX}"
    parent_dir = parts[-2] if len(parts) > 1 else None

    matches: list[Path] = []
    for doc in documents:
        if doc.name == file_name:
            if parent_dir and doc.parent.name == parent_dir:
                return [doc]
            matches.append(doc)
        elif doc.name == INDEX_FILENAME and doc.parent != root and doc.parent.name == stem:
            matches.append(doc)

    return matches
