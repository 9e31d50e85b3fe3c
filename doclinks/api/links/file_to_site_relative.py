"""Document path to site URL conversion."""

from pathlib import Path

from ._constants import INDEX_FILENAME, MARKDOWN_SUFFIX


def file_to_site_relative(path: Path, root: Path) -> str:
    """Convert a document path to its pretty site URL.

    ``guides/index.md`` becomes ``/guides/`` and ``guides/setup.md`` becomes
    ``/guides/setup/``.
    """
    relative = "/" + Path(path).relative_to(root).as_posix()
    if relative.endswith(f"/{INDEX_FILENAME}"):
        return relative[: -len(INDEX_FILENAME)]
    if relative.endswith(MARKDOWN_SUFFIX):
        return relative[: -len(MARKDOWN_SUFFIX)] + "/"
    return relative
