"""Site-relative link resolver (UNO: single class)."""

from __future__ import annotations

import posixpath
from collections.abc import Iterable
from pathlib import Path

from ._constants import INDEX_FILENAME, MARKDOWN_SUFFIX


class LinkResolver:
    """Resolve site-relative link paths against a snapshot of the docs tree.

    Markdown targets must be part of the document snapshot taken before any
    file is rewritten. Other targets (downloads, data files) are looked up on
    disk.
    """

    def __init__(self, root: Path, documents: Iterable[Path], mount_prefix: str = "/docs"):
        self.root = Path(root)
        self.mount_prefix = mount_prefix.rstrip("/")
        self._documents = frozenset(Path(doc).relative_to(self.root).as_posix() for doc in documents)

    def strip_mount_prefix(self, link_path: str) -> str:
        """Drop the repo-relative mount prefix, keeping the leading slash."""
        prefix = self.mount_prefix
        if prefix and link_path.startswith(f"{prefix}/"):
            return link_path[len(prefix) :]
        return link_path

    def resolve(self, link_path: str) -> Path | None:
        """Return the document a path-only link points to, or None.

        ``/a/`` tries ``a.md`` then ``a/index.md``; ``/a`` tries ``a`` then
        ``a.md`` and never falls back to a directory index.
        """
        check_path = self.strip_mount_prefix(link_path)

        if check_path.endswith("/"):
            stem = check_path[:-1]
            for rel in (f"{stem}{MARKDOWN_SUFFIX}" if stem else None, f"{check_path}{INDEX_FILENAME}"):
                found = self._lookup(rel)
                if found is not None:
                    return found
            return None

        found = self._lookup(check_path)
        if found is not None:
            return found
        return self._lookup(f"{check_path}{MARKDOWN_SUFFIX}")

    def _lookup(self, site_path: str | None) -> Path | None:
        if not site_path:
            return None
        rel = posixpath.normpath(site_path.lstrip("/"))
        if rel == ".." or rel.startswith("../"):
            return None
        if rel in self._documents:
            return self.root / rel
        if not rel.endswith(MARKDOWN_SUFFIX) and (self.root / rel).is_file():
            return self.root / rel
        return None
