"""Build the scanner's exclusion predicate."""

from collections.abc import Callable, Iterable
from pathlib import Path

from ._constants import HIDDEN_PREFIXES


def make_exclude_predicate(exclude_dirnames: Iterable[str] = ()) -> Callable[[Path], bool]:
    """Return a predicate telling the scanner which entries to skip.

    Entries whose name starts with ``_`` or ``.`` are always skipped, as are
    entries named in ``exclude_dirnames``.
    """
    names = frozenset(exclude_dirnames)

    def exclude(path: Path) -> bool:
        return path.name.startswith(HIDDEN_PREFIXES) or path.name in names

    return exclude
