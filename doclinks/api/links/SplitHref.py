"""Href split into path, query and anchor (UNO: single model)."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SplitHref:
    """A link target split at the first ``?`` or ``#``.

    ``query`` keeps its leading ``?`` and ``anchor`` its leading ``#`` so that
    ``str()`` reproduces the original href. A query can only precede an anchor;
    a ``?`` after the ``#`` belongs to the anchor.
    """

    path: str
    query: str = ""
    anchor: str = ""

    @classmethod
    def parse(cls, href: str) -> SplitHref:
        delimiters = [i for i in (href.find("?"), href.find("#")) if i != -1]
        if not delimiters:
            return cls(path=href)

        cut = min(delimiters)
        path, suffix = href[:cut], href[cut:]
        if not suffix.startswith("?"):
            return cls(path=path, anchor=suffix)

        hash_at = suffix.find("#")
        if hash_at == -1:
            return cls(path=path, query=suffix)
        return cls(path=path, query=suffix[:hash_at], anchor=suffix[hash_at:])

    @property
    def fragment(self) -> str | None:
        """Anchor without the ``#``, or None when there is no (or an empty) anchor."""
        return self.anchor[1:] or None

    def with_path(self, path: str) -> SplitHref:
        """Same query and anchor on a different path."""
        return replace(self, path=path)

    def __str__(self) -> str:
        return f"{self.path}{self.query}{self.anchor}"
