"""SiteLink model (UNO: single model)."""

from dataclasses import dataclass

from .SplitHref import SplitHref


@dataclass(frozen=True)
class SiteLink:
    """A ``[text](/target)`` link found in a document."""

    text: str
    href: str

    @property
    def target(self) -> SplitHref:
        return SplitHref.parse(self.href)

    @property
    def markdown(self) -> str:
        """The exact markdown source of the link."""
        return f"[{self.text}]({self.href})"

    def with_href(self, href: str) -> str:
        """Markdown source of the same link pointing elsewhere."""
        return f"[{self.text}]({href})"
