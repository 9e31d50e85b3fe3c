"""Site href API command.

CLI: doclinks site href HREF [--base BASE]
"""

from collections.abc import Iterator

from .._output_schemas.site import SiteHrefOutput
from ..StageResult import StageResult


def cmd_href(href: str, base: str | None = None) -> StageResult:
    """Show how the site build rewrites an href.

    Both transforms run in site-build order: markdown links to page routes,
    then base path prefixing.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.DocLinksConfig import DocLinksConfig
        from .prefix_base_path import prefix_base_path
        from .resolve_base import resolve_base
        from .rewrite_markdown_href import rewrite_markdown_href

        yield (0.2, "Resolving base path...")
        try:
            config = DocLinksConfig.load()
            effective_base = base if base is not None else resolve_base(config.site)
        except ValueError as e:
            result_obj.output = SiteHrefOutput(
                errors=[str(e)], warnings=[], href=href, base=base or "", rewritten=href
            ).model_dump(mode="python")
            result_obj.result = f"Failed to resolve base path: {e}"
            result_obj.success = False
            return

        yield (0.6, "Rewriting href...")
        rewritten = rewrite_markdown_href(href, effective_base, config.mount_prefix)
        rewritten = prefix_base_path(rewritten, effective_base, skip_markdown=True)

        yield (1.0, "Complete")
        result_obj.output = SiteHrefOutput(
            errors=[], warnings=[], href=href, base=effective_base, rewritten=rewritten
        ).model_dump(mode="python")
        result_obj.result = f"{href} -> {rewritten}"
        result_obj.success = True

    return StageResult(
        announce=f"Rewriting {href}...",
        progress_callback=do_work,
    )
