"""Site url API command.

CLI: doclinks site url
"""

from collections.abc import Iterator

from .._output_schemas.site import SiteUrlOutput
from ..StageResult import StageResult


def cmd_url() -> StageResult:
    """Resolve the published site URL (config, SITE_URL, GITHUB_REPOSITORY, localhost)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.DocLinksConfig import DocLinksConfig
        from .resolve_base import resolve_site_url

        yield (0.5, "Resolving site URL...")
        try:
            url = resolve_site_url(DocLinksConfig.load().site)
        except ValueError as e:
            result_obj.output = SiteUrlOutput(errors=[str(e)], warnings=[], url="").model_dump(mode="python")
            result_obj.result = f"Failed to resolve site URL: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = SiteUrlOutput(errors=[], warnings=[], url=url).model_dump(mode="python")
        result_obj.result = url
        result_obj.success = True

    return StageResult(
        announce="Resolving site URL...",
        progress_callback=do_work,
    )
