"""Output schemas for site commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class SiteHrefOutput(BaseOutputSchema):
    """Output schema for site href command."""

    href: str = Field(..., description="Original href")
    base: str = Field(..., description="Deployment base path")
    rewritten: str = Field(..., description="Href as served by the site")


class SiteUrlOutput(BaseOutputSchema):
    """Output schema for site url command."""

    url: str = Field(..., description="Resolved site URL")


register_output_schema("site", "href", SiteHrefOutput)
register_output_schema("site", "url", SiteUrlOutput)
