"""Site build configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SiteConfig(BaseModel):
    """Settings shared with the site generator."""

    model_config = ConfigDict(extra="forbid")

    url: str | None = Field(None, description="Published site URL; resolved from the environment when unset")
    base: str | None = Field(None, description="Deployment base path, e.g. '/my-project/'; derived from the URL when unset")

    @field_validator("base")
    @classmethod
    def _require_absolute_base(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith("/"):
            raise ValueError("site.base must start with '/'")
        return v
