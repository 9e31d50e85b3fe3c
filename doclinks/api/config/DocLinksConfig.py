"""Top-level doclinks configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .normalize_path import normalize_path
from .SiteConfig import SiteConfig

DEFAULT_EXCLUDE_DIRNAMES = [".git", "node_modules", "dist", "build", ".astro", ".venv", "__pycache__"]
DEFAULT_STATIC_ASSET_EXTENSIONS = [".zip", ".txt", ".pdf", ".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".ico"]


class DocLinksConfig(BaseModel):
    """Configuration for the link checker, the normalizer and the site transforms."""

    model_config = ConfigDict(extra="forbid")

    docs_root: str = Field("docs", description="Path to the documentation root directory", validate_default=True)
    mount_prefix: str = Field("/docs", description="Repo-relative prefix stripped from site-relative links")
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRNAMES),
        description="Directory names never scanned (in addition to '_' and '.' prefixed names)",
    )
    static_asset_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STATIC_ASSET_EXTENSIONS),
        description="Link extensions that point at static assets and are not validated",
    )
    custom_routes: list[str] = Field(
        default_factory=list, description="Site routes served outside the docs tree, never validated"
    )
    site: SiteConfig = Field(default_factory=SiteConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("docs_root")
    @classmethod
    def _normalize_docs_root(cls, v: str) -> str:
        return str(normalize_path(v))

    @field_validator("mount_prefix")
    @classmethod
    def _normalize_mount_prefix(cls, v: str) -> str:
        v = v.rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("mount_prefix must start with '/'")
        return v

    @field_validator("static_asset_extensions")
    @classmethod
    def _lowercase_extensions(cls, v: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

    @property
    def root(self) -> Path:
        """Documentation root as a Path."""
        return Path(self.docs_root)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on DOCLINKS_HOME or default to ~/.doclinks."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "DocLinksConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary for serialization."""
        return self.model_dump(mode="python")

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
