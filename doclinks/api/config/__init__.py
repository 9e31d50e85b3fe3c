"""Configuration domain."""

from .DocLinksConfig import DocLinksConfig
from .LogConfig import LogConfig
from .SiteConfig import SiteConfig

__all__ = ["DocLinksConfig", "LogConfig", "SiteConfig"]
