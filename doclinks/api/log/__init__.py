"""Logging domain."""

from ._setup import configure_logging, reset_logging
from .get_logger import get_logger

__all__ = ["configure_logging", "get_logger", "reset_logging"]
