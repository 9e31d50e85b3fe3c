"""Output schemas for API commands - enforces consistent output structure.

Each command has a Pydantic model that defines its output structure.
All fields must always be present (even if empty) to ensure consistency.
Importing this package registers every schema.
"""

from . import config, links, site
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = [
    "BaseOutputSchema",
    "config",
    "get_output_schema",
    "links",
    "register_output_schema",
    "site",
]
