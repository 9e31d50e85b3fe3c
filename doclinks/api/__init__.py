"""API module for doclinks tools.

Functions defined here are the single source of truth for the CLI commands.
Each ``cmd_*`` function returns a StageResult following the 4-stage pattern.
"""

__all__ = []
