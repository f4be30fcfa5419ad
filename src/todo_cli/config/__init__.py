"""
Configuration management for todo-cli.

Settings are read from `TODO_CLI_*` environment variables; every field has
a default, so an empty environment gives the standard layout.
"""

from .settings import Settings


def get_settings() -> Settings:
    """Build settings for the current invocation."""
    return Settings()


__all__ = ["Settings", "get_settings"]
