"""
Pydantic settings model for todo-cli configuration.

This module defines the configuration schema using pydantic-settings for
validation and environment variable overrides.
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(env_prefix="TODO_CLI_", case_sensitive=False)

    app_name: str = Field(default="todo-cli", description="Application directory name")
    data_dir: Optional[Path] = Field(
        default=None, description="Directory holding the task store and logs"
    )
    store_filename: str = Field(default="todos.json", description="Task store file name")
    log_level: str = Field(default="WARNING", description="Log level")
    log_to_file: bool = Field(default=True, description="Write daily JSON log files")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @model_validator(mode="after")
    def default_data_dir(self) -> "Settings":
        """Fall back to the platform's per-application directory."""
        if self.data_dir is None:
            self.data_dir = Path(typer.get_app_dir(self.app_name))
        return self

    @property
    def store_path(self) -> Path:
        return self.data_dir / self.store_filename

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"
