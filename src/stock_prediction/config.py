"""Configuration system using pydantic-settings with environment variable loading."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class PipelineSettings(BaseSettings):
    """Where the pipeline looks for exchange directories."""

    model_config = SettingsConfigDict(env_prefix="PIPELINE_")

    data_dir: str = "Data"  # relative to the current working directory


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    pipeline: PipelineSettings = PipelineSettings()
