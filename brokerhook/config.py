"""Configuration management with Pydantic Settings + optional YAML."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from brokerhook.webhooks.template import DEFAULT_PLACEHOLDER


class WebhookConfig(BaseModel):
    timeout: float = 10.0
    connect_timeout: float = 5.0
    placeholder: str = DEFAULT_PLACEHOLDER
    ca_bundle: str = ""  # empty: platform trust store


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BROKERHOOK_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    webhook: WebhookConfig = Field(default_factory=WebhookConfig)
    log_level: str = "INFO"
    log_json: bool = False


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from env vars, optionally overlaying a YAML config."""
    yaml_data: dict[str, Any] = {}

    if config_path is None:
        config_path = os.environ.get("BROKERHOOK_CONFIG")

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                yaml_data = yaml.safe_load(f) or {}

    # YAML values are init kwargs; pydantic-settings gives init precedence,
    # so env vars only fill what the file leaves unset.
    return Settings(**yaml_data)
