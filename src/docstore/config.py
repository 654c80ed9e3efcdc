"""Store configuration: settings schema, config.yaml loader and logging setup"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:     str = "docstore"
    save_mode:    str = Field(default="append-only", pattern="^(append-only|upsert)$",
                              description="append-only ignores id-carrying docs; upsert replaces by id")
    range_policy: str = Field(default="unbounded", pattern="^(unbounded|reject)$",
                              description="How search treats a missing created_from/created_to bound")
    log_level:    str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                              description="Level applied to the docstore logger")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCSTORE_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def configure_logging(settings: Settings) -> logging.Logger:
    """Apply settings.log_level to the package logger. Installs no handlers."""
    logger = logging.getLogger("docstore")
    logger.setLevel(settings.log_level)
    return logger
