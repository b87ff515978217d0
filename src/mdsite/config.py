"""Application configuration: settings schema and mdsite.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "mdsite.yaml"


class Settings(BaseModel):
    content_dir:      str = Field(default="content", description="Root of the content tree")
    output_dir:       str = Field(default="dist",    description="Directory for rendered pages")
    words_per_minute: int = Field(default=200, ge=1, description="Reading speed for reading-time estimates")
    parser_config:    str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    workers:          int = Field(default=1, ge=1,   description="Threads for scanning; 1 loads serially")
    log_level:        str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdsite.yaml, then MDSITE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDSITE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    if isinstance(data.get("log_level"), str):
        data["log_level"] = data["log_level"].upper()
    return Settings(**data)
