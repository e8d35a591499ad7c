"""Global app configuration (example message role, default budget, token estimate)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .models import ExampleRole

logger = logging.getLogger(__name__)

_data_dir: Path | None = None

_CONFIG_DEFAULTS: dict[str, Any] = {
    "example_message_role": "system",
    "default_budget": None,
    "chars_per_token": 4,
}


class Settings(BaseModel):
    """Validated shape of config.json."""

    example_message_role: ExampleRole = "system"
    default_budget: int | None = Field(default=None, ge=0)
    chars_per_token: int = Field(default=4, gt=0)


def init_config(data_dir: Path) -> None:
    global _data_dir
    _data_dir = data_dir


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_config() before using config"
    return _data_dir


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config = dict(_CONFIG_DEFAULTS)
    path = _config_path()
    if path.is_file():
        stored = json.loads(path.read_text())
        for key in _CONFIG_DEFAULTS:
            if key in stored:
                config[key] = stored[key]
    return config


def get_settings() -> Settings:
    return Settings.model_validate(get_config())


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into config and persist. Returns full config.

    Raises pydantic.ValidationError if the merged config is invalid; nothing
    is written in that case.
    """
    config = get_config()
    for key, value in fields.items():
        if key not in _CONFIG_DEFAULTS:
            logger.warning("Ignoring unknown config key %r", key)
            continue
        config[key] = value
    config = Settings.model_validate(config).model_dump()
    path = _config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2))
    return config
