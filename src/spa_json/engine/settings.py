"""Settings loading — optional ``spa-json.yaml`` next to where the CLI runs."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from spa_json.io.fileops import read_text_safe

SETTINGS_FILENAME = "spa-json.yaml"


class Settings(BaseModel):
    """Defaults for the ``convert`` and ``render`` commands."""

    model_config = ConfigDict(extra="forbid")

    output_suffix: str = ".spa-json"
    input_format: Literal["auto", "json", "yaml"] = "auto"
    backup: bool = False
    overwrite: bool = True

    @classmethod
    def load(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file. Raises ValueError if invalid."""
        text = read_text_safe(path)
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Cannot parse settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError("Settings file must be a mapping/object.")
        try:
            return cls(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings in {path}: {e}") from e

    @classmethod
    def load_from_dir(cls, directory: str | Path) -> "Settings":
        """Load spa-json.yaml from a directory, or return defaults if absent."""
        path = Path(directory) / SETTINGS_FILENAME
        if path.exists():
            return cls.load(path)
        return cls()


def resolve_settings(config: str | None, directory: str | Path = ".") -> Settings:
    """Use an explicit ``--config`` file when given, else look in ``directory``."""
    if config:
        return Settings.load(config)
    return Settings.load_from_dir(directory)
