"""Configuration for the persian-shaper command-line tools.

Settings come from a YAML file. Lookup order: an explicit path, then the
``PERSIAN_SHAPER_CONFIG`` environment variable, then
``~/.config/persian-shaper/config.yaml``. A missing default file is fine and
yields defaults; a missing explicit file is an error.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from persian_shaper.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PERSIAN_SHAPER_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "persian-shaper" / "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "codepoints", "json")


@dataclass
class Config:
    """Settings shared by the CLI commands."""

    log_level: str = "WARNING"
    output_format: str = "text"
    per_line: bool = True
    encoding: str = "utf-8"
    font_number: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check every field.

        Raises:
            ConfigError: Naming the first invalid key.
        """
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}", key="log_level"
            )
        self.log_level = self.log_level.upper()

        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}",
                key="output_format",
            )
        if not isinstance(self.per_line, bool):
            raise ConfigError("per_line must be a boolean", key="per_line")
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ConfigError("encoding must be a non-empty string", key="encoding")
        # bool is an int subclass
        if (
            not isinstance(self.font_number, int)
            or isinstance(self.font_number, bool)
            or self.font_number < 0
        ):
            raise ConfigError("font_number must be a non-negative integer", key="font_number")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                raise ConfigError(f"Unknown config key: {key}", key=key)
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def resolve_path(cls, path: Path | None = None) -> tuple[Path, bool]:
        """Return the config path to read and whether it was asked for explicitly."""
        if path is not None:
            return Path(path), True
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path), True
        return DEFAULT_CONFIG_PATH, False

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from YAML.

        Args:
            path: Explicit config file. Overrides the environment and default.

        Returns:
            The loaded Config, or defaults when no file applies.

        Raises:
            ConfigError: If an explicit file is missing, the YAML is malformed,
                or a value is invalid.
        """
        config_path, explicit = cls.resolve_path(path)

        if not config_path.exists():
            if explicit:
                raise ConfigError(f"Config file not found: {config_path}")
            return cls()

        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        logger.debug("Loaded config from %s", config_path)

        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise ConfigError(f"Config root must be a mapping: {config_path}")
        return cls.from_dict(raw)
