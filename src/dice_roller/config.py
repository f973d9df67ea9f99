"""Configuration loading from config.toml."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from dice_roller.mechanics.dice import MAX_COUNT, MAX_SIDES, DiceNotationError, parse

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


class ConfigError(ValueError):
    pass


class DiceSettings(BaseModel):
    max_count: int = Field(default=MAX_COUNT, ge=1)
    max_sides: int = Field(default=MAX_SIDES, ge=1)
    default_notation: str = "1d20"

    @model_validator(mode="after")
    def check_default_notation(self) -> DiceSettings:
        try:
            parse(self.default_notation, max_count=self.max_count, max_sides=self.max_sides)
        except DiceNotationError as exc:
            raise ValueError(f"default_notation is not usable: {exc}") from exc
        return self


class DisplaySettings(BaseModel):
    show_banner: bool = True


class LoggingSettings(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


class Settings(BaseModel):
    dice: DiceSettings = Field(default_factory=DiceSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_config(path: Path | None = None) -> Settings:
    """Load and validate config.toml; a missing default file means defaults."""
    config_path = path or DEFAULT_CONFIG_PATH
    data: dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Could not parse {config_path}: {exc}") from exc
        logger.debug("Loaded config from %s", config_path)
    elif path is not None:
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
