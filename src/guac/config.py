from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .angle import AngleMeasure
from .errors import BadConfig, GuacError
from .radix import Radix

logger = logging.getLogger(__name__)

CONFIG_ENV = "GUAC_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "guac" / "config.toml"


class Config(BaseModel):
    """User preferences read by the engine and the front end.

    ``radix`` accepts an integer or the textual forms :meth:`Radix.parse`
    understands; ``angle_measure`` accepts a unit symbol such as ``"deg"``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    angle_measure: AngleMeasure = AngleMeasure.RADIAN
    radix: Radix = Radix.DECIMAL
    precision: int = Field(default=10, ge=0, description="significant digits for float approximations")

    @field_validator("angle_measure", mode="before")
    @classmethod
    def _parse_angle_measure(cls, value: Union[str, AngleMeasure]) -> AngleMeasure:
        if isinstance(value, AngleMeasure):
            return value
        try:
            return AngleMeasure.parse(str(value))
        except GuacError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("radix", mode="before")
    @classmethod
    def _parse_radix(cls, value: Union[int, str, Radix]) -> Radix:
        if isinstance(value, Radix):
            return value
        try:
            if isinstance(value, int):
                return Radix(value)
            if str(value).isdigit():
                return Radix(int(value))
            return Radix.parse(str(value))
        except GuacError as exc:
            raise ValueError(str(exc)) from exc


def config_path(path: Optional[Union[str, Path]] = None) -> Path:
    if path is not None:
        return Path(path)
    from_env = os.getenv(CONFIG_ENV)
    if from_env:
        return Path(from_env)
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Read a TOML config; a missing file gives the defaults."""
    resolved = config_path(path)
    if not resolved.exists():
        logger.debug("no config at %s, using defaults", resolved)
        return Config()
    try:
        with resolved.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise BadConfig(f"{resolved}: {exc}") from exc
    try:
        config = Config.model_validate(data)
    except ValidationError as exc:
        raise BadConfig(f"{resolved}: {exc.error_count()} invalid field(s)") from exc
    logger.debug("loaded config from %s", resolved)
    return config
