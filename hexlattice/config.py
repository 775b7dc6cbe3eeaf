"""Validated configuration models for projection and enumeration limits."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError, InvalidArgumentError
from .logging import configure_logging, get_logger

logger = get_logger(__name__)

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ProjectionSettings(BaseModel):
    """Uniform scale and origin offset applied around the fixed 2-D projection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    scale: float = Field(default=1.0, gt=0.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)

    @field_validator("scale", "origin_x", "origin_y")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)


class EnumerationLimits(BaseModel):
    """Optional upper bounds for region enumeration and flood fills.

    ``None`` leaves the corresponding query unbounded.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_radius: int | None = Field(default=None, ge=0)
    max_flood_distance: int | None = Field(default=None, ge=0)

    def check_radius(self, radius: int) -> None:
        if self.max_radius is not None and radius > self.max_radius:
            logger.warning("limits.radius_exceeded", radius=radius, limit=self.max_radius)
            raise InvalidArgumentError(
                f"radius {radius} exceeds configured limit {self.max_radius}"
            )

    def check_flood_distance(self, max_distance: int) -> None:
        if self.max_flood_distance is not None and max_distance > self.max_flood_distance:
            logger.warning(
                "limits.flood_distance_exceeded",
                max_distance=max_distance,
                limit=self.max_flood_distance,
            )
            raise InvalidArgumentError(
                f"max_distance {max_distance} exceeds configured limit "
                f"{self.max_flood_distance}"
            )


class LatticeConfig(BaseModel):
    """Top-level configuration payload."""

    model_config = ConfigDict(extra="forbid")

    projection: ProjectionSettings = Field(default_factory=ProjectionSettings)
    limits: EnumerationLimits = Field(default_factory=EnumerationLimits)
    log_level: str = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> str:
        if isinstance(value, int):
            level = logging.getLevelName(value)
        else:
            level = str(value).upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"unknown log level {value!r}")
        return level

    def apply_logging(self) -> None:
        """Configure structured logging at ``log_level``."""

        configure_logging(self.log_level)


def load_config(path: str | Path) -> LatticeConfig:
    """Read a JSON configuration file into a :class:`LatticeConfig`."""

    config_path = Path(path)
    try:
        payload = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"cannot read configuration {config_path}: {exc}") from exc
    try:
        return LatticeConfig.model_validate_json(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid configuration {config_path}: {exc}") from exc


__all__ = [
    "EnumerationLimits",
    "LatticeConfig",
    "ProjectionSettings",
    "load_config",
]
