from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.interpolate import Interpolation


DEFAULT_CONFIG_FILE = "ndstats.yaml"


class QuantileDefaults(BaseModel):
    interpolation: Interpolation = Field(
        Interpolation.LINEAR,
        description="Policy used when a call does not name one",
    )


class ParallelConfig(BaseModel):
    """Thread pool settings for axis-wise quantiles."""

    workers: int = Field(1, description="Threads used to resolve lanes; 1 runs serially")
    min_lanes: int = Field(256, description="Fewer lanes than this always run serially")

    @field_validator("workers")
    @classmethod
    def _positive_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("workers must be >= 1")
        return v

    @field_validator("min_lanes")
    @classmethod
    def _non_negative_min_lanes(cls, v: int) -> int:
        if v < 0:
            raise ValueError("min_lanes must be >= 0")
        return v


class RuntimeConfig(BaseModel):
    quantile: QuantileDefaults = Field(default_factory=QuantileDefaults)
    parallel: ParallelConfig = Field(default_factory=ParallelConfig)


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    NDSTATS_LOG_LEVEL: str = "INFO"
    # Overrides parallel.workers from the YAML file when set.
    NDSTATS_WORKERS: Optional[int] = None


class AppConfig(BaseModel):
    env: EnvSettings = Field(default_factory=EnvSettings)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "AppConfig":
        env = EnvSettings()  # loads from environment and .env

        runtime = RuntimeConfig()
        if config_path is None:
            default_path = Path(DEFAULT_CONFIG_FILE)
            config_path = default_path if default_path.exists() else None

        if config_path and Path(config_path).exists():
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            try:
                runtime = RuntimeConfig(**raw)
            except (TypeError, ValidationError) as ve:
                raise ValueError(f"Invalid {Path(config_path).name}: {ve}") from ve

        if env.NDSTATS_WORKERS is not None:
            try:
                runtime.parallel = ParallelConfig(
                    workers=env.NDSTATS_WORKERS, min_lanes=runtime.parallel.min_lanes
                )
            except ValidationError as ve:
                raise ValueError(f"Invalid NDSTATS_WORKERS: {ve}") from ve
        return AppConfig(env=env, runtime=runtime)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load merged configuration from environment and optional YAML."""

    return AppConfig.load(config_path)
