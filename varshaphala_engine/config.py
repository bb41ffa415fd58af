"""
config.py
=========
Engine settings, read from the environment (prefix ``VARSHAPHALA_``).

    VARSHAPHALA_SOLAR_RETURN_MAX_ITERATIONS=12
    VARSHAPHALA_ASPECT_ORBS='{"0": 9, "60": 6, "90": 7, "120": 6, "180": 7}'
    VARSHAPHALA_LOG_LEVEL=DEBUG

The aspect orbs and strength weights are empirical; they are exposed here
so a deployment can tune them without touching the classifier.
"""

from functools import lru_cache
from typing import Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.solar_return import MAX_ITERATIONS, TOLERANCE_DEG, SUN_MEAN_DAILY_MOTION
from .core.tajika import ASPECT_ORBS, ANGLE_BONUS, APPLYING_BONUS


class EngineSettings(BaseSettings):
    """Tunable constants for the annual-chart pipeline."""

    model_config = SettingsConfigDict(env_prefix="VARSHAPHALA_", extra="ignore")

    # Solar return locator
    solar_return_max_iterations: int   = Field(MAX_ITERATIONS, ge=1, le=100)
    solar_return_tolerance_deg:  float = Field(TOLERANCE_DEG, gt=0.0, lt=1.0)
    sun_mean_daily_motion:       float = Field(SUN_MEAN_DAILY_MOTION, gt=0.0)

    # Tajika aspects
    aspect_orbs:           Dict[int, float] = Field(default_factory=lambda: dict(ASPECT_ORBS))
    aspect_angle_bonus:    Dict[int, float] = Field(default_factory=lambda: dict(ANGLE_BONUS))
    aspect_applying_bonus: float            = APPLYING_BONUS

    # Service
    cache_capacity: int       = Field(256, ge=0)
    log_level:      str       = "INFO"
    cors_origins:   List[str] = ["*"]


@lru_cache()
def get_settings() -> EngineSettings:
    return EngineSettings()
