"""Engine settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from agrisim.models.enums import CropKey, IrrigationMode, SoilKey


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration: all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="agrisim_",
        case_sensitive=False,
    )

    # ── Clock ───────────────────────────────────────────────────────────────
    tick_interval_ms: int = Field(default=500, gt=0)
    stop_at_harvest: bool = False

    # ── History ─────────────────────────────────────────────────────────────
    history_capacity: int = Field(default=100, gt=0)
    export_filename: str = "agriculture_simulation_data.csv"

    # ── Randomness ──────────────────────────────────────────────────────────
    rng_seed: int | None = None

    # ── Farm defaults ───────────────────────────────────────────────────────
    default_crop: CropKey = CropKey.corn
    default_field_size_ha: float = 100.0
    default_soil: SoilKey = SoilKey.loam
    default_irrigation: IrrigationMode = IrrigationMode.drip
    default_fertilizer_rate: float = 150.0

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.console


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
