"""Pydantic schemas for the farm configuration surface."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from agrisim.config import Settings
from agrisim.models.crops import CropProfile, get_crop_profile
from agrisim.models.enums import CropKey, IrrigationMode, SoilKey
from agrisim.models.soils import SoilProfile, get_soil_profile

FIELD_SIZE_RANGE_HA = (10.0, 500.0)
FERTILIZER_RANGE_KG_HA = (50.0, 300.0)


class InvalidConfiguration(ValueError):
	"""Raised when a farm configuration has unknown keys or out-of-range values."""


class FarmConfig(BaseModel):
	model_config = ConfigDict(frozen=True, extra="forbid")

	crop: CropKey = CropKey.corn
	field_size_ha: float = Field(default=100.0, ge=FIELD_SIZE_RANGE_HA[0], le=FIELD_SIZE_RANGE_HA[1])
	soil: SoilKey = SoilKey.loam
	irrigation: IrrigationMode = IrrigationMode.drip
	fertilizer_rate: float = Field(default=150.0, ge=FERTILIZER_RANGE_KG_HA[0], le=FERTILIZER_RANGE_KG_HA[1])

	@property
	def crop_profile(self) -> CropProfile:
		return get_crop_profile(self.crop)

	@property
	def soil_profile(self) -> SoilProfile:
		return get_soil_profile(self.soil)


class FarmConfigUpdate(BaseModel):
	"""Partial change to a running configuration; unset fields are kept."""

	model_config = ConfigDict(extra="forbid")

	crop: CropKey | None = None
	field_size_ha: float | None = None
	soil: SoilKey | None = None
	irrigation: IrrigationMode | None = None
	fertilizer_rate: float | None = None

	def changes(self) -> dict[str, Any]:
		return self.model_dump(exclude_none=True)


def _describe(exc: ValidationError) -> str:
	parts = []
	for error in exc.errors():
		location = ".".join(str(item) for item in error["loc"]) or "config"
		parts.append(f"{location}: {error['msg']}")
	return "; ".join(parts)


def build_farm_config(**values: Any) -> FarmConfig:
	"""Validate raw configuration values, rejecting anything out of range."""
	try:
		return FarmConfig.model_validate(values)
	except ValidationError as exc:
		raise InvalidConfiguration(f"invalid farm configuration: {_describe(exc)}") from exc


def apply_update(config: FarmConfig, update: FarmConfigUpdate | dict[str, Any]) -> FarmConfig:
	if isinstance(update, dict):
		try:
			update = FarmConfigUpdate.model_validate(update)
		except ValidationError as exc:
			raise InvalidConfiguration(f"invalid farm configuration: {_describe(exc)}") from exc
	return build_farm_config(**{**config.model_dump(), **update.changes()})


def config_from_settings(settings: Settings) -> FarmConfig:
	return build_farm_config(
		crop=settings.default_crop,
		field_size_ha=settings.default_field_size_ha,
		soil=settings.default_soil,
		irrigation=settings.default_irrigation,
		fertilizer_rate=settings.default_fertilizer_rate,
	)
