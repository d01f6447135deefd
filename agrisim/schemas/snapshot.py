"""Read-only snapshot schemas handed to rendering and charting collaborators."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agrisim.models.enums import CropKey, PestType, Season, SimulationStatus


class _Frozen(BaseModel):
	model_config = ConfigDict(frozen=True, from_attributes=True)


class WeatherRead(_Frozen):
	temperature: float
	humidity: float
	rainfall: float
	solar: float
	is_rainy: bool


class NutrientsRead(_Frozen):
	nitrogen: float
	phosphorus: float
	potassium: float


class PestRead(_Frozen):
	level: float = Field(ge=0, le=100)
	pest_type: PestType
	alert: bool


class CostBreakdownRead(_Frozen):
	seed: float
	fertilizer: float
	irrigation: float
	pest_control: float
	labor: float
	total: float


class HistoryPoint(_Frozen):
	day: int
	growth: float
	soil_moisture: float
	temperature: float
	rainfall: float
	biomass: float
	pests: float
	yield_t_ha: float
	profit_per_ha: float


class ChartPoint(_Frozen):
	name: str
	value: float


class RenderHints(_Frozen):
	"""Scale and lighting values for the field renderer."""

	growth_factor: float = Field(ge=0, le=1)
	plant_scale: float
	plant_height: float
	plant_hue: float
	light_intensity: float
	is_rainy: bool


class SimulationSnapshot(_Frozen):
	day: int = Field(ge=0)
	season: Season
	status: SimulationStatus
	crop: CropKey
	growth_stage: str
	progress_percent: float = Field(ge=0, le=100)
	weather: WeatherRead
	soil_moisture: float = Field(ge=10, le=100)
	soil_nutrients: NutrientsRead
	pest: PestRead
	harvested: bool
	yield_t_ha: float = Field(ge=0)
	revenue: float
	cost: float
	profit: float
	profit_per_ha: float
	cost_breakdown: CostBreakdownRead | None = None
	render_hints: RenderHints
	weather_series: list[ChartPoint] = Field(default_factory=list)
	soil_health_series: list[ChartPoint] = Field(default_factory=list)
	history: list[HistoryPoint] = Field(default_factory=list)
