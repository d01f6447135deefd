"""Maps engine state onto the read-only ``SimulationSnapshot`` schema."""

from __future__ import annotations

from collections.abc import Sequence

from agrisim.models.enums import SimulationStatus
from agrisim.models.state import HistoryRecord, SimulationState, SoilState, WeatherSample
from agrisim.schemas.farm import FarmConfig
from agrisim.schemas.snapshot import (
	ChartPoint,
	CostBreakdownRead,
	HistoryPoint,
	NutrientsRead,
	PestRead,
	RenderHints,
	SimulationSnapshot,
	WeatherRead,
)
from agrisim.services.growth import advance_growth, display_progress
from agrisim.services.weather import season_for_day


def _render_hints(growth_factor: float, weather: WeatherSample) -> RenderHints:
	return RenderHints(
		growth_factor=growth_factor,
		plant_scale=0.5 + growth_factor * 2,
		plant_height=0.1 + growth_factor * 0.5,
		plant_hue=0.25 + growth_factor * 0.1,
		light_intensity=0.4 + (weather.solar / 1000) * 0.6,
		is_rainy=weather.is_rainy,
	)


def _weather_series(weather: WeatherSample) -> list[ChartPoint]:
	return [
		ChartPoint(name="Temperature", value=weather.temperature),
		ChartPoint(name="Humidity", value=weather.humidity),
		ChartPoint(name="Solar Radiation", value=weather.solar / 10),
	]


def _soil_health_series(soil: SoilState) -> list[ChartPoint]:
	return [
		ChartPoint(name="Nitrogen", value=soil.nitrogen),
		ChartPoint(name="Phosphorus", value=soil.phosphorus),
		ChartPoint(name="Potassium", value=soil.potassium),
		ChartPoint(name="Moisture", value=soil.moisture),
	]


def build_snapshot(
	state: SimulationState,
	config: FarmConfig,
	status: SimulationStatus,
	history: Sequence[HistoryRecord],
) -> SimulationSnapshot:
	progress, stage = advance_growth(config.crop_profile, state.day)
	growth_factor = display_progress(progress)
	harvest = state.harvest

	return SimulationSnapshot(
		day=state.day,
		season=season_for_day(state.day),
		status=status,
		crop=config.crop,
		growth_stage=stage,
		progress_percent=growth_factor * 100,
		weather=WeatherRead(
			temperature=state.weather.temperature,
			humidity=state.weather.humidity,
			rainfall=state.weather.rainfall,
			solar=state.weather.solar,
			is_rainy=state.weather.is_rainy,
		),
		soil_moisture=state.soil.moisture,
		soil_nutrients=NutrientsRead.model_validate(state.soil),
		pest=PestRead.model_validate(state.pest),
		harvested=harvest is not None,
		yield_t_ha=harvest.final_yield if harvest else 0.0,
		revenue=harvest.revenue if harvest else 0.0,
		cost=harvest.total_cost if harvest else 0.0,
		profit=harvest.profit if harvest else 0.0,
		profit_per_ha=harvest.profit_per_ha if harvest else 0.0,
		cost_breakdown=CostBreakdownRead.model_validate(harvest.costs) if harvest else None,
		render_hints=_render_hints(growth_factor, state.weather),
		weather_series=_weather_series(state.weather),
		soil_health_series=_soil_health_series(state.soil),
		history=[HistoryPoint.model_validate(record) for record in history],
	)
