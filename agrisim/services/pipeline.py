"""The per-day update: one ordered, pure transition of ``SimulationState``.

Stages run in a fixed order and each reads the values written by the
stages before it in the same day:

    weather -> soil -> growth -> stress & pest -> harvest (once) -> record
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from agrisim.models.state import HistoryRecord, SimulationState
from agrisim.schemas.farm import FarmConfig
from agrisim.services.economics import compute_harvest
from agrisim.services.growth import advance_growth, biomass_estimate
from agrisim.services.soil import advance_soil
from agrisim.services.stress import advance_pest, compute_stress
from agrisim.services.weather import RandomSource, next_weather, season_for_day

_logger = structlog.get_logger("agrisim.pipeline")


def advance_day(
	state: SimulationState,
	config: FarmConfig,
	rng: RandomSource,
) -> tuple[SimulationState, HistoryRecord]:
	"""Advance one simulated day; returns the new state and its history record."""
	crop = config.crop_profile
	day = state.day + 1

	weather = next_weather(season_for_day(day), state.weather.humidity, rng)
	soil = advance_soil(weather, config.soil_profile, config.irrigation, config.fertilizer_rate, state.soil)
	progress, _stage = advance_growth(crop, day)
	stress = compute_stress(weather, soil, crop)
	pest = advance_pest(stress.temperature, stress.water, state.pest, rng)

	harvest = state.harvest
	harvested_today = False
	if harvest is None and progress >= 1:
		harvest = compute_harvest(day, config, stress, pest.level)
		harvested_today = True
		_logger.info(
			"harvest_computed",
			day=day,
			crop=crop.key.value,
			final_yield=round(harvest.final_yield, 3),
			revenue=round(harvest.revenue, 2),
			total_cost=round(harvest.total_cost, 2),
			profit=round(harvest.profit, 2),
		)

	record = HistoryRecord(
		day=day,
		growth=progress * 100,
		soil_moisture=soil.moisture,
		temperature=weather.temperature,
		rainfall=weather.rainfall,
		biomass=biomass_estimate(progress, stress.stress_factor),
		pests=pest.level,
		yield_t_ha=harvest.final_yield if harvested_today and harvest else 0.0,
		profit_per_ha=harvest.profit_per_ha if harvested_today and harvest else 0.0,
	)

	next_state = replace(
		state,
		day=day,
		weather=weather,
		soil=soil,
		stress=stress,
		pest=pest,
		harvest=harvest,
	)
	return next_state, record
