"""Crop stress indices and stochastic pest pressure."""

from __future__ import annotations

import math

import structlog

from agrisim.models.crops import CropProfile
from agrisim.models.enums import PestType
from agrisim.models.state import PEST_LEVEL_MAX, PestState, SoilState, StressFactors, WeatherSample
from agrisim.services.weather import RandomSource

_logger = structlog.get_logger("agrisim.stress")

PEST_CATALOG: tuple[PestType, ...] = (
	PestType.aphids,
	PestType.spider_mites,
	PestType.corn_borer,
	PestType.rust,
	PestType.blight,
)

OUTBREAK_PRESSURE_THRESHOLD = 0.3
OUTBREAK_PROBABILITY = 0.1
PEST_DECAY_PER_DAY = 2.0
PEST_CLEAR_LEVEL = 5.0


def compute_stress(weather: WeatherSample, soil: SoilState, crop: CropProfile) -> StressFactors:
	return StressFactors(
		temperature=abs(weather.temperature - crop.optimal_temp_midpoint) / 10,
		water=max(0.0, (60 - soil.moisture) / 60),
		nutrient=max(0.0, (70 - soil.min_nutrient) / 70),
	)


def pest_pressure(temp_stress: float, water_stress: float, rng: RandomSource) -> float:
	return (temp_stress + water_stress) * 0.1 + float(rng.random()) * 0.05


def advance_pest(
	temp_stress: float,
	water_stress: float,
	previous: PestState,
	rng: RandomSource,
) -> PestState:
	"""Roll for an outbreak, otherwise let the infestation decay.

	Draw order: pressure noise, outbreak trial (only above the pressure
	threshold), pest type (only on outbreak).
	"""
	pressure = pest_pressure(temp_stress, water_stress, rng)
	if pressure > OUTBREAK_PRESSURE_THRESHOLD and float(rng.random()) < OUTBREAK_PROBABILITY:
		index = min(math.floor(float(rng.random()) * len(PEST_CATALOG)), len(PEST_CATALOG) - 1)
		outbreak = PestState(
			level=min(PEST_LEVEL_MAX, pressure * 100),
			pest_type=PEST_CATALOG[index],
		)
		_logger.info(
			"pest_outbreak",
			pest_type=outbreak.pest_type.value,
			level=round(outbreak.level, 2),
			pressure=round(pressure, 4),
		)
		return outbreak

	level = max(0.0, previous.level - PEST_DECAY_PER_DAY)
	pest_type = PestType.none if level < PEST_CLEAR_LEVEL else previous.pest_type
	return PestState(level=level, pest_type=pest_type)
