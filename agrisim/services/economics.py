"""Harvest yield and farm economics, computed once at maturity."""

from __future__ import annotations

from agrisim.models.crops import CropProfile
from agrisim.models.enums import IrrigationMode
from agrisim.models.soils import SoilProfile
from agrisim.models.state import CostBreakdown, HarvestResult, StressFactors
from agrisim.schemas.farm import FarmConfig

IRRIGATION_YIELD_BONUS: dict[IrrigationMode, float] = {
	IrrigationMode.drip: 0.15,
	IrrigationMode.sprinkler: 0.10,
	IrrigationMode.rain: 0.0,
}

IRRIGATION_COST_PER_HA: dict[IrrigationMode, float] = {
	IrrigationMode.drip: 200.0,
	IrrigationMode.sprinkler: 150.0,
	IrrigationMode.rain: 50.0,
}

SEED_COST_PER_HA = 50.0
FERTILIZER_COST_PER_KG = 0.8
PEST_CONTROL_COST_PER_HA = 80.0
PEST_CONTROL_THRESHOLD = 20.0
LABOR_COST_PER_HA = 300.0


def management_bonus(fertilizer_rate: float, irrigation: IrrigationMode) -> float:
	return (fertilizer_rate / 150) * 0.1 + IRRIGATION_YIELD_BONUS[irrigation]


def soil_bonus(soil: SoilProfile) -> float:
	return soil.fertility * 0.2


def final_yield(
	crop: CropProfile,
	soil: SoilProfile,
	config: FarmConfig,
	stress: StressFactors,
	pest_level: float,
) -> float:
	"""Stress-adjusted yield in t/ha; never negative."""
	value = (
		crop.expected_yield_t_ha
		* stress.stress_factor
		* (1 + management_bonus(config.fertilizer_rate, config.irrigation) + soil_bonus(soil))
		* (1 - pest_level / 200)
	)
	return max(0.0, value)


def cost_breakdown(config: FarmConfig, pest_level: float) -> CostBreakdown:
	size = config.field_size_ha
	return CostBreakdown(
		seed=size * SEED_COST_PER_HA,
		fertilizer=size * config.fertilizer_rate * FERTILIZER_COST_PER_KG,
		irrigation=size * IRRIGATION_COST_PER_HA[config.irrigation],
		pest_control=size * PEST_CONTROL_COST_PER_HA if pest_level > PEST_CONTROL_THRESHOLD else 0.0,
		labor=size * LABOR_COST_PER_HA,
	)


def compute_harvest(
	day: int,
	config: FarmConfig,
	stress: StressFactors,
	pest_level: float,
) -> HarvestResult:
	crop = config.crop_profile
	yield_t_ha = final_yield(crop, config.soil_profile, config, stress, pest_level)
	return HarvestResult(
		day=day,
		field_size_ha=config.field_size_ha,
		final_yield=yield_t_ha,
		revenue=yield_t_ha * config.field_size_ha * crop.price_per_tonne,
		costs=cost_breakdown(config, pest_level),
	)
