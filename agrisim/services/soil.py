"""Soil water balance and nutrient depletion."""

from __future__ import annotations

from agrisim.models.enums import IrrigationMode
from agrisim.models.soils import SoilProfile
from agrisim.models.state import (
	MOISTURE_MAX,
	MOISTURE_MIN,
	NITROGEN_MIN,
	PHOSPHORUS_MIN,
	POTASSIUM_MIN,
	SoilState,
	WeatherSample,
)

# Flat daily moisture units, independent of field size.
IRRIGATION_SUPPLY: dict[IrrigationMode, float] = {
	IrrigationMode.drip: 5.0,
	IrrigationMode.sprinkler: 8.0,
	IrrigationMode.rain: 2.0,
}


def evaporation(weather: WeatherSample) -> float:
	return (weather.temperature - 10) * 0.5 + (weather.solar / 1000) * 10


def advance_soil(
	weather: WeatherSample,
	soil_profile: SoilProfile,
	irrigation: IrrigationMode,
	fertilizer_rate: float,
	previous: SoilState,
) -> SoilState:
	"""Apply one day of rain, irrigation, evaporation and drainage.

	Fertilizer replenishment and crop uptake both apply every day, so a
	higher rate only slows the net depletion.
	"""
	moisture = (
		previous.moisture
		+ weather.rainfall * 5
		+ IRRIGATION_SUPPLY[irrigation]
		- evaporation(weather)
		- soil_profile.drainage * 2
	)
	return SoilState(
		moisture=max(MOISTURE_MIN, min(MOISTURE_MAX, moisture)),
		nitrogen=max(NITROGEN_MIN, previous.nitrogen - 0.5 + fertilizer_rate / 300),
		phosphorus=max(PHOSPHORUS_MIN, previous.phosphorus - 0.2 + fertilizer_rate / 600),
		potassium=max(POTASSIUM_MIN, previous.potassium - 0.3 + fertilizer_rate / 400),
	)
