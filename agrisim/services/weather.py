"""Daily weather generator: seasonal base values plus seeded noise."""

from __future__ import annotations

import math
from typing import Protocol

import numpy as np

from agrisim.models.enums import Season
from agrisim.models.state import WeatherSample

_BASE_TEMPERATURE_C: dict[Season, float] = {
	Season.spring: 18.0,
	Season.summer: 28.0,
	Season.autumn: 18.0,
	Season.winter: 8.0,
}

_BASE_RAINFALL_MM: dict[Season, float] = {
	Season.spring: 5.0,
	Season.summer: 2.0,
	Season.autumn: 1.0,
	Season.winter: 1.0,
}

RAIN_PROBABILITY = 0.3
HUMIDITY_RANGE = (30.0, 90.0)
SOLAR_RANGE = (300.0, 1000.0)
SOLAR_BASELINE = 650.0


class RandomSource(Protocol):
	"""Anything with a uniform ``random()`` draw in [0, 1)."""

	def random(self) -> float: ...


def make_rng(seed: int | None = None) -> np.random.Generator:
	return np.random.default_rng(seed)


def _clamp(value: float, low: float, high: float) -> float:
	return max(low, min(high, value))


def round_tenth(value: float) -> float:
	"""Round to 0.1 with ties going up (0.25 -> 0.3), unlike ``round``."""
	return math.floor(value * 10 + 0.5) / 10


def season_for_day(day: int) -> Season:
	season_day = day % 365
	if season_day < 90:
		return Season.spring
	if season_day < 180:
		return Season.summer
	if season_day < 270:
		return Season.autumn
	return Season.winter


def next_weather(season: Season, previous_humidity: float, rng: RandomSource) -> WeatherSample:
	"""Draw one day of weather.

	Draw order is fixed for reproducibility: temperature noise, rain
	occurrence, rain magnitude (only on rainy days), humidity delta, solar
	delta.
	"""
	temperature = max(0.0, _BASE_TEMPERATURE_C[season] + (float(rng.random()) - 0.5) * 10)

	rainfall = 0.0
	if float(rng.random()) < RAIN_PROBABILITY:
		rainfall = round_tenth(_BASE_RAINFALL_MM[season] * float(rng.random()) * 3)

	humidity = _clamp(previous_humidity + (float(rng.random()) - 0.5) * 10, *HUMIDITY_RANGE)
	solar = _clamp(SOLAR_BASELINE + (float(rng.random()) - 0.5) * 300, *SOLAR_RANGE)

	return WeatherSample(
		temperature=temperature,
		humidity=humidity,
		rainfall=rainfall,
		solar=solar,
	)
