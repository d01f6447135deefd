"""Crop development: progress fraction and derived stage label."""

from __future__ import annotations

import math

from agrisim.models.crops import CropProfile


def progress_fraction(crop: CropProfile, day: int) -> float:
	# Not clamped: harvest triggers once this reaches 1.
	return day / crop.growth_days


def stage_for_progress(crop: CropProfile, progress: float) -> str:
	n_stages = len(crop.stages)
	index = min(math.floor(progress * n_stages), n_stages - 1)
	return crop.stages[max(0, index)]


def advance_growth(crop: CropProfile, day: int) -> tuple[float, str]:
	progress = progress_fraction(crop, day)
	return progress, stage_for_progress(crop, progress)


def display_progress(progress: float) -> float:
	return max(0.0, min(1.0, progress))


def biomass_estimate(progress: float, stress_factor: float) -> float:
	return max(0.0, min(100.0, progress * 120 * stress_factor))
