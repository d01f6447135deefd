"""Shared pytest fixtures: settings, farm configs, scripted random sources."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

import pytest
import structlog
from structlog.testing import LogCapture

from agrisim.config import Settings
from agrisim.schemas.farm import FarmConfig, build_farm_config
from agrisim.services.simulation import SimulationEngine


class ScriptedRandom:
	"""Random source that replays fixed draws; fails loudly on an unexpected draw."""

	def __init__(self, values: Iterable[float], cycle: bool = False) -> None:
		self.values = list(values)
		self.cycle = cycle
		self.index = 0

	def random(self) -> float:
		if self.index >= len(self.values):
			if not self.cycle:
				raise AssertionError(f"unexpected random draw #{self.index + 1}")
			self.index = 0
		value = self.values[self.index]
		self.index += 1
		return value

	@property
	def draws(self) -> int:
		return self.index


@pytest.fixture
def scripted() -> type[ScriptedRandom]:
	return ScriptedRandom


@pytest.fixture
def settings() -> Settings:
	"""Defaults only, isolated from any local .env file."""
	return Settings(_env_file=None)


@pytest.fixture
def farm_config() -> FarmConfig:
	return build_farm_config(
		crop="corn",
		field_size_ha=100,
		soil="loam",
		irrigation="drip",
		fertilizer_rate=150,
	)


@pytest.fixture
def engine(farm_config: FarmConfig, settings: Settings) -> SimulationEngine:
	return SimulationEngine(farm_config, settings=settings, seed=42)


@pytest.fixture
def log_events() -> Iterator[list[dict[str, Any]]]:
	"""Capture structlog events with context variables merged in."""
	capture = LogCapture()
	structlog.reset_defaults()
	structlog.contextvars.clear_contextvars()
	structlog.configure(processors=[structlog.contextvars.merge_contextvars, capture])
	yield capture.entries
	structlog.reset_defaults()
	structlog.contextvars.clear_contextvars()
