"""Simulation engine: owns the run state, the clock and the history."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

import pandas as pd
import structlog

from agrisim.config import Settings, get_settings
from agrisim.models.enums import SimulationStatus
from agrisim.models.state import HarvestResult, HistoryRecord, SimulationState
from agrisim.observability import new_run_id
from agrisim.schemas.farm import (
	FarmConfig,
	FarmConfigUpdate,
	InvalidConfiguration,
	apply_update,
	config_from_settings,
)
from agrisim.schemas.snapshot import SimulationSnapshot
from agrisim.services.history import HistoryRecorder, export_csv, history_frame, write_csv
from agrisim.services.pipeline import advance_day
from agrisim.services.snapshot import build_snapshot
from agrisim.services.weather import RandomSource, make_rng


class SimulationEngine:
	"""Single-owner simulation of one field over one crop cycle.

	State machine::

	    idle/paused --start--> running --pause--> paused
	    any --reset--> idle

	``tick()`` advances one day only while running. Configuration changes
	made while running are applied at the next tick boundary; a crop change
	resets the run immediately.
	"""

	def __init__(
		self,
		config: FarmConfig | None = None,
		*,
		settings: Settings | None = None,
		seed: int | None = None,
		rng: RandomSource | None = None,
	):
		self.settings = settings or get_settings()
		self._config = config or config_from_settings(self.settings)
		self._pending: FarmConfig | None = None
		self._seed = seed if seed is not None else self.settings.rng_seed
		self._owns_rng = rng is None
		self._rng: RandomSource = rng if rng is not None else make_rng(self._seed)
		self._state = SimulationState()
		self._history = HistoryRecorder(self.settings.history_capacity)
		self._status = SimulationStatus.idle
		self.run_id = new_run_id()
		self._logger = structlog.get_logger("agrisim.engine")

	# ── Read-only views ─────────────────────────────────────────────────────

	@property
	def status(self) -> SimulationStatus:
		return self._status

	@property
	def state(self) -> SimulationState:
		return self._state

	@property
	def config(self) -> FarmConfig:
		return self._config

	@property
	def pending_config(self) -> FarmConfig | None:
		return self._pending

	@property
	def harvest(self) -> HarvestResult | None:
		return self._state.harvest

	@property
	def history(self) -> tuple[HistoryRecord, ...]:
		return self._history.records()

	def snapshot(self) -> SimulationSnapshot:
		return build_snapshot(self._state, self._config, self._status, self._history.records())

	# ── Commands ────────────────────────────────────────────────────────────

	def start(self) -> None:
		if self._status is SimulationStatus.running:
			return
		self._status = SimulationStatus.running
		self._log("simulation_started")

	def pause(self) -> None:
		if self._status is not SimulationStatus.running:
			return
		self._status = SimulationStatus.paused
		self._log("simulation_paused")

	def reset(self) -> None:
		"""Return to idle with default state and an empty history."""
		self._status = SimulationStatus.idle
		self._state = SimulationState()
		self._history.clear()
		if self._pending is not None:
			self._config = self._pending
			self._pending = None
		if self._owns_rng:
			self._rng = make_rng(self._seed)
		self.run_id = new_run_id()
		self._log("simulation_reset")

	def configure(self, update: FarmConfigUpdate | dict[str, Any]) -> FarmConfig:
		"""Validate and schedule a configuration change.

		Raises ``InvalidConfiguration`` and keeps the current configuration
		when the change is rejected.
		"""
		base = self._pending or self._config
		try:
			new_config = apply_update(base, update)
		except InvalidConfiguration as exc:
			self._logger.warning("config_rejected", run_id=self.run_id, error=str(exc))
			raise

		if new_config.crop != self._config.crop:
			self._pending = new_config
			self._log("config_changed", crop_changed=True, **new_config.model_dump(mode="json"))
			self.reset()
			return new_config

		if self._status is SimulationStatus.running:
			self._pending = new_config
		else:
			self._config = new_config
			self._pending = None
		self._log("config_changed", crop_changed=False, **new_config.model_dump(mode="json"))
		return new_config

	# ── Clock ───────────────────────────────────────────────────────────────

	def tick(self) -> SimulationSnapshot:
		"""Run one simulated day if the clock is running."""
		if self._status is not SimulationStatus.running:
			return self.snapshot()

		if self._pending is not None:
			self._config = self._pending
			self._pending = None

		start = time.perf_counter()
		was_harvested = self._state.harvested
		with structlog.contextvars.bound_contextvars(run_id=self.run_id):
			self._state, record = advance_day(self._state, self._config, self._rng)
		self._history.append(record)
		duration_ms = round((time.perf_counter() - start) * 1000.0, 3)
		self._logger.debug(
			"simulation_tick",
			run_id=self.run_id,
			day=self._state.day,
			duration_ms=duration_ms,
		)

		if not was_harvested and self._state.harvested and self.settings.stop_at_harvest:
			self.pause()
		return self.snapshot()

	def run_days(self, days: int) -> SimulationSnapshot:
		"""Start the clock and tick ``days`` times without wall-clock pacing."""
		self.start()
		for _ in range(days):
			if self._status is not SimulationStatus.running:
				break
			self.tick()
		return self.snapshot()

	# ── Export ──────────────────────────────────────────────────────────────

	def history_frame(self) -> pd.DataFrame:
		return history_frame(self._history.records())

	def export_csv(self) -> str:
		return export_csv(self._history.records())

	def write_export(self, path: Path | None = None) -> Path:
		target = path or Path(self.settings.export_filename)
		return write_csv(self._history.records(), target)

	def _log(self, event: str, **extra: Any) -> None:
		self._logger.info(
			event,
			run_id=self.run_id,
			status=self._status.value,
			day=self._state.day,
			**extra,
		)
