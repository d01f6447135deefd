"""Asyncio driving loop: one simulated day per configured wall-clock period."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable

import structlog

from agrisim.models.enums import SimulationStatus
from agrisim.schemas.snapshot import SimulationSnapshot
from agrisim.services.simulation import SimulationEngine

SnapshotListener = Callable[[SimulationSnapshot], Awaitable[None] | None]


class SimulationRunner:
	"""Calls ``engine.tick()`` periodically and fans snapshots out to listeners.

	Ticks never overlap: the next sleep starts only after the current tick
	and all listeners have finished.
	"""

	def __init__(
		self,
		engine: SimulationEngine,
		*,
		interval_ms: int | None = None,
		listeners: list[SnapshotListener] | None = None,
	):
		self.engine = engine
		self.interval_ms = interval_ms if interval_ms is not None else engine.settings.tick_interval_ms
		self._listeners: list[SnapshotListener] = list(listeners or [])
		self._stopped = asyncio.Event()
		self._task: asyncio.Task[SimulationSnapshot] | None = None
		self._logger = structlog.get_logger("agrisim.runner")

	def subscribe(self, listener: SnapshotListener) -> None:
		self._listeners.append(listener)

	async def run(self, max_days: int | None = None, *, autostart: bool = True) -> SimulationSnapshot:
		"""Drive the engine until ``stop()`` or for ``max_days`` more days.

		``max_days`` counts ticks made by this call, so resuming a paused
		engine at day 10 with ``max_days=5`` stops at day 15. A bounded run
		also ends as soon as the engine leaves the running state (pause,
		reset or stop-at-harvest).
		"""
		self._stopped.clear()
		if autostart:
			self.engine.start()
		if max_days is not None and max_days <= 0:
			self.engine.pause()
			return self.engine.snapshot()

		interval = self.interval_ms / 1000.0
		ticks = 0
		while not self._stopped.is_set():
			if self.engine.status is SimulationStatus.running:
				try:
					snapshot = self.engine.tick()
					await self._publish(snapshot)
				except Exception as exc:
					self._logger.exception(
						"simulation_tick_failed",
						run_id=self.engine.run_id,
						day=self.engine.state.day,
						error=str(exc),
					)
					self.engine.pause()
					raise
				ticks += 1
				if max_days is not None and ticks >= max_days:
					self.engine.pause()
					break
			elif max_days is not None:
				break

			try:
				await asyncio.wait_for(self._stopped.wait(), timeout=interval)
			except TimeoutError:
				pass

		return self.engine.snapshot()

	def start_background(self, max_days: int | None = None) -> asyncio.Task[SimulationSnapshot]:
		self._task = asyncio.create_task(self.run(max_days))
		return self._task

	async def stop(self) -> SimulationSnapshot:
		self._stopped.set()
		if self._task is not None:
			await self._task
			self._task = None
		return self.engine.snapshot()

	async def _publish(self, snapshot: SimulationSnapshot) -> None:
		for listener in self._listeners:
			result = listener(snapshot)
			if inspect.isawaitable(result):
				await result
