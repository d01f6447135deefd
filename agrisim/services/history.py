"""Bounded daily history and its CSV export."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from pathlib import Path

import pandas as pd

from agrisim.models.state import HistoryRecord

DEFAULT_CAPACITY = 100

EXPORT_COLUMNS: tuple[str, ...] = (
	"Day",
	"Growth(%)",
	"Soil_Moisture(%)",
	"Temperature(C)",
	"Rainfall(mm)",
	"Biomass",
	"Pests(%)",
	"Yield(t/ha)",
	"Profit($/ha)",
)


class HistoryRecorder:
	"""Ring buffer of the most recent daily records, oldest evicted first."""

	def __init__(self, capacity: int = DEFAULT_CAPACITY):
		if capacity <= 0:
			raise ValueError("history capacity must be positive")
		self._records: deque[HistoryRecord] = deque(maxlen=capacity)

	@property
	def capacity(self) -> int:
		return self._records.maxlen or DEFAULT_CAPACITY

	def append(self, record: HistoryRecord) -> None:
		self._records.append(record)

	def clear(self) -> None:
		self._records.clear()

	def records(self) -> tuple[HistoryRecord, ...]:
		return tuple(self._records)

	def __len__(self) -> int:
		return len(self._records)

	def __iter__(self) -> Iterator[HistoryRecord]:
		return iter(tuple(self._records))


def history_frame(records: tuple[HistoryRecord, ...] | list[HistoryRecord]) -> pd.DataFrame:
	"""Tabulate records under the export column names, one row per day."""
	return pd.DataFrame.from_records(
		[record.as_row() for record in records],
		columns=list(EXPORT_COLUMNS),
	)


def export_csv(records: tuple[HistoryRecord, ...] | list[HistoryRecord]) -> str:
	return history_frame(records).to_csv(index=False, lineterminator="\n")


def write_csv(records: tuple[HistoryRecord, ...] | list[HistoryRecord], path: Path) -> Path:
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(export_csv(records), encoding="utf-8")
	return path
