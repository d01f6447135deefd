"""Simulation state records: one consolidated, immutable state per day.

Every record is a frozen dataclass; the daily pipeline produces new
instances with ``dataclasses.replace`` instead of mutating in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from agrisim.models.enums import PestType

MOISTURE_MIN = 10.0
MOISTURE_MAX = 100.0
NITROGEN_MIN = 10.0
PHOSPHORUS_MIN = 5.0
POTASSIUM_MIN = 15.0
PEST_LEVEL_MAX = 100.0


@dataclass(frozen=True)
class WeatherSample:
    temperature: float
    humidity: float
    rainfall: float
    solar: float

    @property
    def is_rainy(self) -> bool:
        return self.rainfall > 0


DEFAULT_WEATHER = WeatherSample(temperature=22.0, humidity=65.0, rainfall=0.0, solar=850.0)


@dataclass(frozen=True)
class SoilState:
    """Root-zone moisture (%) and N/P/K availability."""

    moisture: float = 75.0
    nitrogen: float = 80.0
    phosphorus: float = 60.0
    potassium: float = 90.0

    @property
    def min_nutrient(self) -> float:
        return min(self.nitrogen, self.phosphorus, self.potassium)


@dataclass(frozen=True)
class StressFactors:
    temperature: float = 0.0
    water: float = 0.0
    nutrient: float = 0.0

    @property
    def stress_factor(self) -> float:
        # Negative under extreme combined stress; consumers clamp the result.
        return 1 - (self.temperature + self.water + self.nutrient) / 3


@dataclass(frozen=True)
class PestState:
    level: float = 0.0
    pest_type: PestType = PestType.none

    @property
    def alert(self) -> bool:
        return self.level > 30


@dataclass(frozen=True)
class CostBreakdown:
    seed: float
    fertilizer: float
    irrigation: float
    pest_control: float
    labor: float

    @property
    def total(self) -> float:
        return self.seed + self.fertilizer + self.irrigation + self.pest_control + self.labor


@dataclass(frozen=True)
class HarvestResult:
    """Yield and economics, computed once on the maturity day."""

    day: int
    field_size_ha: float
    final_yield: float
    revenue: float
    costs: CostBreakdown

    @property
    def total_cost(self) -> float:
        return self.costs.total

    @property
    def profit(self) -> float:
        return self.revenue - self.total_cost

    @property
    def profit_per_ha(self) -> float:
        return self.profit / self.field_size_ha


@dataclass(frozen=True)
class HistoryRecord:
    """One retained daily data point, as charted and exported."""

    day: int
    growth: float
    soil_moisture: float
    temperature: float
    rainfall: float
    biomass: float
    pests: float
    yield_t_ha: float
    profit_per_ha: float

    def as_row(self) -> tuple[int | float, ...]:
        return (
            self.day,
            self.growth,
            self.soil_moisture,
            self.temperature,
            self.rainfall,
            self.biomass,
            self.pests,
            self.yield_t_ha,
            self.profit_per_ha,
        )


@dataclass(frozen=True)
class SimulationState:
    """Primary state of one run. Stage, season and progress are derived."""

    day: int = 0
    weather: WeatherSample = DEFAULT_WEATHER
    soil: SoilState = field(default_factory=SoilState)
    stress: StressFactors = field(default_factory=StressFactors)
    pest: PestState = field(default_factory=PestState)
    harvest: HarvestResult | None = None

    @property
    def harvested(self) -> bool:
        return self.harvest is not None
