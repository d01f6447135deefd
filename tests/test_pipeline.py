from __future__ import annotations

import pytest

from agrisim.models.enums import PestType
from agrisim.models.state import SimulationState
from agrisim.schemas.farm import FarmConfig
from agrisim.services.pipeline import advance_day

# temperature, rain occurrence (dry), humidity, solar, pest pressure
CALM_DAY = [0.5, 0.9, 0.5, 0.5, 0.0]


def test_first_day_reads_same_day_values(scripted, farm_config: FarmConfig) -> None:
    rng = scripted(CALM_DAY)

    state, record = advance_day(SimulationState(), farm_config, rng)

    assert rng.draws == 5
    assert state.day == 1
    assert state.weather.temperature == pytest.approx(18.0)
    assert state.soil.moisture == pytest.approx(68.1)
    assert state.stress.temperature == pytest.approx(0.7)
    assert state.stress.water == 0.0
    assert state.stress.nutrient == pytest.approx((70 - 60.05) / 70)
    assert state.pest.level == 0.0
    assert state.pest.pest_type is PestType.none
    assert state.harvest is None

    assert record.day == 1
    assert record.growth == pytest.approx(100 / 120)
    assert record.soil_moisture == state.soil.moisture
    assert record.temperature == state.weather.temperature
    assert record.biomass == pytest.approx(state.stress.stress_factor)
    assert record.yield_t_ha == 0.0
    assert record.profit_per_ha == 0.0


def test_input_state_is_not_mutated(scripted, farm_config: FarmConfig) -> None:
    original = SimulationState()

    advance_day(original, farm_config, scripted(CALM_DAY))

    assert original == SimulationState()


def test_water_stress_uses_updated_moisture(scripted, farm_config: FarmConfig) -> None:
    rng = scripted(CALM_DAY, cycle=True)
    state = SimulationState()
    for _ in range(20):
        state, _record = advance_day(state, farm_config, rng)
        assert state.stress.water == pytest.approx(max(0.0, (60 - state.soil.moisture) / 60))


def test_harvest_computed_once_on_maturity_day(scripted, farm_config: FarmConfig) -> None:
    rng = scripted(CALM_DAY, cycle=True)

    matured, record = advance_day(SimulationState(day=119), farm_config, rng)

    assert matured.day == 120
    assert matured.harvest is not None
    assert matured.harvest.day == 120
    assert record.yield_t_ha == matured.harvest.final_yield
    assert record.profit_per_ha == pytest.approx(matured.harvest.profit_per_ha)

    after, next_record = advance_day(matured, farm_config, rng)

    assert after.harvest is matured.harvest
    assert next_record.yield_t_ha == 0.0
    assert next_record.profit_per_ha == 0.0


def test_no_harvest_before_maturity(scripted, farm_config: FarmConfig) -> None:
    state, _record = advance_day(SimulationState(day=118), farm_config, scripted(CALM_DAY))
    assert state.harvest is None
