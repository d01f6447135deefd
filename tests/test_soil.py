from __future__ import annotations

import pytest

from agrisim.models.enums import IrrigationMode, SoilKey
from agrisim.models.soils import SOIL_PROFILES
from agrisim.models.state import SoilState, WeatherSample
from agrisim.services.soil import advance_soil, evaporation

LOAM = SOIL_PROFILES[SoilKey.loam]


def _weather(temperature: float = 20.0, rainfall: float = 0.0, solar: float = 500.0) -> WeatherSample:
    return WeatherSample(temperature=temperature, humidity=60.0, rainfall=rainfall, solar=solar)


def test_evaporation_combines_heat_and_radiation() -> None:
    assert evaporation(_weather(temperature=20, solar=500)) == pytest.approx(10.0)


def test_moisture_balance_for_drip_on_loam() -> None:
    soil = advance_soil(_weather(), LOAM, IrrigationMode.drip, 150, SoilState())

    # 75 + 0 + 5 - 10 - 1.4
    assert soil.moisture == pytest.approx(68.6)


def test_rain_adds_five_units_per_mm() -> None:
    dry = advance_soil(_weather(), LOAM, IrrigationMode.drip, 150, SoilState())
    wet = advance_soil(_weather(rainfall=2.0), LOAM, IrrigationMode.drip, 150, SoilState())

    assert wet.moisture - dry.moisture == pytest.approx(10.0)


def test_irrigation_supply_ordering() -> None:
    results = {
        mode: advance_soil(_weather(), LOAM, mode, 150, SoilState()).moisture for mode in IrrigationMode
    }

    assert results[IrrigationMode.sprinkler] > results[IrrigationMode.drip] > results[IrrigationMode.rain]


def test_moisture_clamped_to_bounds() -> None:
    flooded = advance_soil(_weather(rainfall=20.0), LOAM, IrrigationMode.sprinkler, 150, SoilState())
    parched = advance_soil(
        _weather(temperature=40, solar=1000),
        SOIL_PROFILES[SoilKey.sand],
        IrrigationMode.rain,
        150,
        SoilState(moisture=10.0),
    )

    assert flooded.moisture == 100.0
    assert parched.moisture == 10.0


def test_nutrients_deplete_and_replenish_daily() -> None:
    soil = advance_soil(_weather(), LOAM, IrrigationMode.drip, 150, SoilState())

    assert soil.nitrogen == pytest.approx(80.0)
    assert soil.phosphorus == pytest.approx(60.05)
    assert soil.potassium == pytest.approx(90.075)


def test_low_fertilizer_still_depletes() -> None:
    soil = advance_soil(_weather(), LOAM, IrrigationMode.drip, 50, SoilState())

    assert soil.nitrogen < 80.0
    assert soil.phosphorus < 60.0
    assert soil.potassium < 90.0


def test_nutrient_floors() -> None:
    floor = SoilState(moisture=50.0, nitrogen=10.0, phosphorus=5.0, potassium=15.0)

    soil = advance_soil(_weather(), LOAM, IrrigationMode.drip, 50, floor)

    assert soil.nitrogen == 10.0
    assert soil.phosphorus == 5.0
    assert soil.potassium == 15.0
