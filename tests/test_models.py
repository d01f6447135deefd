from __future__ import annotations

import pytest

from agrisim.models import CROP_PROFILES, SOIL_PROFILES, CropKey, SoilKey, get_crop_profile, get_soil_profile


def test_catalogs_cover_every_key() -> None:
    assert set(CROP_PROFILES) == set(CropKey)
    assert set(SOIL_PROFILES) == set(SoilKey)


def test_crop_reference_values() -> None:
    corn = get_crop_profile("corn")

    assert corn.price_per_tonne == 240
    assert corn.expected_yield_t_ha == 11.5
    assert corn.growth_days == 120
    assert corn.optimal_temp_midpoint == 25
    assert corn.stages[0] == "germination"
    assert corn.stages[-1] == "maturity"
    assert corn.label == "Corn (Maize) - $240/tonne"


def test_soil_reference_values() -> None:
    loam = get_soil_profile(SoilKey.loam)

    assert (loam.drainage, loam.fertility, loam.water_holding) == (0.7, 0.8, 0.7)
    assert loam.label == "Loam (Fertility: 80%)"


def test_every_crop_ends_at_maturity() -> None:
    for crop in CROP_PROFILES.values():
        assert crop.stages[-1] == "maturity"
        low, high = crop.optimal_temp
        assert low < high


def test_unknown_keys_raise_lookup_error() -> None:
    with pytest.raises(LookupError, match="rice"):
        get_crop_profile("rice")
    with pytest.raises(LookupError, match="peat"):
        get_soil_profile("peat")
