"""CropProfile reference data: agronomic constants per crop.

``stages`` lists growth stages in order; the active stage is never stored,
it is derived from the day counter by ``services.growth.advance_growth``::

    corn (120 days, 5 stages) -> day 0-23 germination, 24-47 vegetative, ...
"""

from __future__ import annotations

from dataclasses import dataclass

from agrisim.models.enums import CropKey


@dataclass(frozen=True)
class CropProfile:
    """Agronomic reference: prices, yield target and stage sequence."""

    key: CropKey
    name: str
    price_per_tonne: float
    expected_yield_t_ha: float
    growth_days: int
    water_requirement_mm: float
    optimal_temp: tuple[float, float]
    stages: tuple[str, ...]

    @property
    def optimal_temp_midpoint(self) -> float:
        low, high = self.optimal_temp
        return (low + high) / 2

    @property
    def label(self) -> str:
        return f"{self.name} - ${self.price_per_tonne:g}/tonne"

    def __repr__(self) -> str:
        return (
            f"<CropProfile key={self.key.value!r} name={self.name!r} "
            f"growth_days={self.growth_days}>"
        )


CROP_PROFILES: dict[CropKey, CropProfile] = {
    CropKey.corn: CropProfile(
        key=CropKey.corn,
        name="Corn (Maize)",
        price_per_tonne=240,
        expected_yield_t_ha=11.5,
        growth_days=120,
        water_requirement_mm=500,
        optimal_temp=(20, 30),
        stages=("germination", "vegetative", "flowering", "grain_filling", "maturity"),
    ),
    CropKey.wheat: CropProfile(
        key=CropKey.wheat,
        name="Winter Wheat",
        price_per_tonne=280,
        expected_yield_t_ha=7.2,
        growth_days=240,
        water_requirement_mm=450,
        optimal_temp=(15, 25),
        stages=(
            "germination",
            "tillering",
            "stem_elongation",
            "flowering",
            "grain_filling",
            "maturity",
        ),
    ),
    CropKey.soybean: CropProfile(
        key=CropKey.soybean,
        name="Soybean",
        price_per_tonne=520,
        expected_yield_t_ha=3.2,
        growth_days=100,
        water_requirement_mm=400,
        optimal_temp=(20, 28),
        stages=("germination", "vegetative", "flowering", "pod_development", "maturity"),
    ),
    CropKey.tomato: CropProfile(
        key=CropKey.tomato,
        name="Tomato",
        price_per_tonne=1200,
        expected_yield_t_ha=65,
        growth_days=90,
        water_requirement_mm=600,
        optimal_temp=(18, 26),
        stages=("germination", "vegetative", "flowering", "fruit_development", "maturity"),
    ),
}


def get_crop_profile(key: CropKey | str) -> CropProfile:
    try:
        return CROP_PROFILES[CropKey(key)]
    except ValueError as exc:
        raise LookupError(f"Unknown crop {key!r}") from exc
