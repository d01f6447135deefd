"""SoilProfile reference data: texture coefficients, all in [0, 1]."""

from __future__ import annotations

from dataclasses import dataclass

from agrisim.models.enums import SoilKey


@dataclass(frozen=True)
class SoilProfile:
    """Soil texture coefficients consumed by the soil and yield models."""

    key: SoilKey
    drainage: float
    fertility: float
    water_holding: float

    @property
    def label(self) -> str:
        return f"{self.key.value.capitalize()} (Fertility: {self.fertility * 100:.0f}%)"


SOIL_PROFILES: dict[SoilKey, SoilProfile] = {
    SoilKey.clay: SoilProfile(key=SoilKey.clay, drainage=0.3, fertility=0.9, water_holding=0.9),
    SoilKey.loam: SoilProfile(key=SoilKey.loam, drainage=0.7, fertility=0.8, water_holding=0.7),
    SoilKey.sand: SoilProfile(key=SoilKey.sand, drainage=0.9, fertility=0.4, water_holding=0.3),
    SoilKey.silt: SoilProfile(key=SoilKey.silt, drainage=0.5, fertility=0.7, water_holding=0.8),
}


def get_soil_profile(key: SoilKey | str) -> SoilProfile:
    try:
        return SOIL_PROFILES[SoilKey(key)]
    except ValueError as exc:
        raise LookupError(f"Unknown soil {key!r}") from exc
