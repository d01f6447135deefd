"""Model registry: reference catalogs, enums and state records.

Application code can import everything from here::

    from agrisim.models import CROP_PROFILES, SimulationState, ...
"""

# ── Crop & soil reference ───────────────────────────────────────────────────
from agrisim.models.crops import CROP_PROFILES, CropProfile, get_crop_profile

# ── Enums ───────────────────────────────────────────────────────────────────
from agrisim.models.enums import (
    CropKey,
    IrrigationMode,
    PestType,
    Season,
    SimulationStatus,
    SoilKey,
)
from agrisim.models.soils import SOIL_PROFILES, SoilProfile, get_soil_profile

# ── Daily state records ─────────────────────────────────────────────────────
from agrisim.models.state import (
    CostBreakdown,
    HarvestResult,
    HistoryRecord,
    PestState,
    SimulationState,
    SoilState,
    StressFactors,
    WeatherSample,
)

__all__ = [
    # Crop & soil reference
    "CROP_PROFILES",
    "SOIL_PROFILES",
    "CostBreakdown",
    "CropKey",
    "CropProfile",
    "HarvestResult",
    "HistoryRecord",
    "IrrigationMode",
    "PestState",
    "PestType",
    "Season",
    "SimulationState",
    "SimulationStatus",
    "SoilKey",
    "SoilProfile",
    "SoilState",
    "StressFactors",
    "WeatherSample",
    "get_crop_profile",
    "get_soil_profile",
]
