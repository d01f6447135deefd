"""Enum types shared by the simulation models, schemas and services.

Each StrEnum value doubles as the external configuration token, so a
``FarmConfig`` can be built straight from plain strings.
"""

from enum import StrEnum

# ── Configuration enums ─────────────────────────────────────────────────────


class CropKey(StrEnum):
    """Crops available in the reference catalog."""

    corn = "corn"
    wheat = "wheat"
    soybean = "soybean"
    tomato = "tomato"


class SoilKey(StrEnum):
    """Soil textures available in the reference catalog."""

    clay = "clay"
    loam = "loam"
    sand = "sand"
    silt = "silt"


class IrrigationMode(StrEnum):
    """Water delivery method for the field."""

    rain = "rain"
    sprinkler = "sprinkler"
    drip = "drip"


# ── Simulation enums ────────────────────────────────────────────────────────


class Season(StrEnum):
    """Season derived from the day of year."""

    spring = "spring"
    summer = "summer"
    autumn = "autumn"
    winter = "winter"


class PestType(StrEnum):
    """Active pest or disease; ``none`` when the field is clean."""

    none = "none"
    aphids = "aphids"
    spider_mites = "spider_mites"
    corn_borer = "corn_borer"
    rust = "rust"
    blight = "blight"


class SimulationStatus(StrEnum):
    """Clock state machine."""

    idle = "idle"
    running = "running"
    paused = "paused"
