"""Command-line entrypoint: headless runs and catalog listing."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from agrisim.config import get_settings
from agrisim.models.crops import CROP_PROFILES
from agrisim.models.enums import CropKey, IrrigationMode, SoilKey
from agrisim.models.soils import SOIL_PROFILES
from agrisim.observability import configure_structured_logging
from agrisim.schemas.farm import InvalidConfiguration, build_farm_config
from agrisim.schemas.snapshot import SimulationSnapshot
from agrisim.services.runner import SimulationRunner
from agrisim.services.simulation import SimulationEngine

EXIT_INVALID_CONFIG = 2

console = Console()


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="agrisim", description="Day-stepped farm simulation")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Simulate a crop cycle and print the outcome")
    run.add_argument("--crop", default=settings.default_crop.value, choices=[c.value for c in CropKey])
    run.add_argument("--field-size", type=float, default=settings.default_field_size_ha, help="hectares")
    run.add_argument("--soil", default=settings.default_soil.value, choices=[s.value for s in SoilKey])
    run.add_argument(
        "--irrigation",
        default=settings.default_irrigation.value,
        choices=[m.value for m in IrrigationMode],
    )
    run.add_argument("--fertilizer", type=float, default=settings.default_fertilizer_rate, help="kg/ha")
    run.add_argument("--days", type=int, default=None, help="days to simulate (default: crop cycle)")
    run.add_argument("--seed", type=int, default=settings.rng_seed)
    run.add_argument("--export", type=Path, default=None, help="write the history CSV to this path")
    run.add_argument("--realtime", action="store_true", help="pace ticks at the configured interval")

    sub.add_parser("crops", help="List crop and soil catalogs")
    return parser


def _summary_table(snapshot: SimulationSnapshot) -> Table:
    table = Table(title=f"Day {snapshot.day}: {snapshot.crop.value}", border_style="green")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Season", snapshot.season.value)
    table.add_row("Stage", snapshot.growth_stage.replace("_", " "))
    table.add_row("Growth", f"{snapshot.progress_percent:.1f}%")
    table.add_row("Soil moisture", f"{snapshot.soil_moisture:.1f}%")
    nutrients = snapshot.soil_nutrients
    table.add_row("N / P / K", f"{nutrients.nitrogen:.1f} / {nutrients.phosphorus:.1f} / {nutrients.potassium:.1f}")
    pest_style = "red" if snapshot.pest.alert else "green"
    table.add_row("Pests", f"[{pest_style}]{snapshot.pest.level:.0f}% ({snapshot.pest.pest_type.value})[/{pest_style}]")
    table.add_row("Yield", f"{snapshot.yield_t_ha:.1f} t/ha")
    table.add_row("Revenue", f"${snapshot.revenue:,.2f}")
    table.add_row("Total costs", f"${snapshot.cost:,.2f}")
    profit_style = "green" if snapshot.profit >= 0 else "red"
    table.add_row("Net profit", f"[{profit_style}]${snapshot.profit:,.2f}[/{profit_style}]")
    table.add_row("Per hectare", f"${snapshot.profit_per_ha:,.2f}")
    return table


def _cmd_run(args: argparse.Namespace) -> int:
    try:
        config = build_farm_config(
            crop=args.crop,
            field_size_ha=args.field_size,
            soil=args.soil,
            irrigation=args.irrigation,
            fertilizer_rate=args.fertilizer,
        )
    except InvalidConfiguration as exc:
        console.print(f"[red]{exc}[/red]")
        return EXIT_INVALID_CONFIG

    engine = SimulationEngine(config, seed=args.seed)
    days = args.days if args.days is not None else config.crop_profile.growth_days

    if args.realtime:
        snapshot = asyncio.run(SimulationRunner(engine).run(max_days=days))
    else:
        snapshot = engine.run_days(days)

    console.print(_summary_table(snapshot))
    if args.export is not None:
        path = engine.write_export(args.export)
        console.print(f"History written to [bold]{path}[/bold] ({len(engine.history)} rows)")
    return 0


def _cmd_crops() -> int:
    crops = Table(title="Crops", border_style="blue")
    crops.add_column("Key", style="cyan")
    crops.add_column("Crop", style="white")
    crops.add_column("Days", justify="right")
    crops.add_column("Water (mm)", justify="right")
    crops.add_column("Optimal temp", justify="right")
    for key, crop in CROP_PROFILES.items():
        low, high = crop.optimal_temp
        crops.add_row(key.value, crop.label, str(crop.growth_days), f"{crop.water_requirement_mm:g}", f"{low:g}-{high:g} °C")

    soils = Table(title="Soils", border_style="blue")
    soils.add_column("Key", style="cyan")
    soils.add_column("Soil", style="white")
    soils.add_column("Drainage", justify="right")
    soils.add_column("Water holding", justify="right")
    for key, soil in SOIL_PROFILES.items():
        soils.add_row(key.value, soil.label, f"{soil.drainage:.1f}", f"{soil.water_holding:.1f}")

    console.print(crops)
    console.print(soils)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_structured_logging()
    if args.command == "run":
        return _cmd_run(args)
    return _cmd_crops()


if __name__ == "__main__":
    sys.exit(main())
