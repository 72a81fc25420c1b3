#!/usr/bin/env python3
"""
Basic Usage Example - BOM Trend Inflation Engine

This script demonstrates the basic usage of the inflation breakdown engine
with a small in-memory dataset. It shows how to:
- Build module and chip reference data
- List the valid comparison windows
- Break a selection's price change down into memory, storage and residual
- Project prices forward and nudge the projection with manual deltas

Run: python examples/basic_usage.py
"""

from typing import Dict, List, Optional

from bomtrend_app.data.models import ChipCatalog, ChipPrice, Module, PriceSeries, normalize_chip_key
from bomtrend_app.engine import BomTrendEngine, DashboardInputs, DashboardSnapshot
from bomtrend_app.logging import configure_logging
from bomtrend_app.models.breakdown import BreakdownRow, RateAdjustments
from bomtrend_app.selection import ModuleFamily, select_modules
from bomtrend_app.utils.time import add_months, format_month

MONTHS = [format_month(add_months((2023, 1), i)) for i in range(15)]


def create_series(start: float, end: float, newest_first: bool = True) -> PriceSeries:
    """Create a series that moves linearly from start to end over the first year."""
    prices: List[Optional[float]] = []
    for i, _ in enumerate(MONTHS):
        step = min(i, 11) / 11
        prices.append(round(start + (end - start) * step, 2))

    months = list(MONTHS)
    if newest_first:
        months.reverse()
        prices.reverse()
    return PriceSeries(months=tuple(months), prices=tuple(prices))


def create_sample_modules() -> List[Module]:
    """Create sample modules."""
    return [
        Module("Raspberry Pi 5 8GB", 8.0, "LPDDR4X", 0.0, create_series(80.0, 95.0)),
        Module("Raspberry Pi 5 4GB", 4.0, "LPDDR4X", 0.0, create_series(60.0, 60.0)),
        Module("CM5 8GB 32GB", 8.0, "LPDDR4X", 32.0, create_series(105.0, 120.0)),
        Module("CM5 8GB Lite", 8.0, "LPDDR4X", 0.0, create_series(90.0, 100.0)),
    ]


def create_sample_catalog() -> ChipCatalog:
    """Create sample chip prices (oldest first, as the chip dataset stores them)."""
    return ChipCatalog([
        ChipPrice(normalize_chip_key("LPDDR4X", 8), create_series(18.0, 30.0, newest_first=False), "LPDDR4X"),
        ChipPrice(normalize_chip_key("LPDDR4X", 4), create_series(10.0, 14.0, newest_first=False), "LPDDR4X"),
        ChipPrice(normalize_chip_key("EMMC", 32), create_series(5.0, 4.2, newest_first=False), "EMMC"),
    ])


def print_row(row: BreakdownRow) -> None:
    """Print one breakdown row."""
    print(f"📦 {row.module_name} ({row.memory_technology})")
    for name in ("total", "memory", "storage", "residual"):
        component = row.component(name)
        inflation = component.inflation_pct
        if inflation.available:
            change = f"{inflation.value:+.2f}% ({component.monthly_pct.value:+.3f}%/month)"
        else:
            change = f"n/a ({inflation.reason})"
        print(f"  {name:<9} ${component.start_price:>7.2f} → ${component.end_price:>7.2f}  {change}")
    if row.residual_negative:
        print("  ⚠️  Chip cost exceeds module price at a window end")


def print_projection(snapshot: DashboardSnapshot) -> None:
    """Print the projected price path of each module."""
    for name, trajectory in snapshot.trajectories.items():
        path: Dict[str, float] = dict(zip(trajectory.labels, trajectory.points))
        print(f"  {name}: {path['Current']:.2f} → M6 {path['M6']:.2f} → M12 {path['M12']:.2f}")


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("🚀 BOM Trend Inflation Engine - Basic Usage Demo")
    print("=" * 60)

    print("1. Initializing the engine...")
    engine = BomTrendEngine(create_sample_modules(), create_sample_catalog())
    print(f"   Modules: {len(engine.modules)}, chips: {len(engine.catalog)}")
    print()

    print("2. Valid comparison windows:")
    for start in engine.list_valid_window_starts():
        window = engine.resolve_window(start)
        print(f"   {window.start} → {window.end}")
    print()

    print("3. Breakdown for 8GB modules over the default window...")
    selection = tuple(m for m in engine.modules if m.memory_size == 8.0)
    snapshot = engine.evaluate(DashboardInputs(selection=selection))
    for row in snapshot.rows:
        print_row(row)
    print()

    aggregate = snapshot.aggregate
    print("4. Selection-wide rates:")
    print(f"   Memory : {aggregate.memory_monthly:+.3f}%/month over {aggregate.memory_count} modules")
    print(f"   Storage: {aggregate.storage_monthly:+.3f}%/month over {aggregate.storage_count} modules")
    print()

    print("5. Baseline projection:")
    print_projection(snapshot)
    print()

    step = engine.config.projection.adjustment_step_pct
    adjustments = RateAdjustments().adjust("memory", step).adjust("memory", step)
    print(f"6. Projection with memory rate +{adjustments.memory:.2f}%/month:")
    print_projection(engine.evaluate(DashboardInputs(selection=selection, adjustments=adjustments)))
    print()

    print("7. Compute modules with 8GB memory and 32GB storage:")
    cm_selection = select_modules(engine.modules, ModuleFamily.COMPUTE_MODULE, 8.0, 32.0)
    for row in engine.compute_breakdown(cm_selection, engine.default_window()):
        print_row(row)
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
