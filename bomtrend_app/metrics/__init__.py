"""Inflation attribution, aggregation and projection calculations"""

from .aggregate import calculate_aggregate_rates
from .attribution import ComponentAttributor, build_component_breakdown
from .inflation import (
    calculate_absolute_inflation,
    calculate_monthly_rate,
    calculate_share,
    compound,
)
from .projection import PriceProjector, project_module

__all__ = [
    "ComponentAttributor",
    "PriceProjector",
    "build_component_breakdown",
    "calculate_absolute_inflation",
    "calculate_aggregate_rates",
    "calculate_monthly_rate",
    "calculate_share",
    "compound",
    "project_module",
]
