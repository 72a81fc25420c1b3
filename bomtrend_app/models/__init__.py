"""Derived result models for breakdowns, aggregates and projections"""

from .breakdown import (
    AggregateRates,
    BreakdownRow,
    ComparisonWindow,
    ComponentBreakdown,
    ComponentResult,
    ProjectionTrajectory,
    RateAdjustments,
)

__all__ = [
    "AggregateRates",
    "BreakdownRow",
    "ComparisonWindow",
    "ComponentBreakdown",
    "ComponentResult",
    "ProjectionTrajectory",
    "RateAdjustments",
]
