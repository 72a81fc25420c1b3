"""Selection-wide memory and storage inflation rates"""

from collections.abc import Sequence

from ..models.breakdown import AggregateRates, BreakdownRow, ComponentBreakdown
from .inflation import calculate_monthly_rate


def _counts_toward_average(component: ComponentBreakdown) -> bool:
    return component.inflation_pct.available and component.start_price > 0


def calculate_aggregate_rates(rows: Sequence[BreakdownRow]) -> AggregateRates:
    """
    Average memory and storage inflation across breakdown rows

    Only rows whose chip resolved and whose chip start price is positive
    contribute; the rest are left out of both sum and count rather than
    counted as 0%. The averaged absolute inflation is then de-compounded
    over the window shared by all rows.

    Args:
        rows: Breakdown rows of the current selection, all on one window

    Returns:
        AggregateRates; all zeros for an empty selection
    """
    if not rows:
        return AggregateRates()

    months = rows[0].window.months_between

    memory_values = [
        row.memory.inflation_pct.value
        for row in rows
        if row.has_memory and _counts_toward_average(row.memory)
    ]
    storage_values = [
        row.storage.inflation_pct.value
        for row in rows
        if row.has_storage and _counts_toward_average(row.storage)
    ]

    memory_absolute = sum(memory_values) / len(memory_values) if memory_values else 0.0
    storage_absolute = sum(storage_values) / len(storage_values) if storage_values else 0.0

    return AggregateRates(
        memory_monthly=calculate_monthly_rate(memory_absolute, months),
        storage_monthly=calculate_monthly_rate(storage_absolute, months),
        memory_absolute=memory_absolute,
        storage_absolute=storage_absolute,
        memory_count=len(memory_values),
        storage_count=len(storage_values),
    )
