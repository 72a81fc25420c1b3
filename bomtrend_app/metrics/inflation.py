"""Inflation, de-compounding and share calculations"""

from typing import Optional


def calculate_absolute_inflation(start_price: float, end_price: float) -> float:
    """
    Calculate cumulative percentage change over a period

    inflation = (end - start) / start * 100

    Args:
        start_price: Price at the start of the period
        end_price: Price at the end of the period

    Returns:
        Percentage change, 0.0 when start price is not positive
    """
    if start_price <= 0:
        return 0.0

    return (end_price - start_price) / start_price * 100.0


def calculate_monthly_rate(absolute_pct: float, months: int, start_price: Optional[float] = None) -> float:
    """
    De-compound a cumulative percentage change into a constant monthly rate

    monthly = ((1 + absolute/100) ^ (1/months) - 1) * 100

    Compounding the result for ``months`` periods reproduces ``absolute_pct``.
    This is the inverse of compound growth, not ``absolute_pct / months``.

    Args:
        absolute_pct: Cumulative change over the period, in percent
        months: Number of months the change spans
        start_price: Start price of the period; a non-positive value
            short-circuits to 0.0 like the absolute inflation

    Returns:
        Monthly rate in percent; 0.0 when months is not positive or the
        growth factor itself is not positive
    """
    if months <= 0:
        return 0.0

    if start_price is not None and start_price <= 0:
        return 0.0

    growth = 1.0 + absolute_pct / 100.0
    if growth <= 0:
        # A fractional power of a negative factor has no real value
        return 0.0

    return (growth ** (1.0 / months) - 1.0) * 100.0


def calculate_share(component_price: float, total_price: float) -> float:
    """
    Calculate a component's percentage of total price

    Returns:
        component / total * 100, 0.0 when total is not positive
    """
    if total_price <= 0:
        return 0.0

    return component_price / total_price * 100.0


def compound(value: float, monthly_pct: float, periods: int = 1) -> float:
    """Grow ``value`` at ``monthly_pct`` per period for ``periods`` periods."""
    return value * (1.0 + monthly_pct / 100.0) ** periods
