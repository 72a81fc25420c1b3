"""Pytest configuration and shared fixtures."""

from typing import Callable, Optional

import pytest

from bomtrend_app.config.defaults import get_default_config
from bomtrend_app.data.models import ChipCatalog, ChipPrice, Module, PriceSeries, normalize_chip_key
from bomtrend_app.utils.time import add_months, format_month

# 2023-01-01 .. 2024-03-01, oldest first
MONTHS = [format_month(add_months((2023, 1), i)) for i in range(15)]

SeriesFactory = Callable[..., PriceSeries]


def _make_series(prices: dict[str, Optional[float]], default: Optional[float] = None,
                 newest_first: bool = True, months: Optional[list[str]] = None) -> PriceSeries:
    months = list(months or MONTHS)
    values = [prices.get(m, default) for m in months]
    if newest_first:
        months.reverse()
        values.reverse()
    return PriceSeries(months=tuple(months), prices=tuple(values))


@pytest.fixture
def make_series() -> SeriesFactory:
    """Factory for price series over the sample months."""
    return _make_series


@pytest.fixture
def sample_config():
    """Built-in default configuration."""
    return get_default_config()


@pytest.fixture
def pi5() -> Module:
    """Single board computer: total 100 -> 121, memory chip 10 -> 20, no storage."""
    return Module(
        name="Raspberry Pi 5",
        memory_size=4.0,
        memory_technology="LPDDR4X",
        storage_size=0.0,
        prices=_make_series({"2023-01-01": 100.0, "2023-12-01": 121.0, "2024-03-01": 130.0}, default=110.0),
    )


@pytest.fixture
def cm4_emmc() -> Module:
    """Compute module with eMMC: total 80 -> 88, memory 5 -> 5.5, storage 4 -> 3."""
    return Module(
        name="CM4 16GB",
        memory_size=2.0,
        memory_technology=" lpddr4 ",
        storage_size=16.0,
        prices=_make_series({"2023-01-01": 80.0, "2023-12-01": 88.0, "2024-03-01": 90.0}, default=85.0),
    )


@pytest.fixture
def cm4_lite() -> Module:
    """Compute module without storage sharing the CM4 memory chip."""
    return Module(
        name="CM4 Lite",
        memory_size=2.0,
        memory_technology="LPDDR4",
        storage_size=0.0,
        prices=_make_series({"2023-01-01": 50.0, "2023-12-01": 55.0}, default=52.0),
    )


@pytest.fixture
def pi_zero() -> Module:
    """Module whose memory chip has no market price series."""
    return Module(
        name="Raspberry Pi Zero",
        memory_size=0.5,
        memory_technology="LPDDR2",
        storage_size=0.0,
        prices=_make_series({}, default=15.0),
    )


@pytest.fixture
def sample_modules(pi5, cm4_emmc, cm4_lite, pi_zero) -> list[Module]:
    """Module dataset in dataset order."""
    return [cm4_emmc, cm4_lite, pi5, pi_zero]


@pytest.fixture
def sample_catalog() -> ChipCatalog:
    """Chip prices stored oldest first, unlike module series."""
    return ChipCatalog([
        ChipPrice(
            key=normalize_chip_key("LPDDR4X", 4),
            prices=_make_series({"2023-01-01": 10.0, "2023-12-01": 20.0}, default=15.0, newest_first=False),
            name="LPDDR4X",
        ),
        ChipPrice(
            key=normalize_chip_key("LPDDR4", 2),
            prices=_make_series({"2023-01-01": 5.0, "2023-12-01": 5.5}, default=5.0, newest_first=False),
            name="LPDDR4",
        ),
        ChipPrice(
            key=normalize_chip_key("EMMC", 16),
            prices=_make_series({"2023-01-01": 4.0, "2023-12-01": 3.0}, default=3.5, newest_first=False),
            name="EMMC",
        ),
    ])


@pytest.fixture
def raw_module_records() -> list[dict]:
    """Module dataset as produced by the preparation step."""
    return [
        {
            "NAME": "CM5 8GB",
            "RAM": 8,
            "EMMC": 32,
            "DRAM_TYPE": "LPDDR4X",
            "SKU": "SC1000",
            "EAN": "5056561800001",
            "USD": [110.0, 105.0, None],
            "DATE": ["2024-03-01", "2024-02-01", "2024-01-01"],
        },
        {
            "NAME": "Raspberry Pi 4",
            "RAM": 0.5,
            "EMMC": 0,
            "DRAM_TYPE": "LPDDR4",
            "USD": ["$35.00", 35, 35],
            "DATE": ["2024-03-01", "2024-02-01", "2024-01-01"],
        },
    ]


@pytest.fixture
def raw_chip_records() -> list[dict]:
    """Chip dataset as produced by the preparation step."""
    return [
        {"NAME": "LPDDR4X", "SIZE": 8, "USD": [20.0, 21.0, 22.0], "DATE": ["2024-01-01", "2024-02-01", "2024-03-01"]},
        {"NAME": "EMMC", "SIZE": 32, "USD": [3.0, 3.2, 3.4], "DATE": ["2024-01-01", "2024-02-01", "2024-03-01"]},
    ]
