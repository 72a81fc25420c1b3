"""Tests for selection-wide aggregate rates"""

import pytest

from bomtrend_app.data.models import ChipCatalog, ChipKey, ChipPrice, Module
from bomtrend_app.metrics.aggregate import calculate_aggregate_rates
from bomtrend_app.metrics.attribution import ComponentAttributor
from bomtrend_app.metrics.inflation import calculate_monthly_rate
from bomtrend_app.models.breakdown import AggregateRates, ComparisonWindow


@pytest.fixture
def window():
    return ComparisonWindow(start="2023-01-01", end="2023-12-01", months_between=11)


@pytest.fixture
def attributor(sample_catalog):
    return ComponentAttributor(sample_catalog)


class TestAggregateRates:
    """Test averaging of component inflation across a selection"""

    def test_empty_selection(self):
        """Test no rows gives all-zero rates"""
        rates = calculate_aggregate_rates([])

        assert rates == AggregateRates()
        assert not rates.memory_available
        assert not rates.storage_available

    def test_average_then_decompound(self, attributor, pi5, cm4_emmc, window):
        """Test absolute inflation is averaged before de-compounding"""
        rows = attributor.attribute_all([pi5, cm4_emmc], window)
        rates = calculate_aggregate_rates(rows)

        assert rates.memory_absolute == pytest.approx(55.0)
        assert rates.memory_count == 2
        assert rates.memory_monthly == pytest.approx(calculate_monthly_rate(55.0, 11))

        assert rates.storage_absolute == pytest.approx(-25.0)
        assert rates.storage_count == 1
        assert rates.storage_monthly == pytest.approx(calculate_monthly_rate(-25.0, 11))

    def test_unavailable_not_counted_as_zero(self, attributor, pi5, pi_zero, window):
        """Test modules without a chip are excluded from the average"""
        rows = attributor.attribute_all([pi5, pi_zero], window)
        rates = calculate_aggregate_rates(rows)

        assert rates.memory_count == 1
        assert rates.memory_absolute == pytest.approx(100.0)

    def test_no_storage_in_selection(self, attributor, pi5, cm4_lite, window):
        """Test storage rate is zero and unavailable without storage chips"""
        rows = attributor.attribute_all([pi5, cm4_lite], window)
        rates = calculate_aggregate_rates(rows)

        assert rates.storage_monthly == 0.0
        assert not rates.storage_available
        assert rates.memory_available

    def test_zero_start_price_excluded(self, make_series, window):
        """Test chips with no start price do not contribute"""
        catalog = ChipCatalog([
            ChipPrice(
                key=ChipKey("LPDDR5", 8.0),
                prices=make_series({"2023-01-01": 0.0}, default=12.0),
            ),
        ])
        module = Module(
            name="Raspberry Pi 6",
            memory_size=8.0,
            memory_technology="LPDDR5",
            storage_size=0.0,
            prices=make_series({}, default=100.0),
        )

        rows = ComponentAttributor(catalog).attribute_all([module], window)
        rates = calculate_aggregate_rates(rows)

        assert rows[0].has_memory
        assert rows[0].memory.inflation_pct.value == 0.0
        assert rates.memory_count == 0
        assert rates.memory_monthly == 0.0

    def test_short_chip_series_excluded(self, make_series, sample_catalog, pi5, cm4_lite, window):
        """Test a chip without a price at the window end is not averaged in"""
        lpddr4 = sample_catalog.resolve("LPDDR4", 2)
        catalog = ChipCatalog([
            ChipPrice(
                key=ChipKey("LPDDR4X", 4.0),
                prices=make_series(
                    {}, default=10.0, newest_first=False,
                    months=["2023-01-01", "2023-02-01", "2023-03-01"],
                ),
            ),
            lpddr4,
        ])

        rows = ComponentAttributor(catalog).attribute_all([pi5, cm4_lite], window)
        rates = calculate_aggregate_rates(rows)

        assert rows[0].has_memory
        assert rows[0].memory.inflation_pct.reason == "chip_price_missing"
        assert rates.memory_count == 1
        assert rates.memory_absolute == pytest.approx(10.0)
        assert rates.memory_monthly > 0

    def test_order_independent(self, attributor, sample_modules, window):
        """Test selection order does not change the aggregate"""
        forward = calculate_aggregate_rates(attributor.attribute_all(sample_modules, window))
        backward = calculate_aggregate_rates(
            attributor.attribute_all(list(reversed(sample_modules)), window)
        )

        assert forward.memory_monthly == pytest.approx(backward.memory_monthly)
        assert forward.storage_monthly == pytest.approx(backward.storage_monthly)
