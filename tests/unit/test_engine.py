"""
Unit tests for the BOM trend engine coordinator.
"""

import pytest

from bomtrend_app.config.defaults import ChipParams
from bomtrend_app.engine import BomTrendEngine, DashboardInputs, DashboardSnapshot
from bomtrend_app.models.breakdown import AggregateRates, ComparisonWindow, RateAdjustments


@pytest.fixture
def engine(sample_modules, sample_catalog, sample_config):
    return BomTrendEngine(sample_modules, sample_catalog, config=sample_config)


class TestEngineSetup:
    """Test engine construction"""

    def test_initialization(self, engine, sample_modules):
        """Test reference data and time index are built"""
        assert len(engine.modules) == len(sample_modules)
        assert len(engine.catalog) == 3
        assert len(engine.time_index) == 15

    def test_chip_iterable_accepted(self, sample_modules, sample_catalog, sample_config):
        """Test a plain list of chips is wrapped in a catalog"""
        engine = BomTrendEngine(sample_modules, list(sample_catalog), config=sample_config)
        assert len(engine.catalog) == 3

    def test_config_dir(self, sample_modules, sample_catalog, tmp_path):
        """Test configuration is loaded from a directory when not given"""
        (tmp_path / "bomtrend.yaml").write_text("window:\n  offset_months: 12\n")

        engine = BomTrendEngine(sample_modules, sample_catalog, config_dir=tmp_path)

        assert engine.config.window.offset_months == 12
        assert engine.default_window().end == "2024-01-01"

    def test_storage_technology_from_config(self, sample_modules, sample_catalog, sample_config):
        """Test the attributor uses the configured storage technology"""
        config = type(sample_config)(
            window=sample_config.window,
            projection=sample_config.projection,
            chips=ChipParams(storage_technology="UFS"),
            selection=sample_config.selection,
            logging=sample_config.logging,
        )
        engine = BomTrendEngine(sample_modules, sample_catalog, config=config)

        assert engine.attributor.storage_technology == "UFS"


class TestWindows:
    """Test window listing and resolution"""

    def test_list_valid_window_starts(self, engine):
        """Test valid starts are oldest first"""
        assert engine.list_valid_window_starts() == [
            "2023-01-01", "2023-02-01", "2023-03-01", "2023-04-01"
        ]

    def test_resolve_window(self, engine):
        """Test start month resolution"""
        window = engine.resolve_window("2023-03-01")
        assert window.end == "2024-02-01"
        assert engine.resolve_window("2023-09-01") is None

    def test_default_window(self, engine):
        """Test the default window is the oldest valid start"""
        assert engine.default_window() == ComparisonWindow(
            start="2023-01-01", end="2023-12-01", months_between=11
        )


class TestComputeBreakdown:
    """Test breakdown computation"""

    def test_breakdown_with_window(self, engine, pi5, cm4_emmc):
        """Test rows follow selection order"""
        rows = engine.compute_breakdown([pi5, cm4_emmc], engine.default_window())

        assert [row.module_name for row in rows] == ["Raspberry Pi 5", "CM4 16GB"]
        assert rows[0].total.inflation_pct.value == pytest.approx(21.0)

    def test_breakdown_with_month_pair(self, engine, pi5):
        """Test a (start, end) pair is accepted"""
        rows = engine.compute_breakdown([pi5], ("2023-01-01", "2023-12-01"))
        assert len(rows) == 1

    def test_breakdown_rejects_non_year_over_year_pair(self, engine, pi5):
        """Test end months other than the counterpart give no rows"""
        assert engine.compute_breakdown([pi5], ("2023-01-01", "2024-01-01")) == []
        assert engine.compute_breakdown([pi5], ("2023-09-01", "2024-08-01")) == []

    @pytest.mark.parametrize("window", [
        ("2023-01-01",),
        ("2023-01-01", "2023-12-01", "2024-01-01"),
        "2023-01-01",
        42,
    ])
    def test_breakdown_rejects_non_pairs(self, engine, pi5, window):
        """Test malformed window arguments give no rows instead of raising"""
        assert engine.compute_breakdown([pi5], window) == []

    def test_breakdown_without_window(self, engine, pi5):
        """Test an unresolved window gives no rows"""
        assert engine.compute_breakdown([pi5], None) == []

    def test_empty_selection(self, engine):
        """Test an empty selection gives no rows"""
        assert engine.compute_breakdown([], engine.default_window()) == []


class TestEvaluate:
    """Test full recomputation"""

    def test_evaluate_default_window(self, engine, pi5, cm4_emmc):
        """Test evaluation with the default window"""
        snapshot = engine.evaluate(DashboardInputs(selection=(pi5, cm4_emmc)))

        assert isinstance(snapshot, DashboardSnapshot)
        assert snapshot.window.start == "2023-01-01"
        assert len(snapshot.rows) == 2
        assert snapshot.aggregate.memory_absolute == pytest.approx(55.0)
        assert set(snapshot.trajectories) == {"Raspberry Pi 5", "CM4 16GB"}
        assert not snapshot.is_empty

    def test_evaluate_explicit_window(self, engine, pi5):
        """Test a chosen start month is used"""
        snapshot = engine.evaluate(DashboardInputs(selection=(pi5,), window_start="2023-02-01"))
        assert snapshot.window.end == "2024-01-01"

    def test_evaluate_unresolvable_window(self, engine, pi5):
        """Test an invalid start month yields an empty snapshot"""
        snapshot = engine.evaluate(DashboardInputs(selection=(pi5,), window_start="2023-08-01"))

        assert snapshot.window is None
        assert snapshot.is_empty
        assert snapshot.aggregate == AggregateRates()
        assert snapshot.trajectories == {}

    def test_evaluate_empty_selection(self, engine):
        """Test nothing selected yields zero rates and no trajectories"""
        snapshot = engine.evaluate(DashboardInputs())

        assert snapshot.is_empty
        assert snapshot.aggregate.memory_monthly == 0.0
        assert snapshot.aggregate.storage_monthly == 0.0

    def test_evaluate_is_pure(self, engine, pi5, cm4_emmc):
        """Test identical inputs give identical snapshots"""
        inputs = DashboardInputs(
            selection=(pi5, cm4_emmc),
            adjustments=RateAdjustments(memory=0.5),
        )
        assert engine.evaluate(inputs) == engine.evaluate(inputs)

    def test_adjustments_change_only_projection(self, engine, pi5, cm4_emmc):
        """Test manual deltas leave breakdown and aggregate untouched"""
        base = engine.evaluate(DashboardInputs(selection=(pi5, cm4_emmc)))
        adjusted = engine.evaluate(DashboardInputs(
            selection=(pi5, cm4_emmc),
            adjustments=RateAdjustments(memory=1.0, storage=-1.0),
        ))

        assert adjusted.rows == base.rows
        assert adjusted.aggregate == base.aggregate
        assert (adjusted.trajectories["Raspberry Pi 5"].final_price
                > base.trajectories["Raspberry Pi 5"].final_price)

    def test_project_prices_default_deltas(self, engine, pi5):
        """Test projection without deltas uses the baseline rates"""
        rows = engine.compute_breakdown([pi5], engine.default_window())
        baseline = engine.compute_aggregate_rates(rows)

        trajectory = engine.project_prices(rows, baseline)["Raspberry Pi 5"]

        assert trajectory.memory_rate_pct == pytest.approx(baseline.memory_monthly)
