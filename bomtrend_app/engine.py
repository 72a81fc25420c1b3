"""
Main inflation engine coordinator.

Holds the immutable module and chip reference data and runs the breakdown
pipeline: window resolution, component attribution, aggregate rates and
price projection. Every stage is a pure function of its inputs; callers
decide when to recompute.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .data.models import ChipCatalog, ChipPrice, Module
from .data.parsers import load_chip_dataset, load_module_dataset
from .metrics.aggregate import calculate_aggregate_rates
from .metrics.attribution import ComponentAttributor
from .metrics.projection import PriceProjector
from .models.breakdown import (
    AggregateRates,
    BreakdownRow,
    ComparisonWindow,
    ProjectionTrajectory,
    RateAdjustments,
)
from .utils.time import TimeIndex

logger = structlog.get_logger(__name__)

WindowLike = Union[ComparisonWindow, tuple[str, str], None]


@dataclass(frozen=True)
class DashboardInputs:
    """Everything a recomputation depends on."""
    selection: tuple[Module, ...] = ()
    window_start: Optional[str] = None            # None = oldest valid start month
    adjustments: RateAdjustments = field(default_factory=RateAdjustments)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Derived state for one set of inputs."""
    window: Optional[ComparisonWindow]
    rows: tuple[BreakdownRow, ...]
    aggregate: AggregateRates
    trajectories: dict[str, ProjectionTrajectory]

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to show."""
        return not self.rows


class BomTrendEngine:
    """
    Main coordinator for the module price inflation breakdown.

    Manages the evaluation pipeline:
    Reference Data → Time Index → Attribution → Aggregate Rates → Projection
    """

    def __init__(
        self,
        modules: Sequence[Module],
        chips: Union[ChipCatalog, Iterable[ChipPrice]],
        config: Optional[DefaultConfig] = None,
        config_dir: Optional[Path] = None,
    ) -> None:
        """Initialize the engine over loaded reference data."""
        self.logger = logger
        self.config = config or ConfigLoader.create(config_dir).load()

        self.modules = tuple(modules)
        self.catalog = chips if isinstance(chips, ChipCatalog) else ChipCatalog(chips)

        self.time_index = TimeIndex.from_modules(
            self.modules, offset_months=self.config.window.offset_months
        )
        self.attributor = ComponentAttributor(
            self.catalog, storage_technology=self.config.chips.storage_technology
        )
        self.projector = PriceProjector(horizon_months=self.config.projection.horizon_months)

        self.logger.info(
            "BOM trend engine initialized",
            modules=len(self.modules),
            chips=len(self.catalog),
            months=len(self.time_index),
            valid_window_starts=len(self.time_index.valid_start_months())
        )

    @classmethod
    def from_files(
        cls,
        module_path: Union[str, Path],
        chip_path: Union[str, Path],
        config: Optional[DefaultConfig] = None,
        config_dir: Optional[Path] = None,
    ) -> "BomTrendEngine":
        """Build an engine from the prepared module and chip JSON files."""
        return cls(
            load_module_dataset(module_path),
            load_chip_dataset(chip_path),
            config=config,
            config_dir=config_dir,
        )

    def list_valid_window_starts(self) -> list[str]:
        """Start months that have a year-over-year counterpart, oldest first."""
        return self.time_index.valid_start_months()

    def resolve_window(self, start: Optional[str]) -> Optional[ComparisonWindow]:
        """Comparison window for a start month, None if it has no counterpart."""
        return self.time_index.resolve_window(start)

    def default_window(self) -> Optional[ComparisonWindow]:
        """Window of the oldest valid start month."""
        return self.time_index.default_window()

    def compute_breakdown(self, selection: Iterable[Module], window: WindowLike) -> list[BreakdownRow]:
        """
        Attribute each selected module's price change over a window.

        Args:
            selection: Selected modules; output keeps this order
            window: ComparisonWindow, (start, end) month pair, or None

        Returns:
            One BreakdownRow per module; empty when the window does not
            resolve or the selection is empty
        """
        resolved = self._coerce_window(window)
        if resolved is None:
            return []

        return self.attributor.attribute_all(list(selection), resolved)

    def compute_aggregate_rates(self, rows: Sequence[BreakdownRow]) -> AggregateRates:
        """Selection-wide memory and storage rates (baseline for projection)."""
        return calculate_aggregate_rates(rows)

    def project_prices(
        self,
        rows: Sequence[BreakdownRow],
        baseline: AggregateRates,
        deltas: Optional[RateAdjustments] = None,
    ) -> dict[str, ProjectionTrajectory]:
        """Project each row forward under baseline rates plus manual deltas."""
        return self.projector.project(rows, baseline, deltas or RateAdjustments())

    def evaluate(self, inputs: DashboardInputs) -> DashboardSnapshot:
        """
        Recompute all derived state from scratch for one set of inputs.

        Args:
            inputs: Selection, window start and rate adjustments

        Returns:
            DashboardSnapshot; empty collections and zero rates when the
            window cannot be resolved or nothing is selected
        """
        if inputs.window_start is None:
            window = self.default_window()
        else:
            window = self.resolve_window(inputs.window_start)

        rows = self.compute_breakdown(inputs.selection, window)
        aggregate = self.compute_aggregate_rates(rows)
        trajectories = self.project_prices(rows, aggregate, inputs.adjustments)

        self.logger.debug(
            "Dashboard recomputed",
            window_start=window.start if window else None,
            window_end=window.end if window else None,
            modules=len(rows),
            memory_monthly=aggregate.memory_monthly,
            storage_monthly=aggregate.storage_monthly,
            negative_residuals=sum(1 for row in rows if row.residual_negative)
        )

        return DashboardSnapshot(
            window=window,
            rows=tuple(rows),
            aggregate=aggregate,
            trajectories=trajectories,
        )

    def _coerce_window(self, window: WindowLike) -> Optional[ComparisonWindow]:
        """Resolve a window argument against the time index."""
        if window is None:
            return None

        if isinstance(window, ComparisonWindow):
            start, end = window.start, window.end
        elif isinstance(window, (tuple, list)) and len(window) == 2:
            start, end = window
        else:
            self.logger.debug("Window not a (start, end) pair", window=repr(window))
            return None

        resolved = self.resolve_window(start)
        if resolved is None or resolved.end != self.time_index.canonical(end):
            self.logger.debug("Window not resolvable", window_start=start, window_end=end)
            return None

        return resolved
