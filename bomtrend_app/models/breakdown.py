"""Data models for inflation breakdown and projection results"""

from dataclasses import dataclass, replace
from typing import Optional

MEMORY = "memory"
STORAGE = "storage"
RESIDUAL = "residual"


@dataclass(frozen=True)
class ComparisonWindow:
    """Year-over-year (start, end) month pair"""
    start: str              # YYYY-MM-01
    end: str                # YYYY-MM-01
    months_between: int


@dataclass(frozen=True)
class ComponentResult:
    """
    A figure that is either resolved to a value or explicitly unavailable.

    Unavailable is distinct from a resolved 0.0: a module without a storage
    chip has no storage inflation, which is not the same as 0% inflation.
    """
    value: Optional[float] = None
    reason: Optional[str] = None

    @classmethod
    def resolved(cls, value: float) -> "ComponentResult":
        """Create a resolved result."""
        return cls(value=float(value))

    @classmethod
    def unavailable(cls, reason: str) -> "ComponentResult":
        """Create an unavailable result."""
        return cls(value=None, reason=reason)

    @property
    def available(self) -> bool:
        return self.value is not None

    def value_or(self, default: float) -> float:
        """Resolved value, or ``default`` when unavailable."""
        return self.value if self.value is not None else default


@dataclass(frozen=True)
class ComponentBreakdown:
    """Start/end price, inflation and share of one cost component"""
    start_price: float
    end_price: float
    inflation_pct: ComponentResult       # Cumulative change over the window
    monthly_pct: ComponentResult         # De-compounded constant monthly rate
    share_start_pct: float
    share_end_pct: float


@dataclass(frozen=True)
class BreakdownRow:
    """Per-module attribution of a price change over one comparison window"""
    module_name: str
    memory_technology: str
    window: ComparisonWindow
    total: ComponentBreakdown
    memory: ComponentBreakdown
    storage: ComponentBreakdown
    residual: ComponentBreakdown
    has_memory: bool                     # Memory chip resolved in the catalog
    has_storage: bool                    # Storage size > 0 and chip resolved
    residual_negative: bool = False      # Memory + storage exceed total at an end
    latest_price: Optional[float] = None # Most recent known module price

    def component(self, name: str) -> ComponentBreakdown:
        """Look up a component breakdown by name."""
        return {
            "total": self.total,
            MEMORY: self.memory,
            STORAGE: self.storage,
            RESIDUAL: self.residual,
        }[name]


@dataclass(frozen=True)
class AggregateRates:
    """Selection-wide memory and storage inflation"""
    memory_monthly: float = 0.0
    storage_monthly: float = 0.0
    memory_absolute: float = 0.0
    storage_absolute: float = 0.0
    memory_count: int = 0
    storage_count: int = 0

    @property
    def memory_available(self) -> bool:
        return self.memory_count > 0

    @property
    def storage_available(self) -> bool:
        return self.storage_count > 0


@dataclass(frozen=True)
class RateAdjustments:
    """Manual additive monthly rate deltas, in percent"""
    memory: float = 0.0
    storage: float = 0.0
    residual: float = 0.0

    def adjust(self, component: str, amount: float) -> "RateAdjustments":
        """
        Return a copy with one delta moved by ``amount``.

        Args:
            component: "memory", "storage" or "residual"
            amount: Signed step in percentage points

        Returns:
            New RateAdjustments, the moved delta rounded to 2 decimals
        """
        if component not in (MEMORY, STORAGE, RESIDUAL):
            raise ValueError(f"Unknown rate component: {component}")

        current = getattr(self, component)
        return replace(self, **{component: round(current + amount, 2)})


@dataclass(frozen=True)
class ProjectionTrajectory:
    """Projected total price path of one module"""
    module_name: str
    points: tuple[float, ...]            # Index 0 = current price
    memory_rate_pct: float
    storage_rate_pct: float
    residual_rate_pct: float

    @property
    def current_price(self) -> float:
        return self.points[0]

    @property
    def final_price(self) -> float:
        return self.points[-1]

    @property
    def labels(self) -> list[str]:
        """Chart labels: "Current", "M1", "M2", ..."""
        return ["Current"] + [f"M{i}" for i in range(1, len(self.points))]
