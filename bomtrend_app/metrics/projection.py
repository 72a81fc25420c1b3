"""Forward price projection under per-component monthly inflation"""

from collections.abc import Sequence

from ..logging.config import get_projection_logger
from ..models.breakdown import AggregateRates, BreakdownRow, ProjectionTrajectory, RateAdjustments
from .inflation import compound

logger = get_projection_logger(__name__)


def project_module(
    row: BreakdownRow,
    memory_rate_pct: float,
    storage_rate_pct: float,
    residual_delta_pct: float = 0.0,
    horizon_months: int = 12,
) -> ProjectionTrajectory:
    """
    Project one module's total price month by month

    The current price is split into memory, storage and residual using the
    end-of-window shares. Each part compounds at its own rate and the parts
    are only summed per point, so one component never grows on another's
    base.

    Args:
        row: Breakdown row of the module
        memory_rate_pct: Monthly memory rate (baseline + delta)
        storage_rate_pct: Monthly storage rate (baseline + delta)
        residual_delta_pct: Added to the module's own residual monthly rate
        horizon_months: Number of projected points after the current one

    Returns:
        ProjectionTrajectory with ``horizon_months + 1`` points
    """
    total_now = row.latest_price if row.latest_price is not None else 0.0

    memory_share = row.memory.share_end_pct if row.has_memory else 0.0
    storage_share = row.storage.share_end_pct if row.has_storage else 0.0
    # Whole price is residual when the end total gave no shares
    residual_share = 100.0 - memory_share - storage_share

    residual_rate_pct = row.residual.monthly_pct.value_or(0.0) + residual_delta_pct

    memory = total_now * memory_share / 100.0
    storage = total_now * storage_share / 100.0
    residual = total_now * residual_share / 100.0

    points = [total_now]
    for _ in range(horizon_months):
        memory = compound(memory, memory_rate_pct)
        storage = compound(storage, storage_rate_pct)
        residual = compound(residual, residual_rate_pct)
        points.append(memory + storage + residual)

    return ProjectionTrajectory(
        module_name=row.module_name,
        points=tuple(points),
        memory_rate_pct=memory_rate_pct,
        storage_rate_pct=storage_rate_pct,
        residual_rate_pct=residual_rate_pct,
    )


class PriceProjector:
    """Projects price trajectories for a set of breakdown rows"""

    def __init__(self, horizon_months: int = 12):
        self.horizon_months = horizon_months

    def project(
        self,
        rows: Sequence[BreakdownRow],
        baseline: AggregateRates,
        deltas: RateAdjustments,
    ) -> dict[str, ProjectionTrajectory]:
        """
        Project every row under the baseline rates plus manual deltas

        Args:
            rows: Breakdown rows, end-of-window shares are the split point
            baseline: Selection-wide monthly memory and storage rates
            deltas: Additive adjustments; the residual delta is applied on
                top of each module's own residual rate

        Returns:
            Mapping of module name to trajectory, in row order
        """
        memory_rate = baseline.memory_monthly + deltas.memory
        storage_rate = baseline.storage_monthly + deltas.storage

        trajectories = {}
        for row in rows:
            trajectory = project_module(
                row,
                memory_rate_pct=memory_rate,
                storage_rate_pct=storage_rate,
                residual_delta_pct=deltas.residual,
                horizon_months=self.horizon_months,
            )
            trajectories[row.module_name] = trajectory

            logger.debug(
                "Module projected",
                module_name=row.module_name,
                current=trajectory.current_price,
                final=trajectory.final_price,
                memory_rate=memory_rate,
                storage_rate=storage_rate,
                residual_rate=trajectory.residual_rate_pct,
            )

        return trajectories
