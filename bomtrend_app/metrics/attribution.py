"""Component attribution of a module's price change over a comparison window"""

from typing import Optional

from ..data.models import ChipCatalog, ChipPrice, Module, PriceSeries
from ..logging.config import get_attribution_logger, log_data_quality_issue
from ..models.breakdown import BreakdownRow, ComparisonWindow, ComponentBreakdown, ComponentResult
from .inflation import calculate_absolute_inflation, calculate_monthly_rate, calculate_share

logger = get_attribution_logger(__name__)


def _price_or_zero(series: Optional[PriceSeries], month: str) -> float:
    if series is None:
        return 0.0
    price = series.price_at(month)
    return price if price is not None else 0.0


def _chip_window_prices(chip: Optional[ChipPrice], start: str, end: str) -> tuple[Optional[float], Optional[float]]:
    if chip is None:
        return 0.0, 0.0
    return chip.prices.price_at(start), chip.prices.price_at(end)


def build_component_breakdown(
    start_price: float,
    end_price: float,
    total_start: float,
    total_end: float,
    months: int,
    unavailable_reason: Optional[str] = None,
) -> ComponentBreakdown:
    """
    Build the breakdown record of one cost component

    Args:
        start_price: Component price at window start
        end_price: Component price at window end
        total_start: Module total price at window start
        total_end: Module total price at window end
        months: Calendar months spanned by the window
        unavailable_reason: When set, inflation figures are marked
            unavailable with this reason instead of being computed

    Returns:
        ComponentBreakdown with prices, inflation and shares
    """
    if unavailable_reason is None:
        inflation = calculate_absolute_inflation(start_price, end_price)
        monthly = calculate_monthly_rate(inflation, months, start_price=start_price)
        inflation_pct = ComponentResult.resolved(inflation)
        monthly_pct = ComponentResult.resolved(monthly)
    else:
        inflation_pct = ComponentResult.unavailable(unavailable_reason)
        monthly_pct = ComponentResult.unavailable(unavailable_reason)

    return ComponentBreakdown(
        start_price=start_price,
        end_price=end_price,
        inflation_pct=inflation_pct,
        monthly_pct=monthly_pct,
        share_start_pct=calculate_share(start_price, total_start),
        share_end_pct=calculate_share(end_price, total_end),
    )


class ComponentAttributor:
    """Attributes module price changes to memory, storage and residual cost"""

    def __init__(self, catalog: ChipCatalog, storage_technology: str = "EMMC"):
        self.catalog = catalog
        self.storage_technology = storage_technology

    def resolve_memory_chip(self, module: Module) -> Optional[ChipPrice]:
        """Chip price series matching the module's memory type and size."""
        return self.catalog.resolve(module.memory_technology, module.memory_size)

    def resolve_storage_chip(self, module: Module) -> Optional[ChipPrice]:
        """Chip price series for the module's storage, None without storage."""
        if not module.has_storage_chip:
            return None
        return self.catalog.resolve(self.storage_technology, module.storage_size)

    def attribute(self, module: Module, window: ComparisonWindow) -> BreakdownRow:
        """
        Compute the breakdown row of one module

        Args:
            module: Module to attribute
            window: Resolved comparison window

        Returns:
            BreakdownRow; never raises for missing chips or prices
        """
        start, end = window.start, window.end
        months = window.months_between

        total_start = _price_or_zero(module.prices, start)
        total_end = _price_or_zero(module.prices, end)

        memory_chip = self.resolve_memory_chip(module)
        memory_reason = None
        if memory_chip is None:
            memory_reason = "memory_chip_unresolved"
            log_data_quality_issue(
                logger,
                "chip_unresolved",
                module_name=module.name,
                context={
                    "component": "memory",
                    "technology": module.memory_technology,
                    "size": module.memory_size,
                }
            )

        storage_chip = self.resolve_storage_chip(module)
        storage_reason = None
        if not module.has_storage_chip:
            storage_reason = "no_storage"
        elif storage_chip is None:
            storage_reason = "storage_chip_unresolved"
            log_data_quality_issue(
                logger,
                "chip_unresolved",
                module_name=module.name,
                context={
                    "component": "storage",
                    "technology": self.storage_technology,
                    "size": module.storage_size,
                }
            )

        memory_start, memory_end = _chip_window_prices(memory_chip, start, end)
        if memory_start is None or memory_end is None:
            memory_reason = "chip_price_missing"
            self._log_missing_chip_price(module, "memory", memory_chip, memory_start, memory_end, window)

        storage_start, storage_end = _chip_window_prices(storage_chip, start, end)
        if storage_start is None or storage_end is None:
            storage_reason = "chip_price_missing"
            self._log_missing_chip_price(module, "storage", storage_chip, storage_start, storage_end, window)

        # A missing chip price contributes nothing to the split
        memory_start, memory_end = memory_start or 0.0, memory_end or 0.0
        storage_start, storage_end = storage_start or 0.0, storage_end or 0.0

        residual_start = total_start - memory_start - storage_start
        residual_end = total_end - memory_end - storage_end

        residual_negative = residual_start < 0 or residual_end < 0
        if residual_negative:
            log_data_quality_issue(
                logger,
                "residual_negative",
                module_name=module.name,
                context={
                    "window_start": start,
                    "window_end": end,
                    "residual_start": residual_start,
                    "residual_end": residual_end,
                }
            )

        return BreakdownRow(
            module_name=module.name,
            memory_technology=module.memory_technology,
            window=window,
            total=build_component_breakdown(
                total_start, total_end, total_start, total_end, months
            ),
            memory=build_component_breakdown(
                memory_start, memory_end, total_start, total_end, months,
                unavailable_reason=memory_reason
            ),
            storage=build_component_breakdown(
                storage_start, storage_end, total_start, total_end, months,
                unavailable_reason=storage_reason
            ),
            residual=build_component_breakdown(
                residual_start, residual_end, total_start, total_end, months
            ),
            has_memory=memory_chip is not None,
            has_storage=storage_chip is not None,
            residual_negative=residual_negative,
            latest_price=module.prices.latest_price(),
        )

    def _log_missing_chip_price(self, module: Module, component: str, chip: ChipPrice,
                                start_price: Optional[float], end_price: Optional[float],
                                window: ComparisonWindow) -> None:
        log_data_quality_issue(
            logger,
            "chip_price_missing",
            module_name=module.name,
            context={
                "component": component,
                "technology": chip.key.technology,
                "size": chip.key.size,
                "window_start": window.start,
                "window_end": window.end,
                "start_missing": start_price is None,
                "end_missing": end_price is None,
            }
        )

    def attribute_all(self, modules: list[Module], window: Optional[ComparisonWindow]) -> list[BreakdownRow]:
        """Breakdown rows for a selection, in selection order."""
        if window is None:
            return []
        return [self.attribute(module, window) for module in modules]
