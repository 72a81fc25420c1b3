"""
Canonical reference data models for module and chip price histories.

This module defines immutable data structures that represent clean, typed
price data after parsing from the prepared JSON datasets. Chip keys are
normalized once here so that every later lookup is an exact dict hit.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional

from ..errors import MalformedDataError
from ..logging.config import get_logger
from ..utils.time import YearMonth, parse_month

logger = get_logger(__name__)


@dataclass(frozen=True)
class PriceSeries:
    """Month-keyed price history, stored in dataset order (newest first)."""
    months: tuple[str, ...]                  # YYYY-MM-01, index-aligned with prices
    prices: tuple[Optional[float], ...]      # None where no price is known
    _index: dict[YearMonth, Optional[float]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Check alignment and build the month lookup."""
        if len(self.months) != len(self.prices):
            raise MalformedDataError(
                f"Price series misaligned: {len(self.months)} months, {len(self.prices)} prices",
                expected_format="DATE and USD of equal length"
            )
        index = {parse_month(m): p for m, p in zip(self.months, self.prices)}
        object.__setattr__(self, "_index", index)

    def __len__(self) -> int:
        return len(self.months)

    def price_at(self, month: str) -> Optional[float]:
        """Price recorded for ``month``, None if absent or null."""
        try:
            key = parse_month(month)
        except MalformedDataError:
            return None
        return self._index.get(key)

    def latest_price(self) -> Optional[float]:
        """Most recent non-null price, independent of storage order."""
        known = [(key, price) for key, price in self._index.items() if price is not None]
        if not known:
            return None
        return max(known, key=lambda item: item[0])[1]


@dataclass(frozen=True)
class Module:
    """A hardware module and its retail price history."""
    name: str
    memory_size: Optional[float]             # GB
    memory_technology: str                   # e.g. "LPDDR4X"
    storage_size: Optional[float]            # GB, 0 = no storage chip
    prices: PriceSeries
    sku: str = ""
    ean: str = ""

    @property
    def has_storage_chip(self) -> bool:
        """True if the module carries a storage chip."""
        return self.storage_size is not None and self.storage_size > 0


@dataclass(frozen=True)
class ChipKey:
    """Canonical (technology, size) identity of a chip price series."""
    technology: str                          # Trimmed, upper-cased
    size: float                              # GB


def normalize_chip_key(technology: Optional[str], size: Optional[float]) -> Optional[ChipKey]:
    """
    Build the canonical key for a chip lookup.

    Args:
        technology: Chip technology name, any case or padding
        size: Chip size in GB

    Returns:
        ChipKey, or None if either part is missing or size is not numeric
    """
    if technology is None or size is None or isinstance(size, bool):
        return None

    name = str(technology).strip().upper()
    if not name:
        return None

    try:
        numeric_size = float(size)
    except (TypeError, ValueError):
        return None

    return ChipKey(technology=name, size=numeric_size)


@dataclass(frozen=True)
class ChipPrice:
    """Market price history for one chip."""
    key: ChipKey
    prices: PriceSeries
    name: str = ""                           # Name as spelled in the dataset


class ChipCatalog:
    """Chip price lookup keyed by canonical (technology, size)."""

    def __init__(self, chips: Iterable[ChipPrice] = ()):
        self._chips: dict[ChipKey, ChipPrice] = {}

        for chip in chips:
            if chip.key in self._chips:
                logger.warning(
                    "Duplicate chip price entry ignored",
                    technology=chip.key.technology,
                    size=chip.key.size
                )
                continue
            self._chips[chip.key] = chip

    def __len__(self) -> int:
        return len(self._chips)

    def __iter__(self) -> Iterator[ChipPrice]:
        return iter(self._chips.values())

    def __contains__(self, key: object) -> bool:
        return key in self._chips

    def get(self, key: Optional[ChipKey]) -> Optional[ChipPrice]:
        """Chip for a canonical key, None if unknown."""
        if key is None:
            return None
        return self._chips.get(key)

    def resolve(self, technology: Optional[str], size: Optional[float]) -> Optional[ChipPrice]:
        """Normalize (technology, size) and look the chip up."""
        return self.get(normalize_chip_key(technology, size))
