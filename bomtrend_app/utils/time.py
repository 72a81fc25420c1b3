"""
Calendar month utilities and the comparison window time index.

Months are identified by their dataset string (``YYYY-MM-01``) and compared
on (year, month) fields only. Month distances count calendar-month fields,
never elapsed days, so January to December is always 11 months.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from ..errors import MalformedDataError
from ..models.breakdown import ComparisonWindow

if TYPE_CHECKING:
    from ..data.models import Module

MONTH_FORMAT = "%Y-%m-%d"

YearMonth = tuple[int, int]


def parse_month(month: str) -> YearMonth:
    """
    Parse a dataset month string into a (year, month) pair.

    Args:
        month: Month string in ``YYYY-MM-DD`` form (day is ignored)

    Returns:
        (year, month) tuple with month in 1..12

    Raises:
        MalformedDataError: If the string is not a valid date
    """
    try:
        parsed = datetime.strptime(str(month).strip(), MONTH_FORMAT)
    except ValueError as e:
        raise MalformedDataError(
            f"Invalid month string: {month!r}",
            raw_data=str(month)[:40],
            expected_format="YYYY-MM-01"
        ) from e
    return parsed.year, parsed.month


def format_month(year_month: YearMonth) -> str:
    """Format a (year, month) pair as ``YYYY-MM-01``."""
    year, month = year_month
    return f"{year:04d}-{month:02d}-01"


def add_months(year_month: YearMonth, months: int) -> YearMonth:
    """Shift a (year, month) pair by a number of calendar months."""
    year, month = year_month
    m0 = month - 1 + months
    return year + m0 // 12, m0 % 12 + 1


def months_between(start: str, end: str) -> int:
    """
    Count calendar months from ``start`` to ``end``.

    (end_year - start_year) * 12 + (end_month - start_month)
    """
    start_year, start_month = parse_month(start)
    end_year, end_month = parse_month(end)
    return (end_year - start_year) * 12 + (end_month - start_month)


class TimeIndex:
    """Ordered index of available months with year-over-year lookup"""

    def __init__(self, months: Iterable[str], offset_months: int = 11):
        self.offset_months = offset_months

        # First spelling seen wins when two strings share a (year, month)
        self._by_key: dict[YearMonth, str] = {}
        for month in months:
            self._by_key.setdefault(parse_month(month), month)

        self._months = [self._by_key[key] for key in sorted(self._by_key)]

    @classmethod
    def from_modules(cls, modules: Iterable["Module"], offset_months: int = 11) -> "TimeIndex":
        """Build the index from every month present in the module dataset."""
        return cls(
            (month for module in modules for month in module.prices.months),
            offset_months=offset_months,
        )

    def __len__(self) -> int:
        return len(self._months)

    def __contains__(self, month: object) -> bool:
        key = self._try_parse(month)
        return key is not None and key in self._by_key

    def canonical(self, month: object) -> Optional[str]:
        """Dataset spelling of ``month``, None if it is not available."""
        key = self._try_parse(month)
        if key is None:
            return None
        return self._by_key.get(key)

    def available_months(self) -> list[str]:
        """Distinct available months, oldest first."""
        return list(self._months)

    def one_year_later(self, month: str) -> Optional[str]:
        """
        Month exactly ``offset_months`` after ``month``.

        Returns:
            The dataset's month string, or None when that month is not
            available (or ``month`` itself cannot be parsed)
        """
        key = self._try_parse(month)
        if key is None:
            return None
        return self._by_key.get(add_months(key, self.offset_months))

    def valid_start_months(self) -> list[str]:
        """Available months that have a year-over-year counterpart."""
        return [m for m in self._months if self.one_year_later(m) is not None]

    def resolve_window(self, start: Optional[str]) -> Optional[ComparisonWindow]:
        """Resolve a start month to its comparison window, if it has one."""
        if start is None:
            return None

        end = self.one_year_later(start)
        if end is None:
            return None

        start_key = self._try_parse(start)
        if start_key not in self._by_key:
            return None

        canonical_start = self._by_key[start_key]
        return ComparisonWindow(
            start=canonical_start,
            end=end,
            months_between=months_between(canonical_start, end),
        )

    def default_window(self) -> Optional[ComparisonWindow]:
        """Window for the oldest valid start month, None if there is none."""
        valid = self.valid_start_months()
        if not valid:
            return None
        return self.resolve_window(valid[0])

    @staticmethod
    def _try_parse(month: object) -> Optional[YearMonth]:
        if not isinstance(month, str):
            return None
        try:
            return parse_month(month)
        except MalformedDataError:
            return None
