"""Helpers shared by the report tools."""

from datetime import date, timedelta
from typing import Callable, TypeVar

from pydantic import BaseModel

DATE_FORMAT = "%Y%m%d"
DEFAULT_LOOKBACK_DAYS = 365

Today = Callable[[], date]

FiltersT = TypeVar("FiltersT", bound=BaseModel)


def default_date_range(today: date, days: int = DEFAULT_LOOKBACK_DAYS) -> str:
    """
    The reporting period used when a caller gives none.

    Example:
        >>> default_date_range(date(2025, 8, 28))
        '20240828-20250828'
    """
    start = today - timedelta(days=days)
    return f"{start.strftime(DATE_FORMAT)}-{today.strftime(DATE_FORMAT)}"


def with_default_date(filters: FiltersT, today: Today = date.today) -> FiltersT:
    """Return ``filters`` with ``date`` filled in when it was omitted."""
    if getattr(filters, "date", None):
        return filters
    return filters.model_copy(update={"date": default_date_range(today())})
