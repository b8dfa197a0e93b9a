"""
Pure helpers for ordering a price history and looking up reference prices.
Zero external dependencies.
"""

import math
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from src.domain.entities.stock_metrics import PriceSample


def _as_date(value: date) -> date:
    # datetime is a subclass of date; compare on the calendar day only.
    if isinstance(value, datetime):
        return value.date()
    return value


def normalize_series(samples: Iterable[PriceSample]) -> list[PriceSample]:
    """Return a date-ascending copy of *samples* with one sample per day.

    Samples whose close is missing, non-finite or non-positive are dropped.
    When a day appears more than once the last occurrence wins.
    """
    by_day: dict[date, PriceSample] = {}
    for sample in samples:
        close = sample.close
        if close is None or not math.isfinite(close) or close <= 0:
            continue
        day = _as_date(sample.date)
        by_day[day] = PriceSample(date=day, close=float(close))
    return [by_day[day] for day in sorted(by_day)]


def resolve_closest_price(
    series: Sequence[PriceSample],
    target_date: date,
) -> Optional[float]:
    """Return the latest close on or before *target_date*.

    Falls back to the earliest close when every sample is after the target,
    since the history may start later than the requested window.
    Returns None only for an empty series. The input is not mutated.
    """
    if not series:
        return None

    target = _as_date(target_date)
    ordered = sorted(series, key=lambda s: _as_date(s.date), reverse=True)
    for sample in ordered:
        if _as_date(sample.date) <= target:
            return sample.close
    return ordered[-1].close


def year_end_date(year: int) -> date:
    return date(year, 12, 31)
