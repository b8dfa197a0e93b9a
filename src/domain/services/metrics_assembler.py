"""
Assembles the StockMetrics record for one ticker from its price history and
a market snapshot.

Reference prices are resolved at December 31 of each year of interest:
  - YTD:         prior year-end close -> current price
  - 2023..2025:  year-end close -> following year-end close
  - 5Y / 10Y:    annualized, N-years-back year-end close -> current price

Pure and deterministic: no I/O, no clock, no retained state.
"""

import math
from typing import Optional, Sequence

from src.domain.entities.stock_metrics import MarketSnapshot, PriceSample, StockMetrics
from src.domain.services.price_series import resolve_closest_price, year_end_date
from src.domain.services.returns import annualized_return, simple_return


def _usable(price: Optional[float]) -> bool:
    return price is not None and math.isfinite(price) and price > 0


def _finite(value: Optional[float]) -> Optional[float]:
    if value is None or not math.isfinite(value):
        return None
    return float(value)


def _period_return(start: Optional[float], end: Optional[float]) -> Optional[float]:
    if not (_usable(start) and _usable(end)):
        return None
    return _finite(simple_return(start, end))


def _annualized(start: Optional[float], end: Optional[float], years: int) -> Optional[float]:
    if not (_usable(start) and _usable(end)):
        return None
    return _finite(annualized_return(start, end, years))


def assemble_metrics(
    ticker: str,
    price_series: Sequence[PriceSample],
    current_price: Optional[float],
    current_year: int,
    *,
    snapshot: Optional[MarketSnapshot] = None,
) -> StockMetrics:
    """Derive the return and ratio fields for *ticker*.

    Any field whose inputs are missing comes back as None; this never raises
    for missing data.
    """

    def close_at_year_end(year: int) -> Optional[float]:
        return resolve_closest_price(price_series, year_end_date(year))

    prev_year_end = close_at_year_end(current_year - 1)

    end_2022 = close_at_year_end(2022)
    end_2023 = close_at_year_end(2023)
    end_2024 = close_at_year_end(2024)
    end_2025 = close_at_year_end(2025)

    # Both year-ends resolving to the same close means no 2025 trading is in
    # the series yet, not a flat year.
    return_2025 = None
    if end_2024 != end_2025:
        return_2025 = _period_return(end_2024, end_2025)

    five_years_back = close_at_year_end(current_year - 5)
    ten_years_back = close_at_year_end(current_year - 10)

    snapshot = snapshot or MarketSnapshot(symbol=ticker)
    ps_trailing = _finite(snapshot.price_to_sales_trailing)

    return StockMetrics(
        ticker=ticker,
        name=snapshot.name or ticker,
        current_price=_finite(current_price),
        ytd_return=_period_return(prev_year_end, current_price),
        return_2025=return_2025,
        return_2024=_period_return(end_2023, end_2024),
        return_2023=_period_return(end_2022, end_2023),
        return_5_year=_annualized(five_years_back, current_price, 5),
        return_10_year=_annualized(ten_years_back, current_price, 10),
        pe_ltm=_finite(snapshot.trailing_pe),
        pe_ntm=_finite(snapshot.forward_pe),
        ps_ltm=ps_trailing,
        # Provisional: no forward P/S source, so the trailing figure stands in.
        ps_ntm=ps_trailing,
    )


def failed_metrics(ticker: str, message: str) -> StockMetrics:
    """All-absent record carrying the reason the fetch failed."""
    return StockMetrics(ticker=ticker, name=ticker, error=message)
