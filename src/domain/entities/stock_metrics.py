"""
Domain entities for price history and derived stock metrics.
Zero external dependencies — pure Python dataclasses only.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class PriceSample:
    date: date
    close: float


@dataclass(frozen=True)
class MarketSnapshot:
    """Point-in-time quote and valuation figures for one ticker."""

    symbol: str
    name: Optional[str] = None
    current_price: Optional[float] = None
    trailing_pe: Optional[float] = None
    forward_pe: Optional[float] = None
    price_to_sales_trailing: Optional[float] = None


@dataclass(frozen=True)
class StockMetrics:
    ticker: str
    name: str
    current_price: Optional[float] = None
    ytd_return: Optional[float] = None
    return_2025: Optional[float] = None
    return_2024: Optional[float] = None
    return_2023: Optional[float] = None
    return_5_year: Optional[float] = None
    return_10_year: Optional[float] = None
    pe_ltm: Optional[float] = None
    pe_ntm: Optional[float] = None
    ps_ltm: Optional[float] = None
    ps_ntm: Optional[float] = None
    error: Optional[str] = None
