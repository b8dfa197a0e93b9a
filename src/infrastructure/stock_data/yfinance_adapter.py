"""
Infrastructure adapter: yfinance → IStockDataProvider.
All yfinance-specific details (ticker.info, fast_info, history()) are confined here;
the rest of the codebase depends only on IStockDataProvider.
"""

import math
from datetime import date, timedelta
from typing import Any, Optional

import yfinance as yf

from src.domain.entities.stock_metrics import MarketSnapshot, PriceSample
from src.domain.ports.stock_data_port import IStockDataProvider


def _number(value: Any) -> Optional[float]:
    """Coerce a yfinance field to float, mapping missing/NaN/garbage to None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class YFinanceStockDataProvider(IStockDataProvider):
    """Fetches quotes, ratios and daily closes from Yahoo Finance via yfinance."""

    def get_snapshot(self, symbol: str) -> MarketSnapshot:
        ticker = yf.Ticker(symbol)
        info = ticker.info or {}

        current_price = _number(info.get("regularMarketPrice")) or _number(
            info.get("currentPrice")
        )
        if current_price is None:
            current_price = _number(getattr(ticker.fast_info, "last_price", None))

        name = info.get("shortName") or info.get("longName")
        if current_price is None and not name:
            raise ValueError(f"No market data available for symbol: {symbol!r}")

        return MarketSnapshot(
            symbol=symbol,
            name=name or symbol,
            current_price=current_price,
            trailing_pe=_number(info.get("trailingPE")),
            forward_pe=_number(info.get("forwardPE")),
            price_to_sales_trailing=_number(info.get("priceToSalesTrailing12Months")),
        )

    def get_price_history(self, symbol: str, start: date, end: date) -> list[PriceSample]:
        ticker = yf.Ticker(symbol)
        # yfinance treats `end` as exclusive.
        history = ticker.history(
            start=start.isoformat(),
            end=(end + timedelta(days=1)).isoformat(),
            interval="1d",
            auto_adjust=False,
        )
        if history.empty:
            return []

        samples = []
        for timestamp, row in history.iterrows():
            close = _number(row.get("Close"))
            if close is None:
                continue
            samples.append(PriceSample(date=timestamp.date(), close=round(close, 4)))
        return samples
