"""
Port (interface) for market-data providers.
Infrastructure adapters (e.g. YFinanceStockDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from datetime import date

from src.domain.entities.stock_metrics import MarketSnapshot, PriceSample


class IStockDataProvider(ABC):
    @abstractmethod
    def get_snapshot(self, symbol: str) -> MarketSnapshot:
        """Return the current quote, display name and valuation ratios.

        Raises:
            ValueError: if the provider has no data for *symbol*.
        """
        ...

    @abstractmethod
    def get_price_history(self, symbol: str, start: date, end: date) -> list[PriceSample]:
        """Return daily closes between *start* and *end* (inclusive)."""
        ...
