"""
Use-case: fetch market data for a ticker and derive its StockMetrics.
Depends only on Domain ports and services — no infrastructure imports.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Callable, Iterable

from src.domain.entities.stock_metrics import StockMetrics
from src.domain.ports.stock_data_port import IStockDataProvider
from src.domain.services.metrics_assembler import assemble_metrics, failed_metrics
from src.domain.services.price_series import normalize_series

logger = logging.getLogger(__name__)


class GetStockMetricsUseCase:
    # Eleven years back guarantees ten full calendar years of closes.
    HISTORY_YEARS: int = 11

    def __init__(
        self,
        provider: IStockDataProvider,
        clock: Callable[[], date] = date.today,
        history_years: int | None = None,
    ) -> None:
        self._provider = provider
        self._clock = clock
        self._history_years = history_years or self.HISTORY_YEARS

    def execute(self, symbol: str) -> StockMetrics:
        """Return metrics for *symbol* (uppercased).

        Provider failures are not raised; they come back as an all-absent
        StockMetrics with ``error`` set.

        Raises:
            ValueError: if *symbol* is blank.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        symbol = symbol.upper().strip()

        today = self._clock()
        start = today.replace(year=today.year - self._history_years, day=1)
        try:
            snapshot = self._provider.get_snapshot(symbol)
            history = normalize_series(
                self._provider.get_price_history(symbol, start, today)
            )
        except Exception as exc:
            logger.warning("Market data fetch failed for %s: %s", symbol, exc)
            return failed_metrics(symbol, str(exc) or "Failed to fetch stock data")

        return assemble_metrics(
            symbol,
            history,
            snapshot.current_price,
            today.year,
            snapshot=snapshot,
        )

    MAX_WORKERS: int = 8

    def execute_many(self, symbols: Iterable[str]) -> list[StockMetrics]:
        """Fetch metrics for every symbol concurrently, in input order."""
        symbols = list(symbols)
        if not symbols:
            return []
        with ThreadPoolExecutor(max_workers=min(self.MAX_WORKERS, len(symbols))) as pool:
            return list(pool.map(self.execute, symbols))
