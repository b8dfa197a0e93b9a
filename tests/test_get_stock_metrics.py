from datetime import date

import pytest

from src.application.use_cases.get_stock_metrics import GetStockMetricsUseCase
from src.domain.entities.stock_metrics import MarketSnapshot


def _use_case(provider, today=date(2025, 6, 15)):
    return GetStockMetricsUseCase(provider, clock=lambda: today)


def test_execute_assembles_metrics(stock_provider, series):
    stock_provider.snapshots["AAPL"] = MarketSnapshot(
        symbol="AAPL", name="Apple Inc.", current_price=180.0, trailing_pe=30.0
    )
    stock_provider.histories["AAPL"] = series

    metrics = _use_case(stock_provider).execute(" aapl ")

    assert metrics.ticker == "AAPL"
    assert metrics.name == "Apple Inc."
    assert metrics.ytd_return == pytest.approx(20.0)
    assert metrics.return_2024 == pytest.approx(25.0)
    assert metrics.pe_ltm == 30.0
    assert metrics.error is None


def test_execute_requests_eleven_years_of_history(stock_provider):
    stock_provider.snapshots["AAPL"] = MarketSnapshot(symbol="AAPL", current_price=1.0)

    _use_case(stock_provider).execute("AAPL")

    symbol, start, end = stock_provider.history_requests[0]
    assert symbol == "AAPL"
    assert start == date(2014, 6, 1)
    assert end == date(2025, 6, 15)


def test_provider_failure_becomes_error_record(stock_provider):
    stock_provider.failures["MSFT"] = ConnectionError("upstream timed out")

    metrics = _use_case(stock_provider).execute("msft")

    assert metrics.ticker == "MSFT"
    assert metrics.error == "upstream timed out"
    assert metrics.current_price is None
    assert metrics.return_10_year is None


@pytest.mark.parametrize("symbol", ["", "   "])
def test_blank_symbol_rejected(stock_provider, symbol):
    with pytest.raises(ValueError):
        _use_case(stock_provider).execute(symbol)


def test_execute_many_preserves_order(stock_provider):
    for symbol in ("B", "A"):
        stock_provider.snapshots[symbol] = MarketSnapshot(symbol=symbol, current_price=1.0)

    results = _use_case(stock_provider).execute_many(["b", "a", "zzz"])

    assert [m.ticker for m in results] == ["B", "A", "ZZZ"]
    assert results[2].error is not None


def test_execute_many_empty():
    assert GetStockMetricsUseCase(None).execute_many([]) == []
