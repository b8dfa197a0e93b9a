import itertools

import pytest

from src.application.use_cases.manage_dashboards import (
    AddTickersUseCase,
    CreateDashboardUseCase,
    DeleteDashboardUseCase,
    GetDashboardUseCase,
    ListDashboardsUseCase,
    RemoveTickerUseCase,
    UpdateDashboardUseCase,
    parse_ticker_input,
)
from src.domain.exceptions import DashboardNotFoundError, DuplicateTickerError


@pytest.fixture
def clock():
    ticks = itertools.count(1000, 1000)
    return lambda: next(ticks)


@pytest.fixture
def created(dashboard_repo, clock):
    return CreateDashboardUseCase(dashboard_repo, clock).execute(
        "user-1", "  Tech  ", ["aapl", "msft", "AAPL"]
    )


def test_create_normalizes_name_and_tickers(created, dashboard_repo):
    assert created.name == "Tech"
    assert created.tickers == ["AAPL", "MSFT"]
    assert created.created_at == created.updated_at
    assert dashboard_repo.get("user-1", created.id) == created


def test_create_requires_name(dashboard_repo):
    with pytest.raises(ValueError):
        CreateDashboardUseCase(dashboard_repo).execute("user-1", "   ")


def test_list_is_scoped_and_sorted_by_update(dashboard_repo, clock, created):
    create = CreateDashboardUseCase(dashboard_repo, clock)
    newer = create.execute("user-1", "Energy")
    create.execute("user-2", "Someone else")

    listed = ListDashboardsUseCase(dashboard_repo).execute("user-1")

    assert [d.id for d in listed] == [newer.id, created.id]


def test_get_other_users_dashboard_is_not_found(dashboard_repo, created):
    with pytest.raises(DashboardNotFoundError):
        GetDashboardUseCase(dashboard_repo).execute("user-2", created.id)


def test_update_renames_and_bumps_timestamp(dashboard_repo, clock, created):
    updated = UpdateDashboardUseCase(dashboard_repo, clock).execute(
        "user-1", created.id, name="Big Tech"
    )

    assert updated.name == "Big Tech"
    assert updated.tickers == created.tickers
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_update_replaces_tickers(dashboard_repo, clock, created):
    updated = UpdateDashboardUseCase(dashboard_repo, clock).execute(
        "user-1", created.id, tickers=["nvda"]
    )
    assert updated.tickers == ["NVDA"]
    assert updated.name == "Tech"


def test_update_missing_dashboard(dashboard_repo):
    with pytest.raises(DashboardNotFoundError):
        UpdateDashboardUseCase(dashboard_repo).execute("user-1", "nope", name="x")


def test_add_tickers_appends_only_new_symbols(dashboard_repo, clock, created):
    updated = AddTickersUseCase(dashboard_repo, clock).execute(
        "user-1", created.id, "msft, googl  amzn"
    )
    assert updated.tickers == ["AAPL", "MSFT", "GOOGL", "AMZN"]
    assert updated.updated_at > created.updated_at


def test_add_tickers_all_duplicates(dashboard_repo, created):
    with pytest.raises(DuplicateTickerError):
        AddTickersUseCase(dashboard_repo).execute("user-1", created.id, "aapl")


def test_add_tickers_empty_input(dashboard_repo, created):
    with pytest.raises(ValueError):
        AddTickersUseCase(dashboard_repo).execute("user-1", created.id, " , ")


def test_remove_ticker(dashboard_repo, clock, created):
    updated = RemoveTickerUseCase(dashboard_repo, clock).execute("user-1", created.id, "aapl")
    assert updated.tickers == ["MSFT"]


def test_remove_absent_ticker_is_noop(dashboard_repo, clock, created):
    unchanged = RemoveTickerUseCase(dashboard_repo, clock).execute("user-1", created.id, "TSLA")
    assert unchanged == created


def test_delete(dashboard_repo, created):
    use_case = DeleteDashboardUseCase(dashboard_repo)
    use_case.execute("user-1", created.id)

    assert dashboard_repo.get("user-1", created.id) is None
    with pytest.raises(DashboardNotFoundError):
        use_case.execute("user-1", created.id)


def test_parse_ticker_input():
    assert parse_ticker_input("aapl,msft  googl,,aapl") == ["AAPL", "MSFT", "GOOGL"]
    assert parse_ticker_input("") == []
