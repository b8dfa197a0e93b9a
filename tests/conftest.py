"""
Shared fixtures: in-memory port fakes so no test touches Yahoo or AWS.
"""

from datetime import date
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from src.domain.entities.dashboard import Dashboard
from src.domain.entities.stock_metrics import MarketSnapshot, PriceSample
from src.domain.entities.user import User
from src.domain.exceptions import UserExistsError
from src.domain.ports.dashboard_repository_port import IDashboardRepository
from src.domain.ports.password_hasher_port import IPasswordHasher
from src.domain.ports.stock_data_port import IStockDataProvider
from src.domain.ports.user_repository_port import IUserRepository
from src.infrastructure.auth.jwt_token_service import JWTTokenService
from src.infrastructure.config import Settings
from src.infrastructure.entrypoints.fastapi_app import create_app


class FakeStockDataProvider(IStockDataProvider):
    def __init__(self) -> None:
        self.snapshots: dict[str, MarketSnapshot] = {}
        self.histories: dict[str, list[PriceSample]] = {}
        self.failures: dict[str, Exception] = {}
        self.history_requests: list[tuple[str, date, date]] = []

    def get_snapshot(self, symbol: str) -> MarketSnapshot:
        if symbol in self.failures:
            raise self.failures[symbol]
        if symbol not in self.snapshots:
            raise ValueError(f"No market data available for symbol: {symbol!r}")
        return self.snapshots[symbol]

    def get_price_history(self, symbol: str, start: date, end: date) -> list[PriceSample]:
        self.history_requests.append((symbol, start, end))
        return list(self.histories.get(symbol, []))


class InMemoryDashboardRepository(IDashboardRepository):
    def __init__(self) -> None:
        self.items: dict[tuple[str, str], Dashboard] = {}

    def list_for_owner(self, owner_id: str) -> list[Dashboard]:
        return [d for (owner, _), d in self.items.items() if owner == owner_id]

    def get(self, owner_id: str, dashboard_id: str) -> Optional[Dashboard]:
        return self.items.get((owner_id, dashboard_id))

    def save(self, dashboard: Dashboard) -> None:
        self.items[(dashboard.owner_id, dashboard.id)] = dashboard

    def delete(self, owner_id: str, dashboard_id: str) -> bool:
        return self.items.pop((owner_id, dashboard_id), None) is not None


class InMemoryUserRepository(IUserRepository):
    def __init__(self) -> None:
        self.items: dict[str, User] = {}

    def get_by_email(self, email: str) -> Optional[User]:
        return self.items.get(email.lower())

    def add(self, user: User) -> None:
        if user.email in self.items:
            raise UserExistsError("Email already registered")
        self.items[user.email] = user


class PlainHasher(IPasswordHasher):
    """Reversible stand-in so tests don't pay bcrypt's cost."""

    def hash(self, password: str) -> str:
        return f"plain${password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"plain${password}"


def sample(day: str, close: float) -> PriceSample:
    return PriceSample(date=date.fromisoformat(day), close=close)


@pytest.fixture
def series() -> list[PriceSample]:
    return [
        sample("2022-12-31", 100.0),
        sample("2023-12-31", 120.0),
        sample("2024-12-31", 150.0),
    ]


@pytest.fixture
def stock_provider() -> FakeStockDataProvider:
    return FakeStockDataProvider()


@pytest.fixture
def dashboard_repo() -> InMemoryDashboardRepository:
    return InMemoryDashboardRepository()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def hasher() -> PlainHasher:
    return PlainHasher()


@pytest.fixture
def token_service() -> JWTTokenService:
    return JWTTokenService("test-secret")


@pytest.fixture
def client(stock_provider, dashboard_repo, user_repo, token_service, hasher) -> TestClient:
    app = create_app(
        Settings(AUTH_SECRET_KEY="test-secret"),
        stock_provider=stock_provider,
        dashboards=dashboard_repo,
        users=user_repo,
        token_service=token_service,
        hasher=hasher,
    )
    return TestClient(app)


@pytest.fixture
def auth_headers(token_service) -> dict:
    return {"Authorization": f"Bearer {token_service.issue('user-1')}"}
