"""
Use-cases: create, read, update and delete a user's dashboards.
Depends only on Domain ports and entities — no infrastructure imports.

Every operation is scoped to an owner id; a dashboard belonging to another
user is indistinguishable from a missing one.
"""

import dataclasses
import logging
import re
import time
import uuid
from typing import Callable, Iterable, Optional

from src.domain.entities.dashboard import Dashboard
from src.domain.exceptions import DashboardNotFoundError, DuplicateTickerError
from src.domain.ports.dashboard_repository_port import IDashboardRepository

logger = logging.getLogger(__name__)

_TICKER_SEPARATORS = re.compile(r"[\s,]+")


def _now_ms() -> int:
    return int(time.time() * 1000)


def normalize_tickers(tickers: Iterable[str]) -> list[str]:
    """Uppercase, strip, drop blanks and repeated symbols (first one wins)."""
    seen: list[str] = []
    for raw in tickers:
        symbol = raw.strip().upper()
        if symbol and symbol not in seen:
            seen.append(symbol)
    return seen


def parse_ticker_input(raw: str) -> list[str]:
    """Split free-form input such as ``"aapl, msft googl"`` into symbols."""
    return normalize_tickers(_TICKER_SEPARATORS.split(raw or ""))


class _DashboardUseCase:
    def __init__(
        self,
        repository: IDashboardRepository,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def _load(self, owner_id: str, dashboard_id: str) -> Dashboard:
        dashboard = self._repository.get(owner_id, dashboard_id)
        if dashboard is None:
            raise DashboardNotFoundError(dashboard_id)
        return dashboard

    def _store(self, dashboard: Dashboard, **changes) -> Dashboard:
        updated = dataclasses.replace(dashboard, updated_at=self._clock(), **changes)
        self._repository.save(updated)
        return updated


class ListDashboardsUseCase(_DashboardUseCase):
    def execute(self, owner_id: str) -> list[Dashboard]:
        """Return the owner's dashboards, most recently updated first."""
        dashboards = self._repository.list_for_owner(owner_id)
        return sorted(dashboards, key=lambda d: d.updated_at, reverse=True)


class GetDashboardUseCase(_DashboardUseCase):
    def execute(self, owner_id: str, dashboard_id: str) -> Dashboard:
        return self._load(owner_id, dashboard_id)


class CreateDashboardUseCase(_DashboardUseCase):
    def execute(
        self,
        owner_id: str,
        name: str,
        tickers: Iterable[str] = (),
    ) -> Dashboard:
        """Create and persist a new dashboard.

        Raises:
            ValueError: if *name* is blank.
        """
        if not name or not name.strip():
            raise ValueError("Dashboard name is required")
        now = self._clock()
        dashboard = Dashboard(
            id=uuid.uuid4().hex,
            owner_id=owner_id,
            name=name.strip(),
            tickers=normalize_tickers(tickers),
            created_at=now,
            updated_at=now,
        )
        self._repository.save(dashboard)
        logger.info("Created dashboard %s for %s", dashboard.id, owner_id)
        return dashboard


class UpdateDashboardUseCase(_DashboardUseCase):
    def execute(
        self,
        owner_id: str,
        dashboard_id: str,
        name: Optional[str] = None,
        tickers: Optional[Iterable[str]] = None,
    ) -> Dashboard:
        """Rename and/or replace the ticker list; omitted fields are kept.

        Raises:
            DashboardNotFoundError: if the owner has no such dashboard.
            ValueError: if *name* is given but blank.
        """
        dashboard = self._load(owner_id, dashboard_id)
        changes: dict = {}
        if name is not None:
            if not name.strip():
                raise ValueError("Dashboard name is required")
            changes["name"] = name.strip()
        if tickers is not None:
            changes["tickers"] = normalize_tickers(tickers)
        return self._store(dashboard, **changes)


class AddTickersUseCase(_DashboardUseCase):
    def execute(self, owner_id: str, dashboard_id: str, raw: str) -> Dashboard:
        """Append every symbol in *raw* not already on the dashboard.

        Raises:
            DashboardNotFoundError: if the owner has no such dashboard.
            ValueError: if *raw* holds no symbols.
            DuplicateTickerError: if every symbol is already present.
        """
        symbols = parse_ticker_input(raw)
        if not symbols:
            raise ValueError("At least one ticker symbol is required")
        dashboard = self._load(owner_id, dashboard_id)
        new = [s for s in symbols if s not in dashboard.tickers]
        if not new:
            raise DuplicateTickerError(
                f"{', '.join(symbols)} already in dashboard {dashboard.name!r}"
            )
        return self._store(dashboard, tickers=[*dashboard.tickers, *new])


class RemoveTickerUseCase(_DashboardUseCase):
    def execute(self, owner_id: str, dashboard_id: str, symbol: str) -> Dashboard:
        """Drop *symbol* from the dashboard; a symbol not on it is a no-op.

        Raises:
            DashboardNotFoundError: if the owner has no such dashboard.
        """
        dashboard = self._load(owner_id, dashboard_id)
        symbol = symbol.strip().upper()
        if symbol not in dashboard.tickers:
            return dashboard
        remaining = [t for t in dashboard.tickers if t != symbol]
        return self._store(dashboard, tickers=remaining)


class DeleteDashboardUseCase(_DashboardUseCase):
    def execute(self, owner_id: str, dashboard_id: str) -> None:
        if not self._repository.delete(owner_id, dashboard_id):
            raise DashboardNotFoundError(dashboard_id)
        logger.info("Deleted dashboard %s for %s", dashboard_id, owner_id)
