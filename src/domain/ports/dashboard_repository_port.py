"""
Port (interface) for dashboard persistence.
Every operation is scoped to the owning user's id.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.dashboard import Dashboard


class IDashboardRepository(ABC):
    @abstractmethod
    def list_for_owner(self, owner_id: str) -> list[Dashboard]:
        """Return all dashboards owned by *owner_id*, in no particular order."""
        ...

    @abstractmethod
    def get(self, owner_id: str, dashboard_id: str) -> Optional[Dashboard]: ...

    @abstractmethod
    def save(self, dashboard: Dashboard) -> None:
        """Insert or replace *dashboard*."""
        ...

    @abstractmethod
    def delete(self, owner_id: str, dashboard_id: str) -> bool:
        """Remove the dashboard; return False if it did not exist."""
        ...
