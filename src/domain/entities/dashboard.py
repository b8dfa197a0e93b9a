"""
Domain entity for a persisted, user-owned list of tickers.
Zero external dependencies — pure Python dataclass only.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Dashboard:
    id: str
    owner_id: str
    name: str
    tickers: list[str] = field(default_factory=list)
    created_at: int = 0
    updated_at: int = 0
