"""
Pydantic request/response models for the HTTP API.

Responses use the camelCase field names the dashboard front end expects;
domain dataclasses are converted here so the domain layer stays snake_case.
"""

import dataclasses
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.dashboard import Dashboard
from src.domain.entities.stock_metrics import StockMetrics


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class StockMetricsResponse(_CamelModel):
    ticker: str
    name: str
    current_price: Optional[float] = Field(default=None, alias="currentPrice")
    ytd_return: Optional[float] = Field(default=None, alias="ytdReturn")
    return_2025: Optional[float] = Field(default=None, alias="return2025")
    return_2024: Optional[float] = Field(default=None, alias="return2024")
    return_2023: Optional[float] = Field(default=None, alias="return2023")
    return_5_year: Optional[float] = Field(default=None, alias="return5Year")
    return_10_year: Optional[float] = Field(default=None, alias="return10Year")
    pe_ltm: Optional[float] = Field(default=None, alias="peLTM")
    pe_ntm: Optional[float] = Field(default=None, alias="peNTM")
    ps_ltm: Optional[float] = Field(default=None, alias="psLTM")
    ps_ntm: Optional[float] = Field(default=None, alias="psNTM")
    error: Optional[str] = None

    @classmethod
    def from_entity(cls, metrics: StockMetrics) -> "StockMetricsResponse":
        return cls(**dataclasses.asdict(metrics))

    def to_json(self) -> dict:
        data = self.model_dump(by_alias=True)
        if data["error"] is None:
            del data["error"]
        return data


class DashboardResponse(_CamelModel):
    id: str
    name: str
    tickers: list[str]
    created_at: int = Field(alias="createdAt")
    updated_at: int = Field(alias="updatedAt")

    @classmethod
    def from_entity(cls, dashboard: Dashboard) -> "DashboardResponse":
        return cls(**dataclasses.asdict(dashboard))


class CreateDashboardRequest(BaseModel):
    name: str = ""
    tickers: list[str] = Field(default_factory=list)


class UpdateDashboardRequest(BaseModel):
    name: Optional[str] = None
    tickers: Optional[list[str]] = None


class AddTickersRequest(BaseModel):
    tickers: str


class CredentialsRequest(BaseModel):
    email: str = ""
    password: str = ""


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
