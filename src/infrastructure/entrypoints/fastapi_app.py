"""
FastAPI entry point for the stock dashboard API.

create_app() is the Composition Root: it wires the infrastructure adapters
(yfinance, DynamoDB, python-jose, bcrypt) into the application use cases.
Any adapter can be passed in explicitly, which is how the tests swap in
in-memory fakes.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:create_app --factory --reload --port 8000
"""

import logging
from datetime import timedelta
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from src.application.use_cases.authenticate import LogInUseCase, SignUpUseCase
from src.application.use_cases.get_stock_metrics import GetStockMetricsUseCase
from src.application.use_cases.manage_dashboards import (
    AddTickersUseCase,
    CreateDashboardUseCase,
    DeleteDashboardUseCase,
    GetDashboardUseCase,
    ListDashboardsUseCase,
    RemoveTickerUseCase,
    UpdateDashboardUseCase,
)
from src.domain.exceptions import (
    DashboardNotFoundError,
    DuplicateTickerError,
    InvalidCredentialsError,
    UserExistsError,
)
from src.domain.ports.dashboard_repository_port import IDashboardRepository
from src.domain.ports.password_hasher_port import IPasswordHasher
from src.domain.ports.stock_data_port import IStockDataProvider
from src.domain.ports.token_service_port import ITokenService
from src.domain.ports.user_repository_port import IUserRepository
from src.infrastructure.config import Settings, configure_logging
from src.infrastructure.entrypoints.schemas import (
    AddTickersRequest,
    CreateDashboardRequest,
    CredentialsRequest,
    DashboardResponse,
    StockMetricsResponse,
    TokenResponse,
    UpdateDashboardRequest,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    stock_provider: Optional[IStockDataProvider] = None,
    dashboards: Optional[IDashboardRepository] = None,
    users: Optional[IUserRepository] = None,
    token_service: Optional[ITokenService] = None,
    hasher: Optional[IPasswordHasher] = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    # ---------------------------------------------------------------------------
    # Composition Root — default adapters for anything not injected
    # ---------------------------------------------------------------------------
    if stock_provider is None:
        from src.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider

        stock_provider = YFinanceStockDataProvider()
    if dashboards is None or users is None:
        from src.infrastructure.persistence.dynamodb import dynamodb_table
        from src.infrastructure.persistence.dynamodb_dashboards import DynamoDBDashboardRepository
        from src.infrastructure.persistence.dynamodb_users import DynamoDBUserRepository

        if dashboards is None:
            dashboards = DynamoDBDashboardRepository(
                dynamodb_table(
                    settings.DASHBOARDS_TABLE,
                    settings.AWS_DEFAULT_REGION,
                    settings.DYNAMODB_ENDPOINT_URL,
                )
            )
        if users is None:
            users = DynamoDBUserRepository(
                dynamodb_table(
                    settings.USERS_TABLE,
                    settings.AWS_DEFAULT_REGION,
                    settings.DYNAMODB_ENDPOINT_URL,
                )
            )
    if token_service is None:
        from src.infrastructure.auth.jwt_token_service import JWTTokenService

        token_service = JWTTokenService(
            settings.AUTH_SECRET_KEY,
            ttl=timedelta(minutes=settings.AUTH_TOKEN_TTL_MINUTES),
        )
    if hasher is None:
        from src.infrastructure.auth.bcrypt_hasher import BcryptPasswordHasher

        hasher = BcryptPasswordHasher()

    metrics_uc = GetStockMetricsUseCase(stock_provider, history_years=settings.HISTORY_YEARS)
    sign_up_uc = SignUpUseCase(users, hasher)
    log_in_uc = LogInUseCase(users, hasher, token_service)
    list_uc = ListDashboardsUseCase(dashboards)
    get_uc = GetDashboardUseCase(dashboards)
    create_uc = CreateDashboardUseCase(dashboards)
    update_uc = UpdateDashboardUseCase(dashboards)
    add_tickers_uc = AddTickersUseCase(dashboards)
    remove_ticker_uc = RemoveTickerUseCase(dashboards)
    delete_uc = DeleteDashboardUseCase(dashboards)

    # ---------------------------------------------------------------------------
    # FastAPI app
    # ---------------------------------------------------------------------------
    app = FastAPI(title="Stock Dashboard API")

    def _error(status_code: int):
        async def handler(request: Request, exc: Exception) -> JSONResponse:
            return JSONResponse(status_code=status_code, content={"error": str(exc)})

        return handler

    app.add_exception_handler(DashboardNotFoundError, _error(404))
    app.add_exception_handler(DuplicateTickerError, _error(409))
    app.add_exception_handler(InvalidCredentialsError, _error(401))
    app.add_exception_handler(UserExistsError, _error(400))
    app.add_exception_handler(ValueError, _error(400))

    async def get_current_user(request: Request) -> str:
        """FastAPI dependency: validate the bearer token and return the user id."""
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            raise HTTPException(status_code=401, detail="Missing or invalid Authorization header.")
        token = auth_header.split(" ", 1)[1]
        try:
            claims = token_service.validate(token)
        except ValueError as exc:
            logger.info("Rejected bearer token: %s", exc)
            raise HTTPException(status_code=401, detail=str(exc)) from exc
        return claims["sub"]

    # -- auth -------------------------------------------------------------------

    @app.post("/auth/signup", status_code=201)
    def sign_up(body: CredentialsRequest):
        sign_up_uc.execute(body.email, body.password)
        return {"message": "Account created successfully"}

    @app.post("/auth/login", response_model=TokenResponse)
    def log_in(body: CredentialsRequest):
        return TokenResponse(access_token=log_in_uc.execute(body.email, body.password))

    # -- market data ------------------------------------------------------------

    @app.get("/stock/{ticker}")
    async def get_stock(ticker: str):
        try:
            metrics = await run_in_threadpool(metrics_uc.execute, ticker)
        except ValueError:
            return JSONResponse(status_code=400, content={"error": "Invalid ticker symbol"})
        return StockMetricsResponse.from_entity(metrics).to_json()

    # -- dashboards ---------------------------------------------------------------

    @app.get("/dashboards")
    def list_dashboards(user_id: str = Depends(get_current_user)):
        return [
            DashboardResponse.from_entity(d).model_dump(by_alias=True)
            for d in list_uc.execute(user_id)
        ]

    @app.post("/dashboards", status_code=201)
    def create_dashboard(
        body: CreateDashboardRequest,
        user_id: str = Depends(get_current_user),
    ):
        dashboard = create_uc.execute(user_id, body.name, body.tickers)
        return DashboardResponse.from_entity(dashboard).model_dump(by_alias=True)

    @app.get("/dashboards/{dashboard_id}")
    def get_dashboard(dashboard_id: str, user_id: str = Depends(get_current_user)):
        dashboard = get_uc.execute(user_id, dashboard_id)
        return DashboardResponse.from_entity(dashboard).model_dump(by_alias=True)

    @app.put("/dashboards/{dashboard_id}")
    def update_dashboard(
        dashboard_id: str,
        body: UpdateDashboardRequest,
        user_id: str = Depends(get_current_user),
    ):
        dashboard = update_uc.execute(user_id, dashboard_id, body.name, body.tickers)
        return DashboardResponse.from_entity(dashboard).model_dump(by_alias=True)

    @app.delete("/dashboards/{dashboard_id}")
    def delete_dashboard(dashboard_id: str, user_id: str = Depends(get_current_user)):
        delete_uc.execute(user_id, dashboard_id)
        return {"success": True}

    @app.post("/dashboards/{dashboard_id}/tickers")
    def add_tickers(
        dashboard_id: str,
        body: AddTickersRequest,
        user_id: str = Depends(get_current_user),
    ):
        dashboard = add_tickers_uc.execute(user_id, dashboard_id, body.tickers)
        return DashboardResponse.from_entity(dashboard).model_dump(by_alias=True)

    @app.delete("/dashboards/{dashboard_id}/tickers/{symbol}")
    def remove_ticker(
        dashboard_id: str,
        symbol: str,
        user_id: str = Depends(get_current_user),
    ):
        dashboard = remove_ticker_uc.execute(user_id, dashboard_id, symbol)
        return DashboardResponse.from_entity(dashboard).model_dump(by_alias=True)

    @app.get("/dashboards/{dashboard_id}/metrics")
    async def get_dashboard_metrics(
        dashboard_id: str,
        user_id: str = Depends(get_current_user),
    ):
        """Fetch metrics for every ticker on the dashboard concurrently."""
        dashboard = await run_in_threadpool(get_uc.execute, user_id, dashboard_id)
        results = await run_in_threadpool(metrics_uc.execute_many, dashboard.tickers)
        return [StockMetricsResponse.from_entity(m).to_json() for m in results]

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
