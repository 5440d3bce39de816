from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from vibe_etf.api_client import FetchError, VibeETFClient
from vibe_etf.config import settings
from vibe_etf.data_sources import build_provider
from vibe_etf.data_sources.api_provider import VibeAPIDataProvider
from vibe_etf.data_sources.base import PortfolioDataProvider
from vibe_etf.mock_data import MOCK_STOCKS, MOCK_TRANSACTIONS, PORTFOLIO_STATS
from vibe_etf.schemas import (
    FixturesResponse,
    HealthResponse,
    Portfolio,
    StockInfo,
    TotalPerformance,
    Transaction,
)
from vibe_etf.telemetry import configure_logging, get_logger

configure_logging(
    level=settings.log_level,
    log_format=settings.log_format,
    include_stack=settings.log_include_stack,
)
logger = get_logger(__name__)

app = FastAPI(title="Vibe ETF Data", version="0.1.0")


def get_provider() -> PortfolioDataProvider:
    # Data source is server-owned configuration, not client-controlled input.
    api_provider = VibeAPIDataProvider(VibeETFClient(base_url=settings.api_base_url))
    return build_provider(settings.default_data_source, api_provider)


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    logger.warning(
        "upstream_fetch_failed",
        extra={"path": request.url.path, "resource": exc.resource, "status_code": exc.status_code},
    )
    status_code = 404 if exc.status_code == 404 else 502
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "resource": exc.resource})


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    logger.debug("health_check", extra={"data_source": settings.default_data_source})
    return HealthResponse(
        status="ok",
        data_source=settings.default_data_source,
        api_base_url=settings.api_base_url,
    )


@app.get("/portfolio", response_model=Portfolio)
async def portfolio() -> Portfolio:
    return await get_provider().get_portfolio()


@app.get("/total", response_model=TotalPerformance)
async def total_performance() -> TotalPerformance:
    return await get_provider().get_total_performance()


@app.get("/transactions", response_model=list[Transaction])
async def transactions() -> list[Transaction]:
    return await get_provider().get_transactions()


@app.get("/stock", response_model=list[StockInfo])
async def all_stock_info() -> list[StockInfo]:
    return await get_provider().get_all_stock_info()


@app.get("/stock/{ticker}", response_model=StockInfo)
async def stock_info(ticker: str) -> StockInfo:
    return await get_provider().get_stock_info(ticker)


@app.get("/fixtures", response_model=FixturesResponse)
async def fixtures() -> FixturesResponse:
    return FixturesResponse(
        stocks=list(MOCK_STOCKS),
        transactions=list(MOCK_TRANSACTIONS),
        stats=PORTFOLIO_STATS,
    )
