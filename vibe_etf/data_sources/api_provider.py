from typing import Any

from pydantic import TypeAdapter

from vibe_etf.api_client import VibeETFClient
from vibe_etf.schemas import (
    Holding,
    Portfolio,
    RawHolding,
    StockInfo,
    TotalPerformance,
    Transaction,
)
from vibe_etf.telemetry import get_logger


logger = get_logger(__name__)

_RAW_PORTFOLIO = TypeAdapter(dict[str, RawHolding])
_TRANSACTIONS = TypeAdapter(list[Transaction])
_STOCK_INFO_LIST = TypeAdapter(list[StockInfo])


def normalize_portfolio(raw: Any) -> Portfolio:
    """Turn the wire mapping ``{ticker: partial holding}`` into a Portfolio.

    Every entry becomes its own Holding with ``symbol`` set to the key it was
    returned under. Key order from the response is preserved.
    """
    entries = _RAW_PORTFOLIO.validate_python(raw)
    return {
        symbol: Holding(symbol=symbol, **entry.model_dump())
        for symbol, entry in entries.items()
    }


class VibeAPIDataProvider:
    def __init__(self, client: VibeETFClient) -> None:
        self.client = client

    async def get_portfolio(self) -> Portfolio:
        response = await self.client.get_portfolio()
        portfolio = normalize_portfolio(response)
        logger.debug("portfolio_normalized", extra={"holdings_count": len(portfolio)})
        return portfolio

    async def get_total_performance(self) -> TotalPerformance:
        response = await self.client.get_total_performance()
        return TotalPerformance.model_validate(response)

    async def get_transactions(self) -> list[Transaction]:
        response = await self.client.get_transactions()
        return _TRANSACTIONS.validate_python(response)

    async def get_stock_info(self, ticker: str) -> StockInfo:
        response = await self.client.get_stock_info(ticker)
        return StockInfo.model_validate(response)

    async def get_all_stock_info(self) -> list[StockInfo]:
        response = await self.client.get_all_stock_info()
        return _STOCK_INFO_LIST.validate_python(response)
