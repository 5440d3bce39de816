from typing import Protocol

from vibe_etf.schemas import Portfolio, StockInfo, TotalPerformance, Transaction


class PortfolioDataProvider(Protocol):
    async def get_portfolio(self) -> Portfolio: ...

    async def get_total_performance(self) -> TotalPerformance: ...

    async def get_transactions(self) -> list[Transaction]: ...

    async def get_stock_info(self, ticker: str) -> StockInfo: ...

    async def get_all_stock_info(self) -> list[StockInfo]: ...
