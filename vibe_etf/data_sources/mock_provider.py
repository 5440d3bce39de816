from vibe_etf.api_client import FetchError
from vibe_etf.mock_data import MOCK_STOCKS, MOCK_TRANSACTIONS, PORTFOLIO_STATS
from vibe_etf.schemas import (
    FixtureStock,
    FixtureTransaction,
    Holding,
    Portfolio,
    PortfolioStats,
    StockInfo,
    TotalPerformance,
    Transaction,
)


def fixture_to_holding(stock: FixtureStock) -> Holding:
    return Holding(
        symbol=stock.symbol,
        current_price=stock.current_price,
        percentage=stock.portfolio_percentage,
        performance=(stock.current_price - stock.avg_price) / stock.avg_price * 100,
        monthly_performance={},
    )


def fixture_to_stock_info(stock: FixtureStock) -> StockInfo:
    return StockInfo(ticker=stock.symbol, name=stock.name, description=stock.description)


def fixture_to_transaction(transaction: FixtureTransaction) -> Transaction:
    # Shares, price and total have no place in the canonical shape.
    return Transaction(
        date=transaction.date,
        ticker=transaction.symbol,
        action=transaction.type.lower(),
    )


def stats_to_total_performance(stats: PortfolioStats) -> TotalPerformance:
    return TotalPerformance(
        performance=stats.yearly_change_percent,
        monthly_performance={
            "1d": stats.daily_change_percent,
            "1m": stats.monthly_change_percent,
            "1y": stats.yearly_change_percent,
        },
    )


class MockPortfolioDataProvider:
    """Serves the static preview dataset through the canonical record shapes."""

    async def get_portfolio(self) -> Portfolio:
        return {stock.symbol: fixture_to_holding(stock) for stock in MOCK_STOCKS}

    async def get_total_performance(self) -> TotalPerformance:
        return stats_to_total_performance(PORTFOLIO_STATS)

    async def get_transactions(self) -> list[Transaction]:
        return [fixture_to_transaction(item) for item in MOCK_TRANSACTIONS]

    async def get_stock_info(self, ticker: str) -> StockInfo:
        for stock in MOCK_STOCKS:
            if stock.symbol == ticker:
                return fixture_to_stock_info(stock)
        raise FetchError("stock info", 404)

    async def get_all_stock_info(self) -> list[StockInfo]:
        return [fixture_to_stock_info(stock) for stock in MOCK_STOCKS]
