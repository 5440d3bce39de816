from typing import Any

from vibe_etf.schemas import FixtureStock, FixtureTransaction, PortfolioStats

TOTAL_PORTFOLIO_VALUE = 47537.50


def _fixture_stock(**fields: Any) -> FixtureStock:
    percentage = (fields["total_value"] / TOTAL_PORTFOLIO_VALUE) * 100
    return FixtureStock(portfolio_percentage=percentage, **fields)


MOCK_STOCKS: tuple[FixtureStock, ...] = (
    _fixture_stock(
        symbol="VTI",
        name="Vanguard Total Stock Market ETF",
        shares=100,
        avg_price=250.50,
        current_price=260.75,
        total_value=26075,
        daily_change=2.50,
        daily_change_percent=0.97,
        description=(
            "Core holding for broad market exposure. "
            "Provides diversification across the entire US stock market."
        ),
    ),
    _fixture_stock(
        symbol="QQQ",
        name="Invesco QQQ Trust",
        shares=50,
        avg_price=350.25,
        current_price=365.80,
        total_value=18290,
        daily_change=3.20,
        daily_change_percent=0.88,
        description=(
            "Tech-focused ETF tracking the NASDAQ-100. "
            "Betting on continued tech innovation and growth."
        ),
    ),
    _fixture_stock(
        symbol="ARKK",
        name="ARK Innovation ETF",
        shares=75,
        avg_price=45.60,
        current_price=42.30,
        total_value=3172.50,
        daily_change=-0.75,
        daily_change_percent=-1.74,
        description=(
            "High-risk, high-reward play on disruptive innovation. "
            "Smaller position due to higher volatility."
        ),
    ),
)

MOCK_TRANSACTIONS: tuple[FixtureTransaction, ...] = (
    FixtureTransaction(date="2024-04-25", type="BUY", symbol="VTI", shares=20, price=258.50, total=5170),
    FixtureTransaction(date="2024-04-24", type="SELL", symbol="QQQ", shares=10, price=362.75, total=3627.50),
    FixtureTransaction(date="2024-04-23", type="BUY", symbol="ARKK", shares=25, price=43.20, total=1080),
)

PORTFOLIO_STATS = PortfolioStats(
    total_value=TOTAL_PORTFOLIO_VALUE,
    daily_change_percent=0.13,
    monthly_change_percent=2.7,
    yearly_change_percent=22.5,
)
