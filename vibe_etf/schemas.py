from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

DATA_SOURCE_VIBE_API = "vibe_api"
DATA_SOURCE_MOCK = "mock"
DataSource = Literal[DATA_SOURCE_VIBE_API, DATA_SOURCE_MOCK]

# Period label -> detail, exposed read-only and dumped back as a plain dict.
PeriodPerformance = Annotated[
    Mapping[str, Any],
    AfterValidator(lambda value: MappingProxyType(dict(value))),
    PlainSerializer(lambda value: dict(value)),
]


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class Holding(Record):
    symbol: str
    current_price: float
    percentage: float
    performance: float
    monthly_performance: PeriodPerformance = Field(default_factory=dict, validate_default=True)


# Wire shape of a portfolio entry: the symbol lives in the enclosing key.
class RawHolding(Record):
    current_price: float
    percentage: float
    performance: float
    monthly_performance: PeriodPerformance = Field(default_factory=dict, validate_default=True)


Portfolio = dict[str, Holding]


class TotalPerformance(Record):
    performance: float
    monthly_performance: PeriodPerformance = Field(default_factory=dict, validate_default=True)


class Transaction(Record):
    date: str
    ticker: str
    action: Literal["buy", "sell"]


class StockInfo(Record):
    ticker: str
    name: str
    description: str


# Preview-only shapes backing the mock dataset.
class FixtureStock(Record):
    symbol: str
    name: str
    shares: float
    avg_price: float
    current_price: float
    total_value: float
    daily_change: float
    daily_change_percent: float
    description: str
    portfolio_percentage: float


class FixtureTransaction(Record):
    date: str
    type: Literal["BUY", "SELL"]
    symbol: str
    shares: float
    price: float
    total: float


class PortfolioStats(Record):
    total_value: float
    daily_change_percent: float
    monthly_change_percent: float
    yearly_change_percent: float


class HealthResponse(BaseModel):
    status: str
    data_source: DataSource
    api_base_url: str


class FixturesResponse(BaseModel):
    stocks: list[FixtureStock]
    transactions: list[FixtureTransaction]
    stats: PortfolioStats
