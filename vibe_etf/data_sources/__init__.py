from vibe_etf.data_sources.api_provider import VibeAPIDataProvider
from vibe_etf.data_sources.base import PortfolioDataProvider
from vibe_etf.data_sources.mock_provider import MockPortfolioDataProvider
from vibe_etf.schemas import DATA_SOURCE_MOCK, DataSource


def build_provider(data_source: DataSource, api_provider: VibeAPIDataProvider) -> PortfolioDataProvider:
    if data_source == DATA_SOURCE_MOCK:
        return MockPortfolioDataProvider()
    return api_provider
