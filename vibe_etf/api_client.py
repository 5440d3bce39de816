from typing import Any

import httpx

from vibe_etf.telemetry import get_logger


logger = get_logger(__name__)


FETCH_ERROR_MESSAGES = {
    "portfolio": "Failed to fetch portfolio data",
    "total performance": "Failed to fetch total performance data",
    "transactions": "Failed to fetch transactions data",
    "stock info": "Failed to fetch stock info",
}


class FetchError(Exception):
    """The remote service answered with a non-success status."""

    def __init__(self, resource: str, status_code: int | None = None) -> None:
        super().__init__(FETCH_ERROR_MESSAGES.get(resource, f"Failed to fetch {resource} data"))
        self.resource = resource
        self.status_code = status_code


class VibeETFClient:
    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    async def _get(self, path: str, resource: str) -> Any:
        url = f"{self.base_url}{path}"
        async with httpx.AsyncClient(follow_redirects=True) as client:
            response = await client.get(url, headers=self._headers())
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(resource, response.status_code) from exc
        logger.debug(
            "vibe_http_success",
            extra={"url": url, "status_code": response.status_code, "resource": resource},
        )
        return response.json()

    async def get_portfolio(self) -> Any:
        return await self._get("/portfolio", "portfolio")

    async def get_total_performance(self) -> Any:
        return await self._get("/total", "total performance")

    async def get_transactions(self) -> Any:
        return await self._get("/transactions", "transactions")

    async def get_stock_info(self, ticker: str) -> Any:
        if not ticker:
            raise ValueError("ticker must be a non-empty string")
        # Interpolated verbatim; callers pass URL-safe tickers.
        return await self._get(f"/stock/{ticker}", "stock info")

    async def get_all_stock_info(self) -> Any:
        return await self._get("/stock", "stock info")
