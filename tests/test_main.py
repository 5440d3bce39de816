import httpx
import pytest
from fastapi.testclient import TestClient

from vibe_etf.config import settings
from vibe_etf.main import app
from vibe_etf.schemas import DATA_SOURCE_MOCK, DATA_SOURCE_VIBE_API

client = TestClient(app)


@pytest.fixture
def mock_source(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "default_data_source", DATA_SOURCE_MOCK)


@pytest.fixture
def api_source(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "default_data_source", DATA_SOURCE_VIBE_API)
    monkeypatch.setattr(settings, "api_base_url", "https://vibe.example/api")


def _fake_upstream(monkeypatch: pytest.MonkeyPatch, routes: dict[str, httpx.Response]):
    async def fake_get(self, url: str, headers: dict[str, str] | None = None):
        path = url.removeprefix("https://vibe.example/api")
        response = routes.get(path, httpx.Response(404, json={"error": "missing"}))
        response.request = httpx.Request("GET", url)
        return response

    monkeypatch.setattr(httpx.AsyncClient, "get", fake_get)


def test_health_reports_configuration(mock_source):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["data_source"] == "mock"


def test_mock_portfolio_is_served(mock_source):
    response = client.get("/portfolio")
    assert response.status_code == 200
    body = response.json()
    assert list(body) == ["VTI", "QQQ", "ARKK"]
    assert body["QQQ"]["symbol"] == "QQQ"


def test_mock_unknown_stock_maps_to_404(mock_source):
    response = client.get("/stock/ZZZ")
    assert response.status_code == 404
    assert response.json() == {"detail": "Failed to fetch stock info", "resource": "stock info"}


def test_fixtures_endpoint_returns_preview_data(mock_source):
    response = client.get("/fixtures")
    assert response.status_code == 200
    body = response.json()
    assert [stock["symbol"] for stock in body["stocks"]] == ["VTI", "QQQ", "ARKK"]
    assert body["transactions"][0]["type"] == "BUY"
    assert body["stats"]["total_value"] == 47537.5


def test_api_portfolio_is_normalized(api_source, monkeypatch: pytest.MonkeyPatch):
    _fake_upstream(
        monkeypatch,
        {
            "/portfolio": httpx.Response(
                200,
                json={
                    "VTI": {
                        "current_price": 260.75,
                        "percentage": 54.8,
                        "performance": 4.1,
                        "monthly_performance": {},
                    }
                },
            )
        },
    )
    response = client.get("/portfolio")
    assert response.status_code == 200
    assert response.json() == {
        "VTI": {
            "symbol": "VTI",
            "current_price": 260.75,
            "percentage": 54.8,
            "performance": 4.1,
            "monthly_performance": {},
        }
    }


def test_api_server_error_maps_to_bad_gateway(api_source, monkeypatch: pytest.MonkeyPatch):
    _fake_upstream(monkeypatch, {"/transactions": httpx.Response(503, text="unavailable")})
    response = client.get("/transactions")
    assert response.status_code == 502
    assert response.json()["resource"] == "transactions"


def test_api_stock_info_is_served(api_source, monkeypatch: pytest.MonkeyPatch):
    _fake_upstream(
        monkeypatch,
        {
            "/stock/QQQ": httpx.Response(
                200,
                json={"ticker": "QQQ", "name": "Invesco QQQ Trust", "description": "NASDAQ-100."},
            )
        },
    )
    response = client.get("/stock/QQQ")
    assert response.status_code == 200
    assert response.json()["name"] == "Invesco QQQ Trust"
