"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from nutriscan.adapters.open_food_facts_client import HttpxOpenFoodFactsClient


def _client(handler) -> HttpxOpenFoodFactsClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxOpenFoodFactsClient(
        base_url="https://off.test",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_get_product_returns_product_record() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v2/product/5901234123457.json"
        assert "nutriments" in request.url.params["fields"]
        return httpx.Response(
            200,
            json={
                "code": "5901234123457",
                "status": 1,
                "product": {"product_name": "Energy Drink", "brands": "PowerBoost"},
            },
        )

    product = asyncio.run(_client(handler).get_product("5901234123457"))

    assert product == {"product_name": "Energy Drink", "brands": "PowerBoost"}


def test_get_product_returns_none_when_unknown() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/00000000.json"):
            return httpx.Response(404, json={"status": 0})
        return httpx.Response(
            200, json={"status": 0, "status_verbose": "product not found"}
        )

    client = _client(handler)

    assert asyncio.run(client.get_product("00000000")) is None
    assert asyncio.run(client.get_product("12345678")) is None


def test_get_product_raises_on_server_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(_client(handler).get_product("12345678"))


def test_create_sets_user_agent() -> None:
    client = HttpxOpenFoodFactsClient.create(
        base_url="https://off.test/", user_agent="NutriScan/test"
    )

    assert client.base_url == "https://off.test"
    assert client.http_client.headers["User-Agent"] == "NutriScan/test"
    asyncio.run(client.close())
