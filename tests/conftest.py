"""Shared fixtures: a fake exchange behind httpx.MockTransport."""

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl

import httpx
import pytest

from binance_futures_request import Account, FuturesHttpClient, FuturesRequest

BASE_URL = "https://fapi.binance.com"


@dataclass
class MockExchange:
    """Routes (method, path) to canned JSON and records every request."""

    routes: dict[tuple[str, str], tuple[int, Any]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def route(self, method: str, path: str, payload: Any, status_code: int = 200) -> None:
        self.routes[(method, path)] = (status_code, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"code": -1, "msg": "no route"})
        status_code, payload = self.routes[key]
        if isinstance(payload, Exception):
            raise payload
        return httpx.Response(status_code, json=payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_query(self) -> str:
        return self.last_request.url.query.decode("ascii")

    def last_params(self) -> list[tuple[str, str]]:
        return parse_qsl(self.last_query(), keep_blank_values=True)


@pytest.fixture
def account() -> Account:
    return Account(id=1, name="main", api_key="test-api-key", api_secret="test-api-secret")


@pytest.fixture
def exchange() -> MockExchange:
    return MockExchange()


@pytest.fixture
def http_client(exchange: MockExchange) -> FuturesHttpClient:
    return FuturesHttpClient(transport=httpx.MockTransport(exchange.handler))


@pytest.fixture
def futures(http_client: FuturesHttpClient) -> FuturesRequest:
    return FuturesRequest(http_client, base_url=BASE_URL, default_asset="USDT")
