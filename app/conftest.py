"""Pytest 配置文件"""

from collections.abc import Callable

import httpx
import pytest

from libs.http_tree import HttpClient

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_client():
    """Build HttpClient instances whose transport answers through ``handler``"""
    clients: list[HttpClient] = []

    def factory(handler: Handler, **kwargs) -> HttpClient:
        client = HttpClient(transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by ``recording_handler``"""
    return []


@pytest.fixture
def recording_handler(recorded_requests):
    """Handler that records each request and answers 200 with a JSON body"""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(200, json={"ok": True})

    return handler
