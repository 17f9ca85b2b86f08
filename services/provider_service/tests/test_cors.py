"""CORS behaviour of the Provider Service at the ASGI layer."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from clockrelay_service_libs.quart_app import ClockRelayQuartApp


@pytest.fixture
async def asgi_client(provider_app: ClockRelayQuartApp) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=provider_app), base_url="http://provider"
    ) as ac:
        yield ac


async def test_preflight_allows_any_origin_method_and_header(asgi_client: AsyncClient) -> None:
    response = await asgi_client.options(
        "/time",
        headers={
            "Origin": "http://example.org",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "x-anything",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


async def test_time_response_carries_cors_header(asgi_client: AsyncClient) -> None:
    response = await asgi_client.get(
        "/time", params={"timezone": "CET"}, headers={"Origin": "http://example.org"}
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.json()["timezone"] == "CET"
