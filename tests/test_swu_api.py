"""Tests for the swu-db search client."""

import httpx
import pytest
import respx

from swu_cards.services.swu_api import search_cards
from swu_cards.utils import SWU_API_URL, USER_AGENT


@respx.mock(base_url=SWU_API_URL)
async def test_search_cards_returns_payload(respx_mock):
    route = respx_mock.get("/cards/search", params={"q": "Vader"}).mock(
        return_value=httpx.Response(200, json={
            "total_cards": 1,
            "data": [{"Set": "SOR", "Number": "010", "Name": "Darth Vader"}],
        })
    )

    payload = await search_cards("Vader")

    assert route.called
    assert payload["total_cards"] == 1
    assert payload["data"][0]["Name"] == "Darth Vader"
    assert route.calls.last.request.headers["User-Agent"] == USER_AGENT


@respx.mock(base_url=SWU_API_URL)
async def test_search_cards_sends_empty_filter(respx_mock):
    route = respx_mock.get("/cards/search").mock(
        return_value=httpx.Response(200, json={"data": []})
    )

    assert await search_cards("") == {"data": []}
    assert route.calls.last.request.url.params["q"] == ""


@respx.mock(base_url=SWU_API_URL)
async def test_search_cards_passes_malformed_payload_through(respx_mock):
    respx_mock.get("/cards/search").mock(
        return_value=httpx.Response(200, json={"data": "x"})
    )

    assert await search_cards("Luke") == {"data": "x"}


@respx.mock(base_url=SWU_API_URL)
async def test_search_cards_raises_on_http_error(respx_mock):
    respx_mock.get("/cards/search").mock(return_value=httpx.Response(503))

    with pytest.raises(httpx.HTTPStatusError):
        await search_cards("Vader")


@respx.mock(base_url=SWU_API_URL)
async def test_search_cards_raises_on_transport_error(respx_mock):
    respx_mock.get("/cards/search").mock(side_effect=httpx.ConnectTimeout("timeout"))

    with pytest.raises(httpx.ConnectTimeout, match="timeout"):
        await search_cards("Vader")
