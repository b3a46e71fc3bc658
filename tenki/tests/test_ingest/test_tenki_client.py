"""Tests for the tenki.jp page client with mocked httpx."""

import httpx
import pytest
import respx

from tenki.ingest.errors import InvalidLocationError, NetworkError
from tenki.ingest.tenki_client import TenkiClient
from tenki.models.common import Granularity

BASE = "https://test-tenki.example.com/forecast"
PAGE_3H = f"{BASE}/3/11/4020/8220/3hours.html"


@pytest.fixture
def client() -> TenkiClient:
    return TenkiClient(base_url=BASE + "/", timeout=1.0)


class TestForecastUrl:
    def test_3hours(self, client: TenkiClient):
        assert client.forecast_url("3/11/4020/8220", Granularity.EVERY_3H) == PAGE_3H

    def test_1hour(self, client: TenkiClient):
        url = client.forecast_url("3/11/4020/8220", Granularity.EVERY_1H)
        assert url.endswith("/3/11/4020/8220/1hour.html")

    @pytest.mark.parametrize(
        "key", ["", "/3/11", "3/11/", "3//11", "3/11?x=1", "3 11", "../etc", "3/11#top"]
    )
    def test_invalid_location(self, client: TenkiClient, key: str):
        with pytest.raises(InvalidLocationError):
            client.forecast_url(key, Granularity.EVERY_3H)


class TestGetForecastPage:
    @respx.mock
    def test_success(self, client: TenkiClient, sample_html: str):
        respx.get(PAGE_3H).mock(
            return_value=httpx.Response(200, content=sample_html.encode("utf-8"))
        )
        html = client.get_forecast_page("3/11/4020/8220", Granularity.EVERY_3H)
        assert "つくば市の天気" in html

    @respx.mock
    def test_user_agent_header(self, client: TenkiClient):
        route = respx.get(PAGE_3H).mock(return_value=httpx.Response(200, text="<html></html>"))
        client.get_forecast_page("3/11/4020/8220", Granularity.EVERY_3H)
        assert route.called
        assert "tenki-cli" in route.calls[0].request.headers["user-agent"]

    @respx.mock
    def test_not_found_is_network_error(self, client: TenkiClient):
        respx.get(PAGE_3H).mock(return_value=httpx.Response(404))
        with pytest.raises(NetworkError, match="404"):
            client.get_forecast_page("3/11/4020/8220", Granularity.EVERY_3H)

    @respx.mock
    def test_server_error_not_retried(self, client: TenkiClient):
        route = respx.get(PAGE_3H).mock(return_value=httpx.Response(503))
        with pytest.raises(NetworkError):
            client.get_forecast_page("3/11/4020/8220", Granularity.EVERY_3H)
        assert route.call_count == 1

    @respx.mock
    def test_transport_error(self, client: TenkiClient):
        respx.get(PAGE_3H).mock(side_effect=httpx.ConnectError("connection refused"))
        with pytest.raises(NetworkError, match="connection refused"):
            client.get_forecast_page("3/11/4020/8220", Granularity.EVERY_3H)

    @respx.mock
    def test_invalid_location_makes_no_request(self, client: TenkiClient):
        route = respx.get(url__startswith=BASE).mock(return_value=httpx.Response(200))
        with pytest.raises(InvalidLocationError):
            client.get_forecast_page("not a key", Granularity.EVERY_3H)
        assert not route.called
