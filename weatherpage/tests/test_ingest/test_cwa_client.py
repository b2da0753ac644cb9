"""Tests for CWA API client with mocked httpx."""

import httpx
import pytest
import respx

from weatherpage.ingest.cwa_client import CwaClient

FORECAST_URL = "https://test-cwa.example.com/api/v1/rest/datastore/F-C0032-001"


@pytest.fixture
def cwa() -> CwaClient:
    return CwaClient(base_url="https://test-cwa.example.com/", timeout=1.0)


class TestGetForecast:
    @respx.mock
    def test_success(self, cwa: CwaClient, taipei_forecast: dict):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=taipei_forecast)
        )

        result = cwa.get_forecast("臺北市")
        assert result["records"]["location"][0]["locationName"] == "臺北市"

    @respx.mock
    def test_query_params(
        self, cwa: CwaClient, taipei_forecast: dict, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("CWA_API_KEY", "CWA-TEST-KEY")
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=taipei_forecast)
        )

        cwa.get_forecast("臺北市")
        request = route.calls[0].request
        assert request.url.params["Authorization"] == "CWA-TEST-KEY"
        assert request.url.params["locationName"] == "臺北市"
        assert "weatherpage" in request.headers["user-agent"]

    @respx.mock
    def test_location_is_url_encoded(self, cwa: CwaClient, taipei_forecast: dict):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=taipei_forecast)
        )

        cwa.get_forecast("臺北市")
        raw_query = route.calls[0].request.url.query.decode("ascii")
        assert "locationName=%E8%87%BA%E5%8C%97%E5%B8%82" in raw_query

    @respx.mock
    def test_key_read_at_request_time(
        self, cwa: CwaClient, taipei_forecast: dict, monkeypatch: pytest.MonkeyPatch
    ):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=taipei_forecast)
        )

        monkeypatch.setenv("CWA_API_KEY", "first")
        cwa.get_forecast("臺北市")
        monkeypatch.setenv("CWA_API_KEY", "second")
        cwa.get_forecast("臺北市")

        assert route.calls[0].request.url.params["Authorization"] == "first"
        assert route.calls[1].request.url.params["Authorization"] == "second"

    @respx.mock
    def test_missing_key_passed_through_empty(
        self, cwa: CwaClient, taipei_forecast: dict, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=taipei_forecast)
        )

        cwa.get_forecast("臺北市")
        assert route.calls[0].request.url.params["Authorization"] == ""

    @respx.mock
    def test_custom_key_env(self, taipei_forecast: dict, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("OTHER_KEY", "abc")
        client = CwaClient(
            base_url="https://test-cwa.example.com", api_key_env="OTHER_KEY"
        )
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=taipei_forecast)
        )

        client.get_forecast("臺北市")
        assert route.calls[0].request.url.params["Authorization"] == "abc"

    @respx.mock
    def test_unauthorized_raises(self, cwa: CwaClient):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(401))

        with pytest.raises(httpx.HTTPStatusError):
            cwa.get_forecast("臺北市")

    @respx.mock
    def test_no_retry_on_server_error(self, cwa: CwaClient):
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(httpx.HTTPStatusError):
            cwa.get_forecast("臺北市")
        assert route.call_count == 1

    @respx.mock
    def test_timeout_raises_request_error(self, cwa: CwaClient):
        respx.get(FORECAST_URL).mock(side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(httpx.RequestError):
            cwa.get_forecast("臺北市")

    @respx.mock
    def test_non_json_body_raises_value_error(self, cwa: CwaClient):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )

        with pytest.raises(ValueError):
            cwa.get_forecast("臺北市")
