from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from weather import ClientConfig, ErrorKind, Failure, Success, WeatherClient


BASE_URL = "https://owm.test/data/2.5/weather"


def _query(requests_mock) -> dict:
    return parse_qs(urlsplit(requests_mock.last_request.url).query)


def test_fetch_returns_raw_document(client: WeatherClient, requests_mock) -> None:
    document = {"main": {"temp": 11.2}, "name": "London"}
    requests_mock.get(BASE_URL, json=document)

    result = client.fetch("London")

    assert result == Success(document)
    assert _query(requests_mock) == {"q": ["London"], "units": ["metric"], "appid": ["test-key"]}
    assert requests_mock.call_count == 1


def test_fetch_encodes_city_into_single_query_parameter(client: WeatherClient, requests_mock) -> None:
    requests_mock.get(BASE_URL, json={"main": {"temp": 1}})

    client.fetch("Paris&appid=stolen key")

    query = _query(requests_mock)
    assert query["q"] == ["Paris&appid=stolen key"]
    assert query["appid"] == ["test-key"]


def test_fetch_passes_configured_timeout(requests_mock) -> None:
    client = WeatherClient(ClientConfig(api_key="k", base_url=BASE_URL, timeout=2.5))
    requests_mock.get(BASE_URL, json={"main": {"temp": 1}})

    client.fetch("Oslo")

    assert requests_mock.last_request.timeout == 2.5


def test_fetch_uses_injected_session(config: ClientConfig, requests_mock) -> None:
    requests_mock.get(BASE_URL, json={"main": {"temp": 1}})
    with requests.Session() as session:
        result = WeatherClient(config, session=session).fetch("Rome")

    assert result.ok
    assert requests_mock.call_count == 1


@pytest.mark.parametrize(
    "status_code,kind,reason",
    [
        (404, ErrorKind.CITY_NOT_FOUND, "City 'Nowhere' not found"),
        (401, ErrorKind.INVALID_API_KEY, "Invalid API key"),
        (400, ErrorKind.UPSTREAM_ERROR, "Error fetching weather for city 'Nowhere': HTTP 400"),
        (429, ErrorKind.UPSTREAM_ERROR, "Error fetching weather for city 'Nowhere': HTTP 429"),
        (500, ErrorKind.UPSTREAM_ERROR, "Error fetching weather for city 'Nowhere': HTTP 500"),
        (503, ErrorKind.UPSTREAM_ERROR, "Error fetching weather for city 'Nowhere': HTTP 503"),
    ],
)
def test_fetch_classifies_http_errors(client: WeatherClient, requests_mock, status_code, kind, reason) -> None:
    requests_mock.get(BASE_URL, status_code=status_code, text="upstream says no")

    result = client.fetch("Nowhere")

    assert result == Failure(kind, reason)
    assert requests_mock.call_count == 1


@pytest.mark.parametrize(
    "exc",
    [
        requests.exceptions.ConnectionError,
        requests.exceptions.ConnectTimeout,
        requests.exceptions.ReadTimeout,
        requests.exceptions.SSLError,
    ],
)
def test_fetch_classifies_transport_failures(client: WeatherClient, requests_mock, exc) -> None:
    requests_mock.get(BASE_URL, exc=exc)

    result = client.fetch("Lisbon")

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.NETWORK_ERROR
    assert requests_mock.call_count == 1


@pytest.mark.parametrize("body", ["", "  \n"])
def test_fetch_rejects_empty_body(client: WeatherClient, requests_mock, body) -> None:
    requests_mock.get(BASE_URL, status_code=200, text=body)

    result = client.fetch("London")

    assert result == Failure(
        ErrorKind.MALFORMED_RESPONSE, "Received null body from weather service for city 'London'"
    )


def test_fetch_rejects_json_null_body(client: WeatherClient, requests_mock) -> None:
    requests_mock.get(BASE_URL, text="null")

    result = client.fetch("London")

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.MALFORMED_RESPONSE


def test_fetch_rejects_non_json_body(client: WeatherClient, requests_mock) -> None:
    requests_mock.get(BASE_URL, text="<html>maintenance</html>")

    result = client.fetch("London")

    assert result == Failure(ErrorKind.MALFORMED_RESPONSE, "Error parsing weather data for city 'London'.")


@pytest.mark.parametrize("city", ["", "   ", None])
def test_fetch_fails_fast_on_blank_city(client: WeatherClient, requests_mock, city) -> None:
    requests_mock.get(BASE_URL, json={"main": {"temp": 1}})

    result = client.fetch(city)

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.MALFORMED_RESPONSE
    assert requests_mock.call_count == 0


def test_fetch_never_logs_api_key(client: WeatherClient, requests_mock, caplog) -> None:
    requests_mock.get(BASE_URL, status_code=500, text="boom")

    with caplog.at_level("INFO"):
        client.fetch("London")

    assert "test-key" not in caplog.text
    assert "HTTP 500" in caplog.text


def test_fetch_rejects_city_that_cannot_be_encoded(client: WeatherClient, requests_mock) -> None:
    requests_mock.get(BASE_URL, json={"main": {"temp": 1}})

    result = client.fetch("Par\ud800is")

    assert result == Failure(ErrorKind.MALFORMED_RESPONSE, "City must be valid UTF-8 text")
    assert requests_mock.call_count == 0
