from __future__ import annotations

import pytest

from requests_mock import Mocker

from weather import ClientConfig, WeatherCapability, WeatherClient


BASE_URL = "https://owm.test/data/2.5/weather"
API_KEY = "test-key"


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture
def client(config: ClientConfig) -> WeatherClient:
    return WeatherClient(config)


@pytest.fixture
def capability(client: WeatherClient) -> WeatherCapability:
    return WeatherCapability(client)
