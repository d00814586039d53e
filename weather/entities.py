from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for the OpenWeatherMap current weather endpoint.

    Built once at startup and handed to :class:`weather.client.WeatherClient`.
    ``timeout`` bounds every upstream call in seconds.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


@dataclass(frozen=True)
class WeatherQuery:
    city: str
    reference_time: Optional[datetime] = None


@dataclass(frozen=True)
class TemperatureReading:
    """Current temperature in Celsius, always a finite float."""

    celsius: float


__all__ = ["ClientConfig", "TemperatureReading", "WeatherQuery", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT"]
