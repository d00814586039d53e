"""OpenWeatherMap temperature lookup packaged as an LLM tool."""
from __future__ import annotations

from .capability import WeatherCapability
from .client import WeatherClient
from .entities import ClientConfig, TemperatureReading, WeatherQuery
from .errors import ErrorKind, Failure, Result, Success, WeatherError
from .extractor import TemperatureExtractor

__all__ = [
    "ClientConfig",
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    "TemperatureExtractor",
    "TemperatureReading",
    "WeatherCapability",
    "WeatherClient",
    "WeatherError",
    "WeatherQuery",
]
