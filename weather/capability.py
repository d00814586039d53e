"""Weather lookup exposed as a tool for an LLM orchestration layer."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from .client import WeatherClient
from .entities import WeatherQuery
from .errors import ErrorKind, Failure, Result, Success
from .extractor import TemperatureExtractor


class WeatherCapability:
    """Compose :class:`WeatherClient` and :class:`TemperatureExtractor`.

    ``reference_time`` is only logged. The upstream endpoint returns current
    conditions, so asking for a later time still yields today's reading.
    """

    name = "weather_forecast"
    description = "Returns the weather forecast for a given city"

    def __init__(self, client: WeatherClient, extractor: Optional[TemperatureExtractor] = None) -> None:
        self.client = client
        self.extractor = extractor or TemperatureExtractor()
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def invoke(self, city: str, reference_time: Optional[datetime] = None) -> Result[float]:
        query = WeatherQuery(city=city, reference_time=reference_time)
        self._log.info("--> Getting weather forecast for %s --> %s", query.reference_time, query.city)
        result = self.client.fetch(query.city).then(lambda document: self.extractor.extract(document, query.city))
        if result.ok:
            self._log.info(
                "<-- Weather forecast for %s --> %s: %s", query.reference_time, query.city, result.value.celsius
            )
            return Success(result.value.celsius)
        self._log.info(
            "<-- Weather forecast for %s --> %s failed: %s", query.reference_time, query.city, result.kind.value
        )
        return result

    def call(self, arguments: Mapping[str, Any]) -> Result[float]:
        """Dispatch a tool call whose arguments follow :meth:`tool_schema`."""
        raw_time = arguments.get("localDateTime")
        reference_time = None
        if raw_time:
            try:
                reference_time = datetime.fromisoformat(str(raw_time).replace("Z", "+00:00"))
            except ValueError:
                return Failure(ErrorKind.MALFORMED_RESPONSE, f"localDateTime '{raw_time}' is not an ISO-8601 timestamp")
        return self.invoke(arguments.get("city", ""), reference_time)

    @classmethod
    def tool_schema(cls) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": cls.name,
                "description": cls.description,
                "parameters": {
                    "type": "object",
                    "properties": {
                        "city": {
                            "type": "string",
                            "description": "City name, e.g. Paris",
                        },
                        "localDateTime": {
                            "type": "string",
                            "format": "date-time",
                            "description": (
                                "Local date and time the forecast is wanted for (ISO-8601). "
                                "Optional; only logged, the reading is always current conditions"
                            ),
                        },
                    },
                    "required": ["city"],
                },
                "returns": {"type": "number", "description": "Temperature in degrees Celsius"},
            },
        }

    @staticmethod
    def tool_result(result: Result[float]) -> Dict[str, Any]:
        if result.ok:
            return {"temperature": result.value}
        return {"error": result.kind.value, "detail": result.reason}


__all__ = ["WeatherCapability"]
