"""HTTP client for the OpenWeatherMap current weather endpoint."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from requests import Response

from .entities import ClientConfig
from .errors import ErrorKind, Failure, Result, Success


class WeatherClient:
    """Fetch raw weather documents and classify every failure.

    A single GET is issued per call, bounded by ``config.timeout`` and never
    retried. Without an injected session each call goes through
    ``requests.get`` so no connection state is shared between callers.
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session
        self._log = logging.getLogger(self.__class__.__name__)

    def fetch(self, city: str) -> Result[Any]:
        if not isinstance(city, str) or not city.strip():
            self._log.warning("Refusing weather lookup for blank city %r", city)
            return Failure(ErrorKind.MALFORMED_RESPONSE, "City must be a non-empty string")
        try:
            city.encode("utf-8")
        except UnicodeEncodeError:
            self._log.warning("Refusing weather lookup for city %r that is not valid UTF-8", city)
            return Failure(ErrorKind.MALFORMED_RESPONSE, "City must be valid UTF-8 text")

        try:
            response = self._get(self._params(city))
        except requests.Timeout as exc:
            self._log.error("Weather request for city '%s' timed out", city, exc_info=exc)
            return Failure(ErrorKind.NETWORK_ERROR, f"Timed out fetching weather data for city '{city}'")
        except requests.RequestException as exc:
            self._log.error("Error fetching weather data for city '%s': %s", city, exc, exc_info=exc)
            return Failure(ErrorKind.NETWORK_ERROR, f"Error fetching weather data for city '{city}': {exc}")
        return self._handle_response(response, city)

    # helpers ------------------------------------------------------------
    def _params(self, city: str) -> Dict[str, str]:
        return {"q": city, "units": "metric", "appid": self.config.api_key}

    def _get(self, params: Dict[str, str]) -> Response:
        get = self.session.get if self.session is not None else requests.get
        return get(self.config.base_url, params=params, timeout=self.config.timeout)

    def _handle_response(self, response: Response, city: str) -> Result[Any]:
        status_code = response.status_code
        if status_code == 404:
            self._log.warning("City '%s' not found", city)
            return Failure(ErrorKind.CITY_NOT_FOUND, f"City '{city}' not found")
        if status_code == 401:
            self._log.error("Invalid API key.")
            return Failure(ErrorKind.INVALID_API_KEY, "Invalid API key")
        if status_code >= 400:
            self._log.error(
                "Error fetching weather for city '%s': HTTP %s %s", city, status_code, response.text[:500]
            )
            return Failure(ErrorKind.UPSTREAM_ERROR, f"Error fetching weather for city '{city}': HTTP {status_code}")

        if not response.content.strip():
            return self._null_body(city)
        try:
            document = response.json()
        except ValueError as exc:
            self._log.error("Error parsing weather JSON for city '%s'", city, exc_info=exc)
            return Failure(ErrorKind.MALFORMED_RESPONSE, f"Error parsing weather data for city '{city}'.")
        if document is None:
            return self._null_body(city)
        return Success(document)

    def _null_body(self, city: str) -> Failure:
        self._log.error("Received null body from weather service for city '%s'", city)
        return Failure(ErrorKind.MALFORMED_RESPONSE, f"Received null body from weather service for city '{city}'")


__all__ = ["WeatherClient"]
