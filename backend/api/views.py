"""REST API views exposing the weather capability."""
from __future__ import annotations

import threading
from datetime import datetime
from functools import lru_cache
from typing import Optional

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weather import ClientConfig, ErrorKind, Failure, WeatherCapability, WeatherClient


ERROR_STATUS = {
    ErrorKind.CITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_API_KEY: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.UPSTREAM_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.MALFORMED_RESPONSE: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.NETWORK_ERROR: status.HTTP_504_GATEWAY_TIMEOUT,
}


@lru_cache(maxsize=1)
def get_weather_capability() -> WeatherCapability:
    config = ClientConfig(
        api_key=settings.OPENWEATHERMAP_API_KEY,
        base_url=settings.OPENWEATHERMAP_BASE_URL,
        timeout=settings.WEATHER_HTTP_TIMEOUT,
    )
    return WeatherCapability(WeatherClient(config))


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 value, accepting a trailing ``Z``; raises ``ValueError``."""
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _failure_response(failure: Failure) -> Response:
    return Response(
        {"error": failure.kind.value, "detail": failure.reason},
        status=ERROR_STATUS[failure.kind],
    )


def _require_city(request) -> Optional[str]:
    city = request.query_params.get("city", "").strip()
    return city or None


class WeatherView(APIView):
    """Return the raw OpenWeatherMap document for a city."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        city = _require_city(request)
        if city is None:
            return Response({"detail": "city query parameter is required"}, status=status.HTTP_400_BAD_REQUEST)

        result = get_weather_capability().client.fetch(city)
        if not result.ok:
            return _failure_response(result)
        return Response(result.value, status=status.HTTP_200_OK)


class TemperatureView(APIView):
    """Return the current temperature for a city through the tool pipeline."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        city = _require_city(request)
        if city is None:
            return Response({"detail": "city query parameter is required"}, status=status.HTTP_400_BAD_REQUEST)
        try:
            requested_at = parse_timestamp(request.query_params.get("at"))
        except ValueError:
            return Response({"detail": "at must be an ISO-8601 timestamp"}, status=status.HTTP_400_BAD_REQUEST)

        result = get_weather_capability().invoke(city, requested_at)
        if not result.ok:
            return _failure_response(result)
        payload = {
            "city": city,
            "temperature_c": result.value,
            "requested_at": requested_at.isoformat() if requested_at else None,
        }
        return Response(payload, status=status.HTTP_200_OK)


class ToolsView(APIView):
    """List the tool descriptors an orchestration layer can register."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        return Response([WeatherCapability.tool_schema()], status=status.HTTP_200_OK)


class ThreadInfoView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        return Response({"thread": repr(threading.current_thread())}, status=status.HTTP_200_OK)
