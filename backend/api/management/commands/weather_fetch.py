"""Management command to invoke the weather tool using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_weather_capability, parse_timestamp
from weather import WeatherError


class Command(BaseCommand):
    help = "Fetch the current temperature for a city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="City name, e.g. Paris")
        parser.add_argument("--at", type=str, help="ISO-8601 time the forecast is wanted for (logged only)")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options["city"]
        try:
            requested_at = parse_timestamp(options.get("at"))
        except ValueError as exc:
            raise CommandError("--at must be an ISO-8601 timestamp") from exc

        try:
            temperature = get_weather_capability().invoke(city, requested_at).unwrap()
        except WeatherError as exc:
            raise CommandError(f"{exc.kind.value}: {exc.reason}") from exc

        self.stdout.write(json.dumps({"city": city, "temperature_c": temperature}))
