"""Defensive temperature extraction from raw OpenWeatherMap documents."""
from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from .entities import TemperatureReading
from .errors import ErrorKind, Failure, Result, Success


class TemperatureExtractor:
    """Read ``main.temp`` without trusting the shape of the document.

    The walk is a chain of fallible lookups; the first failing step decides
    the reason returned with ``MALFORMED_RESPONSE``. Nothing else in the
    document is inspected.
    """

    def __init__(self) -> None:
        self._log = logging.getLogger(self.__class__.__name__)

    def extract(self, document: Any, city: str) -> Result[TemperatureReading]:
        try:
            result = (
                _field(document, "main", f"Weather data for city '{city}' is missing 'main' object.")
                .then(lambda main: _field(main, "temp", f"Weather data for city '{city}' is missing 'temp' field in 'main' object."))
                .then(lambda temp: _number(temp, f"Temperature field for city '{city}' is not a number."))
                .then(lambda temp: _finite(temp, f"Temperature field for city '{city}' is not a finite number."))
            )
        except Exception as exc:  # noqa: BLE001 - any traversal fault is a malformed document
            self._log.error("Unexpected error processing temperature for city '%s'", city, exc_info=exc)
            return Failure(ErrorKind.MALFORMED_RESPONSE, f"Unexpected error processing temperature for city '{city}'.")

        if not result.ok:
            self._log.error("%s Response: %r", result.reason, document)
        return result


def _field(node: Any, name: str, reason: str) -> Result[Any]:
    if not isinstance(node, Mapping):
        return Failure(ErrorKind.MALFORMED_RESPONSE, reason)
    value = node.get(name)
    if value is None:
        return Failure(ErrorKind.MALFORMED_RESPONSE, reason)
    return Success(value)


def _number(value: Any, reason: str) -> Result[Any]:
    # bool is an int subclass but never a temperature
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return Failure(ErrorKind.MALFORMED_RESPONSE, reason)
    return Success(value)


def _finite(value: Any, reason: str) -> Result[TemperatureReading]:
    try:
        celsius = float(value)
    except OverflowError:
        return Failure(ErrorKind.MALFORMED_RESPONSE, reason)
    if not math.isfinite(celsius):
        return Failure(ErrorKind.MALFORMED_RESPONSE, reason)
    return Success(TemperatureReading(celsius=celsius))


__all__ = ["TemperatureExtractor"]
