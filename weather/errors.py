"""Closed error taxonomy and result values for weather lookups."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Generic, TypeVar, Union


T = TypeVar("T")
U = TypeVar("U")


class ErrorKind(str, Enum):
    """Every failure of the weather pipeline maps to exactly one of these."""

    CITY_NOT_FOUND = "city_not_found"
    INVALID_API_KEY = "invalid_api_key"
    UPSTREAM_ERROR = "upstream_error"
    MALFORMED_RESPONSE = "malformed_response"
    NETWORK_ERROR = "network_error"


class WeatherError(RuntimeError):
    """Raised by :meth:`Failure.unwrap` for callers that prefer exceptions."""

    def __init__(self, kind: ErrorKind, reason: str) -> None:
        super().__init__(reason)
        self.kind = kind
        self.reason = reason


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    ok: ClassVar[bool] = True

    def then(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        return func(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    reason: str

    ok: ClassVar[bool] = False

    def then(self, func: Callable[[object], "Result[U]"]) -> "Failure":
        return self

    def unwrap(self):
        raise WeatherError(self.kind, self.reason)


Result = Union[Success[T], Failure]


__all__ = ["ErrorKind", "Failure", "Result", "Success", "WeatherError"]
