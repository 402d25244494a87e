"""Core data model for the weather proxy."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


@dataclass(frozen=True)
class WeatherQuery:
    """Raw coordinates as received on the query string."""

    latitude: str
    longitude: str


@dataclass(frozen=True)
class WeatherCondition:
    main: str


@dataclass(frozen=True)
class UpstreamWeather:
    """Subset of the provider payload the proxy relies on.

    Only the first entry of ``conditions`` is ever read.
    """

    conditions: Tuple[WeatherCondition, ...]
    temperature_kelvin: float


class TemperatureCondition(str, Enum):
    COLD = "Cold"
    MODERATE = "Moderate"
    HOT = "Hot"
    # Only reachable for NaN.
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ClassifiedWeather:
    """Outward response body for a successful lookup."""

    weather_condition: str
    temperature: str
    temperature_condition: TemperatureCondition

    def as_dict(self) -> Dict[str, str]:
        return {
            "weather_condition": self.weather_condition,
            "temperature": self.temperature,
            "temperature_condition": self.temperature_condition.value,
        }


__all__ = [
    "WeatherQuery",
    "WeatherCondition",
    "UpstreamWeather",
    "TemperatureCondition",
    "ClassifiedWeather",
]
