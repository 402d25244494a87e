"""Turn a decoded upstream payload into the proxy's response body."""
from __future__ import annotations

from weatherproxy.core.abstractions import ClassifiedWeather, UpstreamWeather
from weatherproxy.core.classifier import classify_temperature, kelvin_to_celsius
from weatherproxy.core.providers.base import EmptyConditionsError

TEMPERATURE_FORMAT = "{:.2f}°C"


def compose_weather(weather: UpstreamWeather) -> ClassifiedWeather:
    if not weather.conditions:
        raise EmptyConditionsError("malformed upstream response: no weather conditions")

    celsius = kelvin_to_celsius(weather.temperature_kelvin)
    return ClassifiedWeather(
        weather_condition=weather.conditions[0].main,
        temperature=TEMPERATURE_FORMAT.format(celsius),
        temperature_condition=classify_temperature(celsius),
    )


__all__ = ["compose_weather", "TEMPERATURE_FORMAT"]
