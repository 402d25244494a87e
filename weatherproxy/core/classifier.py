from __future__ import annotations

from weatherproxy.core.abstractions import TemperatureCondition

ABSOLUTE_ZERO_C = 273.15
COLD_BELOW_C = 10.0
HOT_FROM_C = 26.0


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - ABSOLUTE_ZERO_C


def classify_temperature(celsius: float) -> TemperatureCondition:
    """Bucket a Celsius reading into a coarse qualitative label.

    Each band includes its lower bound: 10.0 is Moderate and 26.0 is Hot.
    """
    if celsius < COLD_BELOW_C:
        return TemperatureCondition.COLD
    if COLD_BELOW_C <= celsius < HOT_FROM_C:
        return TemperatureCondition.MODERATE
    if celsius >= HOT_FROM_C:
        return TemperatureCondition.HOT
    return TemperatureCondition.UNKNOWN


__all__ = ["kelvin_to_celsius", "classify_temperature", "ABSOLUTE_ZERO_C", "COLD_BELOW_C", "HOT_FROM_C"]
