from .base import EmptyConditionsError, UpstreamDecodeError, UpstreamError
from .openweather import OpenWeatherClient

__all__ = ["OpenWeatherClient", "UpstreamError", "UpstreamDecodeError", "EmptyConditionsError"]
