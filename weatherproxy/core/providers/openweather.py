"""OpenWeather current-weather client."""
from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote, quote_plus

import requests

from weatherproxy.core.abstractions import UpstreamWeather, WeatherCondition, WeatherQuery
from weatherproxy.core.config import DEFAULT_OPENWEATHER_URL, ProxyConfig
from weatherproxy.core.providers.base import UpstreamDecodeError, UpstreamError


logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Single-attempt client for the OpenWeather current weather endpoint."""

    name = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_OPENWEATHER_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: ProxyConfig, session: Optional[requests.Session] = None) -> "OpenWeatherClient":
        return cls(api_key=config.api_key, base_url=config.base_url, timeout=config.timeout, session=session)

    def fetch(self, query: WeatherQuery) -> UpstreamWeather:  # noqa: D401
        """Return the decoded upstream payload for the given coordinates."""
        params = {"lat": query.latitude, "lon": query.longitude, "appid": self.api_key}
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            message = self._mask_key(str(exc) or exc.__class__.__name__)
            logger.error("OpenWeather request failed: %s", message)
            raise UpstreamError(message) from exc

        with response:
            self._handle_status(response)
            return self._decode(response)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _handle_status(self, response: requests.Response) -> None:
        if response.status_code < 400:
            return
        detail = self._provider_message(response)
        logger.warning("OpenWeather returned %s: %s", response.status_code, detail)
        message = f"upstream returned HTTP {response.status_code}"
        if detail:
            message = f"{message}: {detail}"
        raise UpstreamError(message)

    def _decode(self, response: requests.Response) -> UpstreamWeather:
        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("OpenWeather body is not valid JSON: %s", exc)
            raise UpstreamDecodeError(str(exc)) from exc

        try:
            conditions = tuple(self._condition(item) for item in payload["weather"])
            temperature = self._temperature(payload["main"]["temp"])
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            logger.error("OpenWeather payload has an unexpected shape: %r", exc)
            raise UpstreamDecodeError(f"unexpected upstream payload ({type(exc).__name__}: {exc})") from exc

        return UpstreamWeather(conditions=conditions, temperature_kelvin=temperature)

    @staticmethod
    def _condition(item: Any) -> WeatherCondition:
        main = item["main"]
        if not isinstance(main, str):
            raise TypeError(f"weather[].main must be a string, got {type(main).__name__}")
        return WeatherCondition(main=main)

    @staticmethod
    def _temperature(value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"main.temp must be a number, got {type(value).__name__}")
        return float(value)

    def _mask_key(self, text: str) -> str:
        # requests embeds the full URL, appid included and form-encoded, in connection errors.
        if not self.api_key:
            return text
        variants = {self.api_key, quote_plus(self.api_key), quote(self.api_key, safe="")}
        for variant in sorted(variants, key=len, reverse=True):
            text = text.replace(variant, "***")
        return text

    @staticmethod
    def _provider_message(response: requests.Response) -> str:
        try:
            body: Any = response.json()
        except ValueError:
            return response.text[:200]
        if isinstance(body, dict):
            return str(body.get("message", ""))
        return ""


__all__ = ["OpenWeatherClient"]
