"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weatherproxy.api.views import MISSING_PARAMS_MESSAGE
from weatherproxy.core.abstractions import WeatherQuery
from weatherproxy.core.composer import compose_weather
from weatherproxy.core.config import MissingAPIKeyError, ProxyConfig
from weatherproxy.core.providers.base import UpstreamError
from weatherproxy.core.providers.openweather import OpenWeatherClient


class Command(BaseCommand):
    help = "Fetch and classify the current weather for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--lat", type=str, help="Latitude")
        parser.add_argument("--lon", type=str, help="Longitude")
        parser.add_argument("-apikey", "--apikey", dest="apikey", default="", help="OpenWeather API key")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        latitude = options.get("lat") or ""
        longitude = options.get("lon") or ""
        if not latitude or not longitude:
            raise CommandError(MISSING_PARAMS_MESSAGE)

        try:
            config = ProxyConfig.from_settings(api_key=options.get("apikey"))
        except MissingAPIKeyError as exc:
            raise CommandError(str(exc)) from exc

        try:
            with OpenWeatherClient.from_config(config) as client:
                weather = compose_weather(client.fetch(WeatherQuery(latitude=latitude, longitude=longitude)))
        except UpstreamError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(weather.as_dict(), ensure_ascii=False))
