"""REST API view for the weather lookup."""
from __future__ import annotations

import logging
from typing import Optional

from django.core.exceptions import ImproperlyConfigured
from rest_framework import status
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from weatherproxy.api.middleware import CORRELATION_HEADER, generate_correlation_id
from weatherproxy.core.abstractions import WeatherQuery
from weatherproxy.core.composer import compose_weather
from weatherproxy.core.config import ProxyConfig
from weatherproxy.core.providers.base import UpstreamError
from weatherproxy.core.providers.openweather import OpenWeatherClient


logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED_MESSAGE = "Only GET method is allowed"
MISSING_PARAMS_MESSAGE = "lat and lon parameters are required"
REDACTED_UPSTREAM_MESSAGE = "upstream weather service unavailable"


class JSONOnlyNegotiation(BaseContentNegotiation):
    """Always answer with JSON, whatever the client asked for."""

    def select_parser(self, request, parsers):
        return parsers[0] if parsers else None

    def select_renderer(self, request, renderers, format_suffix=None):
        return renderers[0], renderers[0].media_type


class WeatherView(APIView):
    """Proxy the current weather for the requested coordinates."""

    permission_classes = [AllowAny]
    authentication_classes: list = []
    renderer_classes = [JSONRenderer]
    content_negotiation_class = JSONOnlyNegotiation
    http_method_names = ["get"]

    config: Optional[ProxyConfig] = None

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the classified weather for ``lat``/``lon``."""
        correlation_id = self._correlation_id(request)
        latitude = request.query_params.get("lat", "")
        longitude = request.query_params.get("lon", "")
        if not latitude or not longitude:
            return self._error(status.HTTP_400_BAD_REQUEST, MISSING_PARAMS_MESSAGE, correlation_id)

        config = self.get_config()
        query = WeatherQuery(latitude=latitude, longitude=longitude)
        try:
            with OpenWeatherClient.from_config(config) as client:
                weather = compose_weather(client.fetch(query))
        except UpstreamError as exc:
            if config.expose_errors:
                message = str(exc)
            else:
                logger.error("[%s] Upstream failure: %s", correlation_id, exc)
                message = REDACTED_UPSTREAM_MESSAGE
            return self._error(status.HTTP_500_INTERNAL_SERVER_ERROR, message, correlation_id)

        return Response(weather.as_dict(), headers={CORRELATION_HEADER: correlation_id})

    def http_method_not_allowed(self, request, *args, **kwargs):
        return self._error(
            status.HTTP_405_METHOD_NOT_ALLOWED,
            METHOD_NOT_ALLOWED_MESSAGE,
            self._correlation_id(request),
        )

    def get_config(self) -> ProxyConfig:
        if self.config is None:
            raise ImproperlyConfigured("WeatherView requires a ProxyConfig; build it with as_view(config=...)")
        return self.config

    @staticmethod
    def _correlation_id(request) -> str:
        correlation_id = getattr(request, "correlation_id", None)
        if not correlation_id:
            correlation_id = generate_correlation_id()
            request.correlation_id = correlation_id
        return correlation_id

    @staticmethod
    def _error(status_code: int, message: str, correlation_id: str) -> Response:
        logger.error("[%s] Error: %s", correlation_id, message)
        return Response(
            {"error": message, "correlation_id": correlation_id},
            status=status_code,
            headers={CORRELATION_HEADER: correlation_id},
        )
