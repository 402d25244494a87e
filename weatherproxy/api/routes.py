"""Route factory shared by the URLconf and the config-bound WSGI handler."""
from __future__ import annotations

from typing import List

from django.urls import URLPattern, path

from weatherproxy.api.views import WeatherView
from weatherproxy.core.config import ProxyConfig


def build_urlpatterns(config: ProxyConfig) -> List[URLPattern]:
    """Return the API routes bound to ``config``."""
    return [
        path("weather", WeatherView.as_view(config=config), name="weather"),
    ]


__all__ = ["build_urlpatterns"]
